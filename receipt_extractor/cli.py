"""CLI commands for extracting receipt fields from text files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

import click

from receipt_extractor.api.schemas import extraction_result_schema
from receipt_extractor.config import get_config
from receipt_extractor.errors import ExtractionInputError, ReceiptExtractorError
from receipt_extractor.services.amount_extractor import normalize_money
from receipt_extractor.services.batch import extract_many
from receipt_extractor.services.receipt_parser import ReceiptParser

logger = logging.getLogger(__name__)


def read_receipt_text(source: str) -> str:
    """Read receipt text from a file path, or from stdin when ``source`` is ``-``.

    Raises:
        ExtractionInputError: If the file is missing, unreadable or not valid UTF-8
    """
    if source == "-":
        return click.get_text_stream("stdin").read()

    try:
        return Path(source).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ExtractionInputError(source, "file not found") from None
    except UnicodeDecodeError as e:
        raise ExtractionInputError(source, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise ExtractionInputError(source, e.strerror or str(e)) from e


@click.group("receipt-extractor")
def cli():
    """Receipt field extraction commands."""
    try:
        config = get_config()
    except ReceiptExtractorError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@cli.command("extract")
@click.argument("paths", nargs=-1, required=True)
@click.option("--debug", is_flag=True, help="Log lines and per-field results while extracting")
@click.option("--debug-dir", type=click.Path(file_okay=False), help="Write normalized text here when debugging")
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
def extract_command(paths: tuple[str, ...], debug: bool, debug_dir: str | None, pretty: bool) -> None:
    """Extract merchant, total and purchase date from receipt text files.

    Args:
        paths: Text files to read (use - for stdin)
        debug: Enable diagnostics (also enabled by PARSER_DEBUG)
        debug_dir: Override PARSER_DEBUG_DIR from the environment
        pretty: Indent the JSON output
    """
    config = get_config()
    options = config.parser_options()
    diagnostics = debug or config.PARSER_DEBUG
    options["enable_diagnostics"] = diagnostics
    if diagnostics:
        options["debug_dir"] = debug_dir or config.PARSER_DEBUG_DIR
        options["diagnostic_sink"] = logger.info
    else:
        options["debug_dir"] = None

    try:
        texts = [read_receipt_text(path) for path in paths]
    except ReceiptExtractorError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    parser = ReceiptParser(**options)
    if diagnostics or len(texts) == 1:
        # Sequential so diagnostic output and debug files stay per document
        results = [parser.parse(text, document_id=_document_id(path)) for path, text in zip(paths, texts)]
    else:
        results = extract_many(texts, parser=parser, max_workers=config.BATCH_WORKERS)

    payload = [
        extraction_result_schema.dump({**fields.to_dict(), "source": path}) for path, fields in zip(paths, results)
    ]
    output = payload[0] if len(payload) == 1 else payload
    click.echo(json.dumps(output, indent=2 if pretty else None))


@cli.command("normalize-amount")
@click.argument("value")
def normalize_amount_command(value: str) -> None:
    """Print VALUE as a normalized decimal amount, or null if it is not numeric."""
    amount = normalize_money(value)
    click.echo("null" if amount is None else str(amount))


def _document_id(path: str) -> str | None:
    return None if path == "-" else Path(path).stem


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
