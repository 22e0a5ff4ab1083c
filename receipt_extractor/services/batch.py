"""Batch extraction across many receipt documents."""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
import logging

from receipt_extractor.services.receipt_parser import ExtractedFields, ReceiptParser

logger = logging.getLogger(__name__)

DEFAULT_BATCH_WORKERS = 4


def extract_many(
    texts: Iterable[str],
    parser: ReceiptParser | None = None,
    max_workers: int | None = None,
) -> list[ExtractedFields]:
    """Extract fields from several receipt texts in parallel.

    Work is split per document; results are returned in input order.

    Args:
        texts: Raw receipt texts
        parser: Parser shared by all workers (a default parser if omitted)
        max_workers: Thread pool size (defaults to DEFAULT_BATCH_WORKERS)

    Returns:
        One ExtractedFields per input text
    """
    documents = list(texts)
    if not documents:
        return []

    parser = parser or ReceiptParser()
    workers = max(1, min(max_workers or DEFAULT_BATCH_WORKERS, len(documents)))
    logger.info(f"Extracting {len(documents)} receipts with {workers} workers")

    results_map: dict[int, ExtractedFields] = {}
    if workers == 1:
        for index, text in enumerate(documents):
            results_map[index] = parser.parse(text)
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(parser.parse, text): index for index, text in enumerate(documents)}
            for future in as_completed(futures):
                results_map[futures[future]] = future.result()

    return [results_map[index] for index in sorted(results_map)]
