"""High-level API for last-page extraction."""

import contextvars
from typing import Optional, Sequence

from mandate_extractor.batch import BatchProcessor
from mandate_extractor.config import BatchConfig, ExtractorConfig, ProgressCallback
from mandate_extractor.extractor import LastPageExtractor
from mandate_extractor.logger import set_run_id
from mandate_extractor.models import BatchReport, ExtractionResult


def extract_last_page(
    input_path: str,
    output_dir: Optional[str] = None,
    config: Optional[ExtractorConfig] = None,
) -> ExtractionResult:
    """Extract the last page of a single PDF.

    Args:
        input_path: Source PDF path
        output_dir: Destination directory (defaults to the input's directory)
        config: Extractor configuration (optional, uses defaults if not provided)

    Returns:
        ExtractionResult with the output path and source page count

    Raises:
        ExtractionError: If the input is missing, corrupt, empty, or the
            output cannot be written

    Examples:
        >>> result = extract_last_page("contracts/lease.pdf")
        >>> print(result.output_path)
    """
    return LastPageExtractor(config=config).extract(input_path, output_dir)


def process_multiple_pdfs(
    input_paths: Sequence[str],
    concurrency: int = 5,
    output_dir: Optional[str] = None,
    continue_on_error: bool = True,
    on_progress: Optional[ProgressCallback] = None,
    extractor_config: Optional[ExtractorConfig] = None,
) -> BatchReport:
    """Extract the last page of many PDFs concurrently.

    Args:
        input_paths: Source PDF paths
        concurrency: Maximum number of extractions in flight
        output_dir: Shared destination directory (optional)
        continue_on_error: Record failures and continue (default) or abort
            on the first failure
        on_progress: Callback ``(completed, total, outcome)`` per finished input
        extractor_config: Extractor configuration (optional)

    Returns:
        BatchReport with outcomes in input order

    Raises:
        ValueError: If concurrency is not a positive integer
        ExtractionError: First failure, when continue_on_error is False

    Examples:
        >>> report = process_multiple_pdfs(["a.pdf", "b.pdf"], concurrency=2)
        >>> print(report.succeeded, report.failed)
    """
    config = BatchConfig(
        concurrency=concurrency,
        output_dir=output_dir,
        continue_on_error=continue_on_error,
        on_progress=on_progress,
    )
    processor = BatchProcessor(extractor=LastPageExtractor(config=extractor_config))

    # Run ID is scoped to this batch
    context = contextvars.copy_context()
    context.run(set_run_id)
    return context.run(processor.run, input_paths, config)
