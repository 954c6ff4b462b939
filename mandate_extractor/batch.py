"""Batch orchestration with bounded concurrency."""

import contextvars
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Optional, Sequence

from mandate_extractor.config import BatchConfig
from mandate_extractor.exceptions import ExtractionError
from mandate_extractor.extractor import LastPageExtractor
from mandate_extractor.logger import Timer, get_logger
from mandate_extractor.models import BatchReport, FailureResult, Outcome

logger = get_logger(__name__)


class BatchProcessor:
    """Runs a last-page extractor over many inputs on a bounded thread pool.

    Inputs are queued up front; each worker takes the next one as soon as it
    finishes, so at most ``concurrency`` extractions are in flight.
    """

    def __init__(self, extractor: Optional[LastPageExtractor] = None) -> None:
        """Initialize batch processor.

        Args:
            extractor: Single-file extractor shared by all workers. If None,
                creates default.
        """
        self.extractor = extractor or LastPageExtractor()

    def run(
        self, input_paths: Sequence[str], config: Optional[BatchConfig] = None
    ) -> BatchReport:
        """Extract the last page of every input with at most
        ``config.concurrency`` extractions in flight.

        Workers pick up queued inputs as soon as one finishes. Outcomes are
        stored at their input index; progress callbacks and ``errors`` follow
        completion order.

        Args:
            input_paths: Source PDF paths
            config: Batch configuration. If None, uses defaults.

        Returns:
            BatchReport with one outcome per input

        Raises:
            ExtractionError: First failure, when ``continue_on_error`` is False
        """
        config = config or BatchConfig()
        input_paths = [str(path) for path in input_paths]
        total = len(input_paths)

        if total == 0:
            return BatchReport.empty()

        logger.info(
            "Starting batch",
            extra_data={"file_count": total, "concurrency": config.concurrency},
        )

        results: list[Optional[Outcome]] = [None] * total
        errors: list[ExtractionError] = []
        completed = 0

        with Timer("batch") as batch_timer:
            with ThreadPoolExecutor(max_workers=config.concurrency) as executor:
                future_to_index: dict[Future, int] = {
                    # Each task gets its own context copy so the run ID reaches the worker
                    executor.submit(
                        contextvars.copy_context().run,
                        self.extractor.extract,
                        input_path,
                        config.output_dir,
                    ): index
                    for index, input_path in enumerate(input_paths)
                }

                for future in as_completed(future_to_index):
                    index = future_to_index[future]
                    try:
                        outcome: Outcome = future.result()
                    except ExtractionError as exc:
                        outcome = FailureResult(input_path=input_paths[index], error=exc)
                        errors.append(exc)

                    results[index] = outcome
                    completed += 1
                    if config.on_progress:
                        config.on_progress(completed, total, outcome)

                    if not outcome.success and not config.continue_on_error:
                        cancelled = sum(1 for f in future_to_index if f.cancel())
                        logger.warning(
                            "Aborting batch on first failure",
                            extra_data={
                                "file_path": input_paths[index],
                                "completed": completed,
                                "cancelled": cancelled,
                            },
                        )
                        raise outcome.error

        succeeded = sum(1 for result in results if result is not None and result.success)
        failed = total - succeeded

        logger.info(
            "Batch completed",
            extra_data={
                "file_count": total,
                "succeeded": succeeded,
                "failed": failed,
                "batch_time_ms": batch_timer.get_elapsed_ms(),
            },
        )

        return BatchReport(
            results=results,
            succeeded=succeeded,
            failed=failed,
            errors=errors,
        )
