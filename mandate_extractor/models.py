"""Data models for mandate extractor."""

from dataclasses import dataclass, field
from typing import Optional, Union

from mandate_extractor.exceptions import ExtractionError


@dataclass(frozen=True)
class ExtractionResult:
    """Result of a successful last-page extraction."""

    input_path: str
    output_path: str
    total_pages: int  # Page count of the source document
    success: bool = True


@dataclass(frozen=True)
class FailureResult:
    """Outcome recorded for an input whose extraction failed."""

    input_path: str
    error: ExtractionError
    output_path: Optional[str] = None
    total_pages: int = 0
    success: bool = False


Outcome = Union[ExtractionResult, FailureResult]


@dataclass
class BatchReport:
    """Aggregate outcome of a batch run.

    ``results`` follows input order; ``errors`` follows completion order.
    """

    results: list[Outcome] = field(default_factory=list)
    succeeded: int = 0
    failed: int = 0
    errors: list[ExtractionError] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "BatchReport":
        return cls(results=[], succeeded=0, failed=0, errors=[])
