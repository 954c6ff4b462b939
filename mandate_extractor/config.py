"""Configuration classes for mandate extractor."""

from dataclasses import dataclass
from typing import Callable, Optional

from mandate_extractor.models import Outcome

ProgressCallback = Callable[[int, int, Outcome], None]


@dataclass
class ExtractorConfig:
    """Configuration for single-file extraction.

    Examples:
        >>> # Default configuration
        >>> config = ExtractorConfig()

        >>> # Reject encrypted input, keep output bytes uncompressed
        >>> config = ExtractorConfig(tolerate_encryption=False, deflate=False)
    """

    tolerate_encryption: bool = True
    """Open encrypted documents instead of rejecting them.

    PyMuPDF is asked to authenticate with an empty user password, which is
    enough for the common "owner password only" case. Documents that still
    cannot be read are reported as corrupt.
    """

    garbage: int = 3
    """PyMuPDF garbage collection level (0-4) used when serializing output.

    - 0: Keep every object copied from the source
    - 3: Default, drop unused objects and merge duplicates
    - 4: Also compare stream contents (slowest)
    """

    deflate: bool = True
    """Compress uncompressed streams when serializing output."""


@dataclass
class BatchConfig:
    """Configuration for batch processing."""

    concurrency: int = 5
    """Maximum number of extractions in flight at once."""

    output_dir: Optional[str] = None
    """Directory for all outputs. If None, each output lands beside its input."""

    continue_on_error: bool = True
    """Record failures and keep going. If False, the first failure aborts the batch."""

    on_progress: Optional[ProgressCallback] = None
    """Called as ``(completed, total, outcome)`` once per finished input."""

    def __post_init__(self) -> None:
        if isinstance(self.concurrency, bool) or not isinstance(self.concurrency, int):
            raise ValueError(f"concurrency must be an integer, got {self.concurrency!r}")
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")
