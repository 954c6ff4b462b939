"""Input path validation and PDF signature sniffing."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mandate_extractor.logger import get_logger

logger = get_logger(__name__)


PDF_EXTENSION = ".pdf"
PDF_SIGNATURE = b"%PDF-"
# Readers accept the header anywhere in the first KiB
SIGNATURE_SEARCH_WINDOW = 1024


@dataclass(frozen=True)
class PathValidation:
    valid: bool
    error: Optional[str] = None
    is_pdf: bool = True  # False when the extension check failed


class PathValidator:
    """Checks that a path names an existing PDF file, without reading it."""

    def validate(self, file_path: str) -> PathValidation:
        """Validate extension, then existence.

        Args:
            file_path: Path to check

        Returns:
            PathValidation; ``error`` says "not a PDF" or "not found".
            Paths the OS refuses to stat (too long, permission denied on a
            parent) count as not found.
        """
        # Extension first: a .txt path never reports "not found"
        if not str(file_path).lower().endswith(PDF_EXTENSION):
            logger.debug(
                "Rejected path with non-PDF extension",
                extra_data={"file_path": file_path},
            )
            return PathValidation(
                valid=False,
                error="File is not a PDF (must end with .pdf)",
                is_pdf=False,
            )

        try:
            exists = Path(file_path).exists()
        except (OSError, ValueError) as exc:
            logger.debug(
                "Could not stat path",
                extra_data={"file_path": file_path, "error": str(exc)},
            )
            exists = False

        if not exists:
            logger.debug(
                "Rejected path that does not exist",
                extra_data={"file_path": file_path},
            )
            return PathValidation(valid=False, error=f"File not found: {file_path}")

        return PathValidation(valid=True)


def validate_pdf_path(file_path: str) -> PathValidation:
    """Validate ``file_path`` with a default :class:`PathValidator`."""
    return PathValidator().validate(file_path)


def has_pdf_signature(file_bytes: bytes) -> bool:
    """Return True if the PDF header appears near the start of ``file_bytes``."""
    return PDF_SIGNATURE in file_bytes[:SIGNATURE_SEARCH_WINDOW]
