"""PyMuPDF-based last-page extractor."""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import fitz  # PyMuPDF

from mandate_extractor.config import ExtractorConfig
from mandate_extractor.exceptions import ExtractionError
from mandate_extractor.logger import Timer, get_logger
from mandate_extractor.models import ExtractionResult
from mandate_extractor.naming import generate_output_filename
from mandate_extractor.validator import PathValidator, has_pdf_signature

logger = get_logger(__name__)


class LastPageExtractor:
    """Copies the last page of a PDF into a new single-page mandate file."""

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        validator: Optional[PathValidator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize extractor.

        Args:
            config: Extraction configuration. If None, uses defaults.
            validator: Input path validator. If None, creates default.
            clock: Zero-argument callable returning the current time, used to
                date output filenames.
        """
        self.config = config or ExtractorConfig()
        self.validator = validator or PathValidator()
        self.clock = clock

    def extract(
        self, input_path: str, output_dir: Optional[str] = None
    ) -> ExtractionResult:
        """Extract the last page of ``input_path`` into a new PDF.

        Args:
            input_path: Source PDF path
            output_dir: Destination directory. If None, the input's directory.

        Returns:
            ExtractionResult describing the written file

        Raises:
            ExtractionError: NOT_FOUND, CORRUPT, EMPTY or WRITE_ERROR
        """
        input_path = str(input_path)

        validation = self.validator.validate(input_path)
        if not validation.valid:
            logger.warning(
                "Input path failed validation",
                extra_data={"file_path": input_path, "reason": validation.error},
            )
            raise ExtractionError.not_found(
                input_path, None if validation.is_pdf else validation.error
            )

        with Timer("read") as read_timer:
            try:
                file_bytes = Path(input_path).read_bytes()
            except OSError as exc:
                logger.warning(
                    "Input file became unreadable after validation",
                    extra_data={"file_path": input_path, "error": str(exc)},
                )
                raise ExtractionError.not_found(input_path, cause=exc) from exc

        logger.debug(
            "Read source PDF",
            extra_data={
                "file_path": input_path,
                "file_size_bytes": len(file_bytes),
                "read_time_ms": read_timer.get_elapsed_ms(),
            },
        )

        source = self._load_document(file_bytes, input_path)
        try:
            page_count = source.page_count
            if page_count == 0:
                logger.warning(
                    "Source PDF has no pages", extra_data={"file_path": input_path}
                )
                raise ExtractionError.empty(input_path)

            destination = fitz.open()
            try:
                last_page = page_count - 1
                try:
                    destination.insert_pdf(
                        source, from_page=last_page, to_page=last_page
                    )
                except Exception as exc:
                    logger.error(
                        "Failed to copy last page",
                        extra_data={
                            "file_path": input_path,
                            "page_index": last_page,
                            "error_type": type(exc).__name__,
                            "error": str(exc),
                        },
                    )
                    raise ExtractionError.corrupt(input_path, exc) from exc

                output_path = self._write(destination, input_path, output_dir)
            finally:
                destination.close()
        finally:
            source.close()

        logger.info(
            "Extracted last page",
            extra_data={
                "file_path": input_path,
                "output_path": output_path,
                "total_pages": page_count,
            },
        )

        return ExtractionResult(
            input_path=input_path,
            output_path=output_path,
            total_pages=page_count,
            success=True,
        )

    def _load_document(self, file_bytes: bytes, input_path: str) -> fitz.Document:
        """Parse PDF bytes, applying the encryption policy."""
        if not has_pdf_signature(file_bytes):
            logger.error(
                "Missing PDF header",
                extra_data={"file_path": input_path, "file_size_bytes": len(file_bytes)},
            )
            raise ExtractionError.corrupt(input_path)

        with Timer("parse") as parse_timer:
            try:
                document = fitz.open(stream=file_bytes, filetype="pdf")
            except Exception as exc:
                logger.error(
                    "Failed to parse PDF",
                    extra_data={
                        "file_path": input_path,
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                    },
                )
                raise ExtractionError.corrupt(input_path, exc) from exc

        encryption = (document.metadata or {}).get("encryption")
        if document.is_encrypted or encryption:
            if not self.config.tolerate_encryption:
                document.close()
                logger.error(
                    "Encrypted PDF rejected",
                    extra_data={"file_path": input_path, "encryption": encryption},
                )
                raise ExtractionError.corrupt(input_path)

            # Owner-only protection opens with an empty user password
            if document.is_encrypted and not document.authenticate(""):
                document.close()
                logger.error(
                    "Encrypted PDF requires a password",
                    extra_data={"file_path": input_path},
                )
                raise ExtractionError.corrupt(input_path)

        logger.debug(
            "Parsed source PDF",
            extra_data={
                "file_path": input_path,
                "page_count": document.page_count,
                "encrypted": bool(encryption),
                "parse_time_ms": parse_timer.get_elapsed_ms(),
            },
        )
        return document

    def _write(
        self, destination: fitz.Document, input_path: str, output_dir: Optional[str]
    ) -> str:
        """Serialize ``destination`` to its mandate path and return that path."""
        output_name = generate_output_filename(input_path, self.clock())
        directory = output_dir or os.path.dirname(input_path) or "."
        output_path = os.path.join(directory, output_name)

        with Timer("write") as write_timer:
            try:
                Path(directory).mkdir(parents=True, exist_ok=True)
                data = destination.tobytes(
                    garbage=self.config.garbage, deflate=self.config.deflate
                )
                Path(output_path).write_bytes(data)
            except Exception as exc:
                logger.error(
                    "Failed to write output PDF",
                    extra_data={
                        "file_path": input_path,
                        "output_path": output_path,
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                    },
                )
                raise ExtractionError.write_error(output_path, exc) from exc

        logger.debug(
            "Wrote output PDF",
            extra_data={
                "output_path": output_path,
                "write_time_ms": write_timer.get_elapsed_ms(),
            },
        )
        return output_path
