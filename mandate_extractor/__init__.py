"""Extract the last page of PDF documents into dated mandate files."""

from mandate_extractor.api import extract_last_page, process_multiple_pdfs
from mandate_extractor.batch import BatchProcessor
from mandate_extractor.config import BatchConfig, ExtractorConfig
from mandate_extractor.exceptions import (
    ErrorKind,
    ExtractionError,
    MandateExtractorError,
)
from mandate_extractor.extractor import LastPageExtractor
from mandate_extractor.models import BatchReport, ExtractionResult, FailureResult
from mandate_extractor.naming import format_date_ddmmyyyy, generate_output_filename
from mandate_extractor.validator import PathValidation, PathValidator, validate_pdf_path

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "extract_last_page",
    "process_multiple_pdfs",
    # Core classes
    "LastPageExtractor",
    "BatchProcessor",
    "PathValidator",
    # Helpers
    "validate_pdf_path",
    "generate_output_filename",
    "format_date_ddmmyyyy",
    # Data models
    "ExtractionResult",
    "FailureResult",
    "BatchReport",
    "PathValidation",
    # Configuration
    "ExtractorConfig",
    "BatchConfig",
    # Exceptions
    "MandateExtractorError",
    "ExtractionError",
    "ErrorKind",
]
