# Chunking
from .chunking import Chunk, chunk_text

# Errors
from .errors import (
    ExtractionError,
    FetchError,
    NotFoundError,
    OracleError,
    ParseError,
    PersistenceError,
    ReportKitError,
)

# Extraction
from .extraction import ExtractionOracle, parse_partial_record

# LLMs
from .llms import LLMConfig, create_llm_client

# Merging
from .merging import merge_records

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import PdfTextExtractor, RawDocument

# Pipeline
from .pipeline import (
    PipelineConfig,
    ProcessingDispatcher,
    ReportProcessor,
    create_report_processor,
    get_report_status,
)

# Prompts
from .prompts import Prompt, PromptsLibrary

# Records
from .records import FinalRecord, PartialRecord

# Stores
from .stores import (
    InMemoryReportStore,
    LibraryRecord,
    ReportRecord,
    ReportStatus,
    SQLiteReportStore,
)

__all__ = [
    # Chunking
    "Chunk",
    "chunk_text",
    # Errors
    "ExtractionError",
    "FetchError",
    "NotFoundError",
    "OracleError",
    "ParseError",
    "PersistenceError",
    "ReportKitError",
    # Extraction
    "ExtractionOracle",
    "parse_partial_record",
    # LLMs
    "LLMConfig",
    "create_llm_client",
    # Merging
    "merge_records",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "PdfTextExtractor",
    "RawDocument",
    # Pipeline
    "PipelineConfig",
    "ProcessingDispatcher",
    "ReportProcessor",
    "create_report_processor",
    "get_report_status",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Records
    "FinalRecord",
    "PartialRecord",
    # Stores
    "InMemoryReportStore",
    "LibraryRecord",
    "ReportRecord",
    "ReportStatus",
    "SQLiteReportStore",
]
