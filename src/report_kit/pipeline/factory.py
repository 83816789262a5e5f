# src/report_kit/pipeline/factory.py

from report_kit.extraction.oracle import ExtractionOracle
from report_kit.llms.config import LLMConfig
from report_kit.llms.factory import create_llm_client
from report_kit.observability.base import MetricsHook, NoOpMetricsHook
from report_kit.prompts.prompts_library import PromptsLibrary
from report_kit.stores.base import BlobFetcher, LibraryStore, ReportStore, ResultStore
from report_kit.stores.blob import RoutingBlobFetcher

from .config import PipelineConfig
from .orchestrator import ReportProcessor


def create_report_processor(
    llm_config: LLMConfig,
    *,
    report_store: ReportStore,
    library_store: LibraryStore,
    result_store: ResultStore,
    blob_fetcher: BlobFetcher | None = None,
    prompts: PromptsLibrary | None = None,
    config: PipelineConfig = PipelineConfig(),
    max_response_tokens: int = 4000,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ReportProcessor:
    """Wire a ReportProcessor from config.

    Raises:
        OracleError: If the LLM client cannot be set up (e.g. no API key).
            This happens here, before any report is touched.

    Example:
        >>> store = SQLiteReportStore("reports.db")
        >>> processor = create_report_processor(
        ...     LLMConfig(provider="anthropic", model="claude-sonnet-4-20250514"),
        ...     report_store=store,
        ...     library_store=store,
        ...     result_store=store,
        ... )
        >>> ok = await processor.process("report-123")
    """
    llm_client = create_llm_client(llm_config, metrics_hook=metrics_hook)
    oracle = ExtractionOracle(
        llm_client,
        prompts,
        max_response_tokens=max_response_tokens,
        metrics_hook=metrics_hook,
    )
    return ReportProcessor(
        report_store=report_store,
        library_store=library_store,
        result_store=result_store,
        blob_fetcher=blob_fetcher or RoutingBlobFetcher(),
        oracle=oracle,
        config=config,
        metrics_hook=metrics_hook,
    )
