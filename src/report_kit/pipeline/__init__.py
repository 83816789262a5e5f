from .config import PipelineConfig
from .dispatch import ProcessingDispatcher, StatusReport, get_report_status
from .factory import create_report_processor
from .orchestrator import ReportProcessor

__all__ = [
    "PipelineConfig",
    "ProcessingDispatcher",
    "ReportProcessor",
    "create_report_processor",
    "StatusReport",
    "get_report_status",
]
