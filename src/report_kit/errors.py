# src/report_kit/errors.py

"""Error taxonomy for the report pipeline.

Fatal errors abort a run: NotFoundError, FetchError, ExtractionError,
PersistenceError. Chunk-level errors are contained by the oracle:
OracleError, ParseError.
"""


class ReportKitError(Exception):
    """Base class for all report_kit errors."""


class NotFoundError(ReportKitError):
    """A report or library record does not exist."""


class FetchError(ReportKitError):
    """Document bytes could not be retrieved."""


class ExtractionError(ReportKitError):
    """Text could not be extracted from the document."""


class OracleError(ReportKitError):
    """The structured-extraction call failed or could not be set up."""


class ParseError(ReportKitError):
    """The oracle response held no usable structured payload."""


class PersistenceError(ReportKitError):
    """The merged result could not be written."""
