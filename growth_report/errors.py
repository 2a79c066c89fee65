"""Exception types raised inside the analysis pipeline."""


class GrowthReportError(Exception):
    """Base class for all growth report errors."""


class ValidationError(GrowthReportError):
    """The submitted URL is empty or not an absolute http(s) URL."""


class RetrievalError(GrowthReportError):
    """The target page could not be fetched."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(GrowthReportError):
    """The fetched markup could not be turned into a document tree."""


class PipelineError(GrowthReportError):
    """Unexpected fault after validation; triggers the degraded report."""


class AnalysisInProgressError(GrowthReportError):
    """A second analysis was requested while one is still running."""
