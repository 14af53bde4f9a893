"""Pipeline error taxonomy."""


class PipelineError(Exception):
    """Base class for ratio pipeline failures."""


class SourceUnavailable(PipelineError):
    """A price provider failed at the HTTP level or returned an error payload."""

    def __init__(self, message, source=None, status_code=None):
        super().__init__(message)
        self.source = source
        self.status_code = status_code


class EmptySeries(PipelineError):
    """A stage returned without any usable points for one or both assets."""


class InsufficientAlignedData(PipelineError):
    """The two series share no calendar dates, so there is no latest point."""


class DominanceUnavailable(PipelineError):
    """BTC dominance could not be read from the global market endpoint."""


class SyntheticDataError(PipelineError):
    """The synthetic fallback itself failed. Fatal for the run."""
