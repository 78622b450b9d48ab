"""Error taxonomy for one analysis run.

Every error carries a human-readable ``message`` that ends up, unchanged,
in the verdict slot of an ``error`` display state.
"""


class AnalysisError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# --- the operation never starts, no network call is made ---

class ValidationError(AnalysisError):
    pass


class TextTooShortError(ValidationError):
    pass


class MissingCredentialError(ValidationError):
    pass


class InvalidCredentialError(ValidationError):
    pass


# --- transport ---

class TransportError(AnalysisError):
    pass


class NetworkError(TransportError):
    """Connection refused, DNS failure, offline, timeout."""


class ProviderStatusError(TransportError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


# --- parsing ---

class MalformedResponseError(AnalysisError):
    """The response body is not the JSON document we expect."""


class UnparseableProviderOutputError(MalformedResponseError):
    """The model's own generated text is not a JSON object."""


class LogicalProviderError(AnalysisError):
    """A well-formed response that reports an error of its own."""


class AnalysisInProgressError(AnalysisError):
    pass
