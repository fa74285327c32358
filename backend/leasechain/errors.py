"""Error kinds raised by the generation and deployment handlers.

Every error carries the HTTP status it maps to and the ``message`` returned to
the caller. The translation to a JSON response happens once, in
``leasechain.main``.
"""


class ApiError(Exception):
    """Base exception for errors surfaced to API callers."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, error: str | None = None):
        self.message = message or self.message
        self.error = error
        super().__init__(self.message)


class MissingParametersError(ApiError):
    """Raised when a deploy request lacks the chain name or contract source."""

    status_code = 400
    message = "Missing chainName or contract parameter"


class UnsupportedChainError(ApiError):
    """Raised when the requested chain is not in the registry."""

    status_code = 400
    message = "Unsupported chain"


class MissingAgreementError(ApiError):
    """Raised when a generate request has no agreement text."""

    status_code = 400
    message = "Missing agreement parameter"


class InvalidRequestError(ApiError):
    """Raised when the request body cannot be parsed into the expected shape."""

    status_code = 400
    message = "Invalid request body"


class TransactionFailedError(ApiError):
    """Raised when the deployment transaction was mined with a failure status."""

    status_code = 400
    message = "Error when broadcasting deployment transaction"


class CompilationError(ApiError):
    """Raised when the compiler produced no contract artifacts."""

    status_code = 500
    message = "Error while compiling"


class ConfigurationError(ApiError):
    """Raised when a required server-side setting is missing."""

    status_code = 500
    message = "Server is not configured for this operation"


class UpstreamError(ApiError):
    """Wraps an unexpected exception raised while handling a request."""

    status_code = 500
