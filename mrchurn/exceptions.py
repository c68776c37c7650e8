"""mrchurn exception classes."""


class MrChurnError(Exception):
    """Base exception for all mrchurn errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(MrChurnError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(MrChurnError):
    """Raised when the API cannot be reached at all."""

    pass


class MalformedResponseError(MrChurnError):
    """Raised when a successful response is missing data we depend on."""

    def __init__(self, message: str, request_id: str | None = None) -> None:
        super().__init__("MALFORMED_RESPONSE", message, request_id)
