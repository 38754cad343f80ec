"""Error kinds surfaced by the collection service and the proxy relay."""


class WebmanError(Exception):
    """Base class for all Webman errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BadRequestError(WebmanError):
    """Raised when input cannot be turned into a valid operation."""
    pass


class NotFoundError(WebmanError):
    """Raised when a referenced collection or request does not exist."""
    pass


class PersistenceError(WebmanError):
    """Raised when a store read or write fails."""
    pass


class UpstreamError(WebmanError):
    """Raised when the outbound call fails or its body cannot be read."""
    pass
