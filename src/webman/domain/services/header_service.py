"""Catalog of commonly used HTTP headers.

The catalog is static reference data offered to the front-end when
composing requests.
"""

from webman.domain.entities import DefaultHeader

DEFAULT_HEADERS: tuple[DefaultHeader, ...] = (
    DefaultHeader(
        name="Accept",
        value="application/json",
        description="Indicates that the client expects JSON response",
    ),
    DefaultHeader(
        name="Content-Type",
        value="application/json",
        description="Indicates that the request body is in JSON format",
    ),
    DefaultHeader(
        name="Authorization",
        value="Bearer ",
        description="Bearer token authentication",
    ),
    DefaultHeader(
        name="Cache-Control",
        value="no-cache",
        description="Controls caching behavior",
    ),
    DefaultHeader(
        name="User-Agent",
        value="Webman/1.0.0",
        description="Identifies the client application",
    ),
    DefaultHeader(
        name="Accept-Language",
        value="en-US,en;q=0.9",
        description="Preferred language for response",
    ),
    DefaultHeader(
        name="X-Requested-With",
        value="XMLHttpRequest",
        description="Indicates an AJAX request",
    ),
)


class HeaderService:
    """Read-only access to the default header catalog."""

    def get_default_headers(self) -> list[DefaultHeader]:
        """Return the full catalog in its fixed order."""
        return list(DEFAULT_HEADERS)

    def get_header_by_name(self, name: str) -> DefaultHeader | None:
        """Find a catalog entry by exact, case-sensitive name.

        Args:
            name: Header name to look up.

        Returns:
            The first matching entry, or None.
        """
        for header in DEFAULT_HEADERS:
            if header.name == name:
                return header
        return None
