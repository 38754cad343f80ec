"""Default header entity for the header catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DefaultHeader:
    """A commonly used HTTP header offered to the front-end.

    Attributes:
        name: Header name, matched case-sensitively.
        value: Suggested header value.
        description: Human-readable explanation of the header.
    """

    name: str
    value: str
    description: str
