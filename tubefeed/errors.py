"""Exception hierarchy shared by the parser, feeds and page wrappers."""

from typing import Any


class InnertubeError(Exception):
    """Base class for every error raised by tubefeed."""

    def __init__(self, message: str, info: dict[str, Any] | None = None):
        super().__init__(message)
        self.info = info or {}


class InvalidStructureError(InnertubeError):
    """Raised when a response lacks every top-level anchor the parser knows about."""


class TypeMismatchError(InnertubeError, TypeError):
    """Raised when a value is coerced into a shape it does not have."""


class NoContinuationError(InnertubeError):
    """Raised when a feed has no continuation command, i.e. the end of the feed."""


class TransportError(InnertubeError):
    """Raised when an endpoint call fails at the HTTP level."""


class NotFoundError(InnertubeError):
    """Lookup by key failed. Carries the requested key and every valid alternative."""

    # Name under which the alternatives are exposed in ``info``
    available_label = "available"

    def __init__(self, message: str, key: str | None = None, available: list[str] | None = None):
        self.key = key
        self.available = list(available or [])
        super().__init__(message, {"key": key, self.available_label: self.available})


class TabNotFoundError(NotFoundError):
    available_label = "available_tabs"

    @property
    def available_tabs(self) -> list[str]:
        return self.available


class FilterNotFoundError(NotFoundError):
    available_label = "available_filters"

    @property
    def available_filters(self) -> list[str]:
        return self.available


class OptionNotFoundError(NotFoundError):
    available_label = "available_options"

    @property
    def available_options(self) -> list[str]:
        return self.available


class SidebarItemNotFoundError(NotFoundError):
    available_label = "available_items"

    @property
    def available_items(self) -> list[str]:
        return self.available


class SidebarUnavailableError(NotFoundError):
    """The page carries no sidebar, so no sidebar item can be selected."""

    available_label = "available_items"
