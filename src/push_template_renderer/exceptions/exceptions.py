"""Custom exceptions for payload parsing, image fetching and intake."""

from __future__ import annotations


class PushRendererError(Exception):
    """Base exception for push-template-renderer errors."""

    pass


class MissingRequiredConfigError(PushRendererError):
    """Raised when a required configuration value is missing."""

    pass


class PayloadParseError(PushRendererError):
    """Raised when a JSON sub-payload (conversation, lines, buttons) has the wrong shape.

    Never escapes StructuredPayloadParser; it is logged and turned into an empty result.
    """

    def __init__(self, message: str, *, payload_kind: str, index: int | None = None) -> None:
        super().__init__(message)
        self.payload_kind = payload_kind
        self.index = index


class ImageFetchError(PushRendererError):
    """Raised inside the image fetcher when a response is not a usable image.

    Never escapes the fetcher; it is logged and the fetch resolves to None.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class IntakeNotRunningError(PushRendererError):
    """Raised when a message is submitted to an intake that was not initialized."""

    pass
