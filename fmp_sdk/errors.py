"""Typed exceptions for the SDK."""

from __future__ import annotations


class FMPError(Exception):
    """Base class for every error raised by the SDK."""


class FMPAPIError(FMPError):
    """Upstream request failed (non-2xx status, network failure, bad body)."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        status_text: str | None = None,
    ) -> None:
        self.status = status
        self.status_text = status_text
        super().__init__(message)

    def __repr__(self) -> str:
        return f"FMPAPIError({str(self)!r}, status={self.status!r}, status_text={self.status_text!r})"


class FMPValidationError(FMPError, ValueError):
    """Caller input rejected before any network call was attempted."""
