"""Exception classes for RenderCode."""

from __future__ import annotations


class RenderCodeError(Exception):
    """Base exception for all RenderCode errors."""


class UnsupportedConstructError(RenderCodeError):
    """A markup construct has no equivalent in the target element API.

    Aborts the whole render pass: the same input always fails the same way,
    so callers should report it rather than retry.
    """

    def __init__(self, construct: str, detail: str | None = None) -> None:
        self.construct = construct
        self.detail = detail
        message = f"Unsupported construct: {construct}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ConfigError(RenderCodeError):
    """Invalid configuration file or value."""
