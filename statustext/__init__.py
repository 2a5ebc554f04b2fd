"""Reason phrases for HTTP status codes, with runtime custom text.

    >>> import statustext
    >>> statustext.status_text(404)
    'Not Found'
    >>> statustext.add_custom_status(404, "Nothing Here")
    >>> statustext.resolve(644)
    Resolution(code=404, text='Nothing Here', found=True)
"""

import logging

from .codes import STATUS_TEXT
from .errors import StatusTextConfigError
from .resolver import Resolution, StatusTextResolver
from .status_line import reason_phrase, status_line

logging.getLogger(__name__).addHandler(logging.NullHandler())

_default = StatusTextResolver()


def default_resolver() -> StatusTextResolver:
    """Return the process-wide resolver behind the module-level functions."""
    return _default


def status_text(code: int) -> str:
    """Return the text for *code*, or "" if the code is unknown."""
    return _default.status_text(code)


def add_global_custom_status(code: int, text: str) -> None:
    """Add or update *code*; the change affects every response."""
    _default.set_global_status(code, text)


def enable_single_custom_rule(enabled: bool) -> None:
    _default.set_enabled(enabled)


def add_custom_status(code: int, text: str) -> None:
    """Add or update custom text reached through a shifted code.

    See ``StatusTextResolver.resolve`` for the shift rule.
    """
    _default.set_custom_status(code, text)


def resolve(code: int) -> Resolution:
    return _default.resolve(code)


__all__ = [
    "STATUS_TEXT",
    "Resolution",
    "StatusTextConfigError",
    "StatusTextResolver",
    "add_custom_status",
    "add_global_custom_status",
    "default_resolver",
    "enable_single_custom_rule",
    "reason_phrase",
    "resolve",
    "status_line",
    "status_text",
]
