"""Build response status lines from a resolver."""

from typing import Optional

from .resolver import Resolution, StatusTextResolver


def _resolver_or_default(resolver: Optional[StatusTextResolver]) -> StatusTextResolver:
    if resolver is None:
        from . import default_resolver

        return default_resolver()
    return resolver


def reason_phrase(code: int, resolver: Optional[StatusTextResolver] = None) -> Resolution:
    """Return the phrase a response with *code* should carry.

    The shifted custom table is only consulted while the resolver's single
    custom rule is enabled; otherwise *code* is looked up as-is.
    """
    resolver = _resolver_or_default(resolver)
    if resolver.enabled:
        return resolver.resolve(code)
    return resolver.resolve_unshifted(code)


def status_line(
    code: int,
    proto: str = "HTTP/1.1",
    resolver: Optional[StatusTextResolver] = None,
) -> str:
    """Format ``"<proto> <code> <phrase>"`` for *code*.

    Raises ValueError if *code* is not a three-digit status.  An unknown code
    gets the phrase ``"status code <code>"``.
    """
    if code < 100 or code > 999:
        raise ValueError(f"invalid status code {code}")
    effective, text, found = reason_phrase(code, resolver)
    if not found:
        text = f"status code {code}"
    return f"{proto} {effective} {text}"
