"""Resolve status codes to reason phrases through built-in and custom tables."""

import logging
import threading
from typing import Dict, Mapping, NamedTuple, Optional

from .codes import STATUS_TEXT

logger = logging.getLogger(__name__)

# Offsets a caller adds to a real code to ask for its per-response custom text.
# 1xx/2xx/3xx/5xx codes travel as code + 20, 4xx codes as code + 240.
SHORT_SHIFT = 20
LONG_SHIFT = 240


class Resolution(NamedTuple):
    code: int
    text: str
    found: bool


class StatusTextResolver:
    """Owns the built-in table, the two overlays and the single-custom flag.

    The built-in table is immutable and read without locking.  Each overlay
    and the flag sit behind their own lock, taken on both reads and writes,
    so ``resolve`` is safe to call while other threads register text.

    Construct one per process (see ``statustext.default_resolver``) and share
    it by reference.
    """

    def __init__(self, builtin: Optional[Mapping[int, str]] = None) -> None:
        self._builtin = STATUS_TEXT if builtin is None else builtin
        self._global: Dict[int, str] = {}
        self._custom: Dict[int, str] = {}
        self._enabled = False
        self._toggle_lock = threading.Lock()
        self._global_lock = threading.Lock()
        self._custom_lock = threading.Lock()

    def lookup(self, code: int) -> str:
        """Return the built-in phrase for *code*, or "" if it is not registered."""
        return self._builtin.get(code, "")

    def status_text(self, code: int) -> str:
        """Return the phrase for *code* with global overrides applied."""
        return self.resolve_unshifted(code).text

    def resolve_unshifted(self, code: int) -> Resolution:
        """Resolve *code* against global overrides and built-in phrases only.

        ``found`` reflects whether either table holds *code*, so a global
        override of "" is still found.
        """
        with self._global_lock:
            text = self._global.get(code)
        if text is None:
            text = self._builtin.get(code)
        if text is None:
            return Resolution(code, "", False)
        return Resolution(code, text, True)

    def set_global_status(self, code: int, text: str) -> None:
        """Add or replace the text of *code* for every response."""
        with self._global_lock:
            self._global[code] = text
        logger.debug("global status %d set to %r", code, text)

    def set_enabled(self, enabled: bool) -> None:
        """Turn the shifted single-response rule on or off.

        The flag is advisory: ``resolve`` always probes the shifted codes,
        callers such as ``statustext.status_line.reason_phrase`` read
        ``enabled`` to decide whether to use it.  While the rule is on, keep
        global overrides out of the shifted wire ranges (120-122, 220-227,
        320-327, 520-530, 620 and 640-691) or they will shadow custom text.
        """
        with self._toggle_lock:
            self._enabled = bool(enabled)
        logger.debug("single custom rule %s", "enabled" if enabled else "disabled")

    @property
    def enabled(self) -> bool:
        with self._toggle_lock:
            return self._enabled

    def set_custom_status(self, code: int, text: str) -> None:
        """Add or replace the custom text reached through a shifted code."""
        with self._custom_lock:
            self._custom[code] = text
        logger.debug("custom status %d set to %r", code, text)

    def resolve(self, code: int) -> Resolution:
        """Resolve *code*, falling back to the shifted custom table.

        Order: global override or built-in phrase for *code*; then custom
        text at ``code - 20``; then custom text at ``code - 240``.  A miss
        returns the original code with empty text and ``found=False``.
        """
        result = self.resolve_unshifted(code)
        if result.found:
            return result
        with self._custom_lock:
            for shift in (SHORT_SHIFT, LONG_SHIFT):
                text = self._custom.get(code - shift)
                if text is not None:
                    return Resolution(code - shift, text, True)
        return Resolution(code, "", False)

    def global_overrides(self) -> Dict[int, str]:
        with self._global_lock:
            return dict(self._global)

    def custom_overrides(self) -> Dict[int, str]:
        with self._custom_lock:
            return dict(self._custom)
