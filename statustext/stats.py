"""Cumulative resolution statistics for a single statustext run."""

from dataclasses import dataclass, field
from typing import List

from .resolver import Resolution


@dataclass
class ResolveStats:
    """Holds counts of where each resolved code found its text."""

    builtin: int = 0
    global_override: int = 0
    custom: int = 0
    unknown: int = 0

    unknown_codes: List[int] = field(default_factory=list)

    def record(self, requested: int, result: Resolution, is_global: bool) -> None:
        """Count *result* for the *requested* code.

        *is_global* tells a global override apart from a built-in phrase,
        which ``Resolution`` alone cannot.
        """
        if not result.found:
            self.unknown += 1
            self.unknown_codes.append(requested)
        elif result.code != requested:
            self.custom += 1
        elif is_global:
            self.global_override += 1
        else:
            self.builtin += 1

    @property
    def total(self) -> int:
        return self.builtin + self.global_override + self.custom + self.unknown

    def format_summary(self) -> List[str]:
        """Return a list of lines forming the human-readable run summary."""
        lines = ["--- statustext summary ---"]
        lines.append(f"  built-in:  {self.builtin}")
        lines.append(f"  global:    {self.global_override}")
        lines.append(f"  custom:    {self.custom}")
        lines.append(f"  unknown:   {self.unknown}")
        lines.append(f"  total:     {self.total}")
        if self.unknown_codes:
            clist = ", ".join(str(c) for c in self.unknown_codes)
            lines.append(f"unknown codes: {clist}")
        return lines
