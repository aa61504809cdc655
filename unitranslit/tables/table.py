"""Substitution table for a single 256-codepoint block."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

BLOCK_SIZE = 256


@dataclass(frozen=True)
class SubstitutionTable:
    """
    Replacement strings for one block, indexed by the low byte of a codepoint.

    An entry is either a replacement string (possibly empty) or ``None`` when
    no substitution is known. Offsets past the stored rows are absent too.
    """

    entries: tuple[Optional[str], ...] = ()
    source: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_rows(
        cls, rows: Iterable[Optional[str]], source: Optional[str] = None
    ) -> "SubstitutionTable":
        entries = []
        for row in rows:
            if len(entries) == BLOCK_SIZE:
                break
            entries.append(row)
        return cls(tuple(entries), source)

    @classmethod
    def empty(cls) -> "SubstitutionTable":
        """Table used when no source provides a block: every entry absent."""
        return cls()

    @property
    def found(self) -> bool:
        return self.source is not None

    def lookup(self, offset: int) -> Optional[str]:
        if 0 <= offset < len(self.entries):
            return self.entries[offset]
        return None

    def __len__(self) -> int:
        return len(self.entries)
