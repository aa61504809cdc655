"""
Lazily loaded, per-block cache of substitution tables.

Each store owns its cache. A block is resolved at most once, on first
reference, from the first source of the profile that provides it.
"""

import threading
from typing import TYPE_CHECKING, Iterable

from ..exceptions import TableLoadError
from ..utils.logger import get_logger
from .table import SubstitutionTable

if TYPE_CHECKING:
    from ..profiles import CharsetProfile

logger = get_logger("tables.store")

MAX_BLOCK = 0xFF


class TableStore:
    """Resolves and caches the substitution table of each block."""

    def __init__(self, profile: "CharsetProfile"):
        self.profile = profile
        self._cache: dict[int, SubstitutionTable] = {}
        self._lock = threading.Lock()

    def resolve_table(self, block: int) -> SubstitutionTable:
        """
        Return the table for ``block``, loading it on first reference.

        Blocks outside 0-255 get an all-absent table and are not cached.
        Missing or unreadable data also yields an all-absent table; it is
        logged and never raised.
        """
        if not 0 <= block <= MAX_BLOCK:
            return SubstitutionTable.empty()

        table = self._cache.get(block)
        if table is not None:
            return table

        with self._lock:
            table = self._cache.get(block)
            if table is None:
                table = self._load(block)
                self._cache[block] = table
        return table

    def preload(self, blocks: Iterable[int]) -> None:
        for block in blocks:
            self.resolve_table(block)

    def cached_blocks(self) -> list[int]:
        with self._lock:
            return sorted(self._cache)

    def _load(self, block: int) -> SubstitutionTable:
        for source in self.profile.sources:
            try:
                rows = source.fetch_rows(block)
            except TableLoadError as e:
                logger.warning(f"Failed to load chars table for block {block:03x} from {source.name}: {e}")
                return SubstitutionTable.empty()

            if rows is not None:
                logger.debug(f"Loaded chars table for block {block:03x} from {source.name}")
                return SubstitutionTable.from_rows(rows, source=source.name)

        logger.info(f"Missing chars table for block {block:03x}")
        return SubstitutionTable.empty()

    def __repr__(self) -> str:
        return f"TableStore({self.profile.name!r}, cached={len(self._cache)})"
