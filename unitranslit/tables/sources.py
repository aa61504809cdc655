"""
Lookup sources for substitution tables.

A source knows how to fetch the raw rows of one block. It answers ``None``
when it has no data for the block and raises ``TableLoadError`` when the data
is there but cannot be read.
"""

import importlib
from abc import ABC, abstractmethod
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Optional, Union

from ..exceptions import TableLoadError
from ..utils.logger import get_logger
from .table import BLOCK_SIZE

logger = get_logger("tables.sources")

Rows = list[Optional[str]]


def table_file_name(block: int) -> str:
    """File name of a block table, e.g. ``X04e`` for block 0x4e."""
    return f"X{block:03x}"


def split_rows(content: str) -> list[str]:
    """
    Split table file content into rows.

    Only ``\\n`` separates rows; tables may legitimately contain characters
    such as U+0085 or U+2028 that ``str.splitlines`` would treat as breaks.
    A final line terminator does not start another row.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class TableSource(ABC):
    """Provides raw block rows for a charset profile."""

    name: str

    @abstractmethod
    def fetch_rows(self, block: int) -> Optional[Rows]:
        """Return the rows for ``block`` or ``None`` if this source lacks it."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class DirectorySource(TableSource):
    """
    Reads block tables from a directory holding one file per block.

    ``root`` may be a filesystem path or a Traversable from
    ``importlib.resources`` for tables bundled as package data.
    """

    def __init__(self, root: Union[str, Path, Traversable], name: Optional[str] = None):
        self.root = Path(root) if isinstance(root, str) else root
        self.name = name or str(root)

    def fetch_rows(self, block: int) -> Optional[Rows]:
        path = self.root / table_file_name(block)
        try:
            if not path.is_file():
                return None
            content = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TableLoadError(
                f"Failed to read chars table {path}: {e}", source=self.name, block=block
            ) from e

        return split_rows(content)[:BLOCK_SIZE]


class ModuleSource(TableSource):
    """
    Reads block tables from a package with one ``x%03x`` module per block,
    each defining a ``data`` sequence of replacements.

    This is the layout of the ``unidecode`` distribution.
    """

    def __init__(self, package: str = "unidecode"):
        self.package = package
        self.name = f"module:{package}"

    def fetch_rows(self, block: int) -> Optional[Rows]:
        module_name = f"{self.package}.x{block:03x}"
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            if e.name not in (module_name, self.package):
                raise TableLoadError(
                    f"Failed to import {module_name}: {e}", source=self.name, block=block
                ) from e
            return None
        except Exception as e:
            raise TableLoadError(
                f"Failed to import {module_name}: {e}", source=self.name, block=block
            ) from e

        data = getattr(module, "data", None)
        if not isinstance(data, (tuple, list)):
            raise TableLoadError(
                f"{module_name} has no data sequence", source=self.name, block=block
            )
        if not all(row is None or isinstance(row, str) for row in data):
            raise TableLoadError(
                f"{module_name} data holds non-string entries", source=self.name, block=block
            )

        logger.debug(f"Loaded {len(data)} rows from {module_name}")
        return list(data[:BLOCK_SIZE])
