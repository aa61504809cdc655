"""Substitution tables: value type, lookup sources and the per-block store."""

from .sources import DirectorySource, ModuleSource, TableSource
from .store import TableStore
from .table import SubstitutionTable

__all__ = [
    'DirectorySource',
    'ModuleSource',
    'SubstitutionTable',
    'TableSource',
    'TableStore',
]
