"""Named charset profiles: ordered fallback lists of lookup sources."""

from dataclasses import dataclass
from importlib import resources
from typing import Iterable

from .exceptions import ConfigurationError
from .tables.sources import DirectorySource, ModuleSource, TableSource

ASCII = "ASCII"
LATIN2 = "ISO-8859-2"

ALIASES = {
    "ASCII": ASCII,
    "US-ASCII": ASCII,
    "ISO-8859-2": LATIN2,
    "ISO8859-2": LATIN2,
    "LATIN-2": LATIN2,
    "LATIN2": LATIN2,
}

CODECS = {
    ASCII: "ascii",
    LATIN2: "iso-8859-2",
}


@dataclass(frozen=True)
class CharsetProfile:
    """
    Target repertoire with the sources its tables are resolved from.

    Order of ``sources`` is fallback priority: a block comes from the first
    source that provides it.
    """

    name: str
    sources: tuple[TableSource, ...]
    codec: str = "ascii"

    def __post_init__(self):
        if not self.sources:
            raise ConfigurationError(f"Charset profile {self.name} has no sources")
        object.__setattr__(self, "sources", tuple(self.sources))


def bundled_tables(name: str) -> DirectorySource:
    """Tables shipped as package data under ``unitranslit/tables/<name>``."""
    return DirectorySource(resources.files("unitranslit.tables") / name, name=f"bundled:{name}")


def _default_sources(canonical: str) -> list[TableSource]:
    if canonical == LATIN2:
        return [bundled_tables("latin2"), ModuleSource("unidecode")]
    return [ModuleSource("unidecode")]


def canonical_name(name: str) -> str:
    if not isinstance(name, str):
        raise ConfigurationError(f"Charset name must be a string, got {name!r}", code="E_CHARSET")
    key = name.strip().upper().replace("_", "-")
    try:
        return ALIASES[key]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported charset: {name!r} (available: {', '.join(available_profiles())})",
            code="E_CHARSET",
        ) from None


def get_profile(name: str, extra_table_dirs: Iterable[str] = ()) -> CharsetProfile:
    """Build the profile for a charset name; user table dirs take priority."""
    canonical = canonical_name(name)
    sources: list[TableSource] = [DirectorySource(path) for path in extra_table_dirs]
    sources.extend(_default_sources(canonical))
    return CharsetProfile(canonical, tuple(sources), CODECS[canonical])


def available_profiles() -> list[str]:
    return sorted(CODECS)
