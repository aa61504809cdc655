"""
Transliteration of Unicode text into a narrower charset.

Every character outside ASCII is replaced with the entry of its block table,
i.e. kind of "similar" characters from the target charset.
"""

import re
from enum import Enum
from typing import Optional

from .exceptions import ConfigurationError
from .profiles import CharsetProfile, get_profile
from .tables.store import TableStore
from .utils.config import TranslitConfig, get_config
from .utils.logger import get_logger

logger = get_logger("engine")

# Placeholder for an unknown character.
UNKNOWN_CHAR = "[?]"

INITIALS_PATTERN = re.compile(r"^\w|\s+\w")


class UnknownPolicy(Enum):
    """What to emit for characters without a known substitution."""
    SENTINEL = "sentinel"
    DROP = "drop"


def _coerce_policy(value) -> UnknownPolicy:
    if isinstance(value, UnknownPolicy):
        return value
    try:
        return UnknownPolicy(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown character policy must be 'sentinel' or 'drop', got {value!r}",
            code="E_POLICY",
        ) from None


class Transliterator:
    """
    Transliterates Unicode strings into the charset of a profile.

    Instances are safe to share between threads; the only mutable state is
    the table cache of the owned store.
    """

    def __init__(
        self,
        profile: CharsetProfile,
        on_unknown: UnknownPolicy | str = UnknownPolicy.SENTINEL,
    ):
        self.profile = profile
        self.on_unknown = _coerce_policy(on_unknown)
        self.store = TableStore(profile)
        self._unknown = UNKNOWN_CHAR if self.on_unknown is UnknownPolicy.SENTINEL else ""

    @classmethod
    def for_charset(
        cls,
        name: str,
        on_unknown: UnknownPolicy | str = UnknownPolicy.SENTINEL,
        extra_table_dirs: tuple[str, ...] = (),
    ) -> "Transliterator":
        """
        Create an instance for a named charset (``ASCII``, ``ISO-8859-2``...).

        Raises:
            ConfigurationError: If the charset or the policy is not supported.
        """
        return cls(get_profile(name, extra_table_dirs), on_unknown)

    @classmethod
    def to_ascii(cls, on_unknown: UnknownPolicy | str = UnknownPolicy.SENTINEL) -> "Transliterator":
        return cls.for_charset("ASCII", on_unknown)

    @classmethod
    def to_latin2(cls, on_unknown: UnknownPolicy | str = UnknownPolicy.SENTINEL) -> "Transliterator":
        return cls.for_charset("ISO-8859-2", on_unknown)

    @classmethod
    def from_config(cls, config: Optional[TranslitConfig] = None) -> "Transliterator":
        """Create an instance from the engine section of the configuration."""
        engine_config = (config or get_config()).engine
        translit = cls.for_charset(
            engine_config.charset,
            engine_config.on_unknown,
            tuple(engine_config.extra_table_dirs),
        )
        if engine_config.preload_blocks:
            translit.store.preload(engine_config.preload_blocks)
            logger.debug(f"Preloaded {len(engine_config.preload_blocks)} blocks for {translit.charset}")
        return translit

    @property
    def charset(self) -> str:
        return self.profile.name

    def decode(self, text: Optional[str]) -> str:
        """
        Transliterate ``text`` into the target charset.

        Characters above U+FFFF are always dropped, ASCII characters are passed
        through unchanged, and leading and trailing whitespace is removed.
        The result is still a ``str``; use ``encode`` to get bytes.

        Args:
            text: The string to transliterate (may be None).

        Returns:
            The transliterated string, empty for None.
        """
        if text is None:
            return ""

        parts = []
        for char in text:
            code_point = ord(char)
            if code_point < 0x80:
                parts.append(char)
                continue
            # Outside the Basic Multilingual Plane, no tables
            if code_point > 0xFFFF:
                continue
            parts.append(self._substitute(code_point))
        return "".join(parts).strip()

    def to_initials(self, text: Optional[str]) -> str:
        """
        Transliterate ``text`` and return the first word character of each
        whitespace-separated word.

        Spaces before a word are removed but other whitespace (tabs, line
        breaks) is kept, e.g. ``"XXGN\\nQZQC"`` for two lines of Chinese.
        """
        if text is None:
            return ""

        matches = INITIALS_PATTERN.findall(self.decode(text))
        return "".join(match.replace(" ", "") for match in matches)

    def encode(self, text: Optional[str]) -> bytes:
        """Transliterate ``text`` and encode it with the profile's codec."""
        return self.decode(text).encode(self.profile.codec, errors="replace")

    def _substitute(self, code_point: int) -> str:
        block = code_point >> 8
        offset = code_point % 256

        replacement = self.store.resolve_table(block).lookup(offset)
        if replacement is None:
            return self._unknown
        return replacement

    def __repr__(self) -> str:
        return f"Transliterator({self.charset!r}, on_unknown={self.on_unknown.value!r})"
