"""
unitranslit - transliterate Unicode text into a narrower charset.

Characters that the target charset (US-ASCII or ISO-8859-2) cannot represent
are replaced with the "nearest" sequence of characters it can, taken from
per-block substitution tables that are loaded lazily.

The library never installs log handlers itself. Applications that want its
diagnostics call ``unitranslit.utils.logger.setup_logging()``, which reads
the ``[logging]`` section of the configuration (console output plus an
optional rotating log file).
"""

from .engine import UNKNOWN_CHAR, Transliterator, UnknownPolicy
from .exceptions import ConfigurationError, TableLoadError, TranslitError
from .profiles import CharsetProfile, available_profiles, get_profile

__version__ = "1.0.0"

__all__ = [
    'CharsetProfile',
    'ConfigurationError',
    'TableLoadError',
    'Transliterator',
    'TranslitError',
    'UNKNOWN_CHAR',
    'UnknownPolicy',
    'available_profiles',
    'get_profile',
]
