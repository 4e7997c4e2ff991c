__all__ = (
    "AmbiguousMergeError",
    "ArgumentStore",
    "Config",
    "Entry",
    "Exit",
    "Kind",
    "OrphanValueError",
    "ParseError",
    "ParseOutcome",
    "Parser",
    "Program",
    "UncastableEnvVar",
    "UnknownFileType",
    "__version__",
    "__version_info__",
    "parse",
)


from ._version import __version__, __version_info__
from .config import Config
from .exceptions import (
    AmbiguousMergeError,
    Exit,
    OrphanValueError,
    ParseError,
    UncastableEnvVar,
    UnknownFileType,
)
from .parser import ParseOutcome, Parser, parse
from .program import Program
from .store import ArgumentStore, Entry, Kind
