from importlib.metadata import PackageNotFoundError, version

from .build_info import get_compile_info
from .config import ParserConfig
from .exceptions import (
    ClopError,
    ConfigError,
    DoubleAssignmentError,
    MissingValueError,
    ParseError,
    UnknownOptionError,
    ValueCoercionError,
)
from .kinds import KINDS, Kind
from .option import Option, OptionHandle
from .parser import OptionParser
from .procinfo import procinfo
from .variable import AttrRef, Var
from .wrap import NBSP, paragraph_break, wrap

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("clop")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Parser
    "OptionParser",
    "ParserConfig",
    "Option",
    "OptionHandle",
    # Variables and value kinds
    "Var",
    "AttrRef",
    "Kind",
    "KINDS",
    # Formatting
    "paragraph_break",
    "wrap",
    "NBSP",
    "procinfo",
    "get_compile_info",
    # Exceptions
    "ClopError",
    "ConfigError",
    "ParseError",
    "UnknownOptionError",
    "MissingValueError",
    "DoubleAssignmentError",
    "ValueCoercionError",
]
