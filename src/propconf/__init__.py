"""propconf - properties-file configuration store with includes and ${VAR} substitution."""

from __future__ import annotations

# Store
from propconf.properties import EMPTY, Properties

# Loading
from propconf.loader import PropertiesLoader
from propconf.decoders import DEFAULT_DECODERS, Decoder

# Substitution
from propconf.substitution import expand_properties, substitute
from propconf.variables import EnvironmentProvider, MappingProvider, VariableProvider

# Flags
from propconf.types import Encoding, LoadFlags, SubstitutionFlags

# Diagnostics
from propconf.loglog import ErrorSink, LogLog, get_loglog, set_loglog

# Errors
from propconf.errors import (
    ErrorCodes,
    ExpansionLimitError,
    FileOpenError,
    IncludeCycleError,
    IncludeDepthExceededError,
    PropertiesError,
    UnterminatedVariableError,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "Properties",
    "EMPTY",
    # Loading
    "PropertiesLoader",
    "Decoder",
    "DEFAULT_DECODERS",
    # Substitution
    "substitute",
    "expand_properties",
    "VariableProvider",
    "EnvironmentProvider",
    "MappingProvider",
    # Flags
    "Encoding",
    "LoadFlags",
    "SubstitutionFlags",
    # Diagnostics
    "ErrorSink",
    "LogLog",
    "get_loglog",
    "set_loglog",
    # Errors
    "ErrorCodes",
    "PropertiesError",
    "FileOpenError",
    "UnterminatedVariableError",
    "IncludeCycleError",
    "IncludeDepthExceededError",
    "ExpansionLimitError",
]
