"""
Typed access to string-valued configuration.

Provides a settings accessor over pluggable read-only stores (environment,
.env files, dicts), a registry of text parsers, and the exceptions raised
when a setting is missing or malformed.
"""

from configutils.config.accessor import NULL_VALUE, SettingsAccessor
from configutils.config.connection import ConnectionDescriptor
from configutils.config.errors import FormatError, NotFoundError, ParseError, SettingsError
from configutils.config.parsers import Parsable, ParserRegistry, default_registry, register
from configutils.config.settings import get_settings, reset_settings
from configutils.config.stores import (
    ChainStore,
    ConfigStore,
    DotenvStore,
    EnvironmentStore,
    MappingStore,
)

__all__ = [
    "NULL_VALUE",
    "SettingsAccessor",
    "ConnectionDescriptor",
    "SettingsError",
    "NotFoundError",
    "ParseError",
    "FormatError",
    "Parsable",
    "ParserRegistry",
    "default_registry",
    "register",
    "get_settings",
    "reset_settings",
    "ConfigStore",
    "MappingStore",
    "EnvironmentStore",
    "DotenvStore",
    "ChainStore",
]
