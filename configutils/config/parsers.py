"""
Parser registry: maps Python types to functions that build them from text.

**Conceptual**: Every configuration value arrives as a string. To hand callers
an int, a timedelta or an Enum member, we need a way to go from (type, text)
to a typed value. Instead of discovering parse methods at runtime by name
lookup, this module keeps an explicit table from type to parser function,
populated up front with the common scalar types.

**Resolution order** for ParserRegistry.resolve(type_):
  1. An explicit registry entry for exactly that type.
  2. Enum subclasses: member lookup by name, then by value.
  3. A static parse(text) on the type (the Parsable protocol): a classmethod
     or staticmethod. Plain instance methods named parse are ignored.
  4. The type's own constructor called with the text, e.g. Fraction("1/3").

If the chosen strategy raises, or the type is not callable at all, ParseError
is raised naming the type and the text, chained to the original exception.

**Zero values**: The reserved "{null}" setting asks for a type's default
value. Value-like builtins register one (0, 0.0, False, "", ...); every other
type defaults to None.

Usage example:
    >>> from configutils.config.parsers import default_registry
    >>> default_registry.parse(int, "42")
    42
    >>> default_registry.parse(bool, "yes")
    True
"""

import datetime as dt
import decimal
import enum
import inspect
import uuid
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

import pandas as pd

from configutils.config.errors import ParseError

ParserFunc = Callable[[str], Any]

_TRUE_TEXT = ("true", "1", "yes", "on")
_FALSE_TEXT = ("false", "0", "no", "off")

_NO_ZERO = object()


@runtime_checkable
class Parsable(Protocol):
    """
    Protocol for types that know how to build themselves from text.

    **Example**:
        >>> @dataclass(frozen=True)
        ... class HostPort:
        ...     host: str
        ...     port: int
        ...
        ...     @classmethod
        ...     def parse(cls, text: str) -> "HostPort":
        ...         host, port = text.rsplit(":", 1)
        ...         return cls(host, int(port))
        >>>
        >>> accessor.get_typed("DB_ADDRESS", None, HostPort)
        HostPort(host='db.local', port=5432)
    """

    @classmethod
    def parse(cls, text: str) -> Any:
        ...


def parse_bool(text: str) -> bool:
    """Parse true/1/yes/on and false/0/no/off (case-insensitive)."""
    lowered = text.strip().lower()
    if lowered in _TRUE_TEXT:
        return True
    if lowered in _FALSE_TEXT:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def parse_decimal(text: str) -> decimal.Decimal:
    try:
        return decimal.Decimal(text.strip())
    except decimal.InvalidOperation:
        raise ValueError(f"not a decimal: {text!r}")


def parse_timedelta(text: str) -> dt.timedelta:
    """
    Parse a duration such as "00:30:00", "90s", "1 days 02:00:00" or "1h30min".

    pandas.Timedelta understands both clock notation and unit suffixes, which
    covers the formats people actually write in .env files.
    """
    value = pd.Timedelta(text.strip())
    if pd.isna(value):
        raise ValueError(f"not a duration: {text!r}")
    return value.to_pytimedelta()


def parse_timestamp(text: str) -> pd.Timestamp:
    value = pd.Timestamp(text.strip())
    if pd.isna(value):
        raise ValueError(f"not a timestamp: {text!r}")
    return value


def parse_pandas_timedelta(text: str) -> pd.Timedelta:
    """Like parse_timedelta, but keeps the pandas type (nanosecond precision)."""
    value = pd.Timedelta(text.strip())
    if pd.isna(value):
        raise ValueError(f"not a duration: {text!r}")
    return value


def _enum_parser(enum_type: type) -> ParserFunc:
    def parse_member(text: str) -> Any:
        try:
            return enum_type[text.strip()]
        except KeyError:
            return enum_type(text.strip())
    return parse_member


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", repr(type_))


class ParserRegistry:
    """
    Explicit table from type to text parser.

    **Conceptual**: The registry is the single place that decides how a
    configuration string becomes a typed value. Registering a type is a
    one-liner; anything a Translator can do (an object with a parse() method)
    can be registered as well as a plain function.

    The registry is mutated only through register(), normally at import time.
    Lookups never mutate it, so sharing one registry between threads is safe.
    """

    def __init__(self):
        self._parsers: Dict[type, ParserFunc] = {}
        self._zero_values: Dict[type, Any] = {}

    @classmethod
    def with_builtins(cls) -> "ParserRegistry":
        """Create a registry pre-populated with the standard scalar types."""
        registry = cls()
        registry.register(str, str, zero="")
        registry.register(int, int, zero=0)
        registry.register(float, float, zero=0.0)
        registry.register(bool, parse_bool, zero=False)
        registry.register(decimal.Decimal, parse_decimal, zero=decimal.Decimal(0))
        registry.register(dt.timedelta, parse_timedelta, zero=dt.timedelta(0))
        registry.register(dt.datetime, dt.datetime.fromisoformat)
        registry.register(dt.date, dt.date.fromisoformat)
        registry.register(dt.time, dt.time.fromisoformat)
        registry.register(Path, Path)
        registry.register(uuid.UUID, uuid.UUID)
        registry.register(pd.Timestamp, parse_timestamp)
        registry.register(pd.Timedelta, parse_pandas_timedelta, zero=pd.Timedelta(0))
        return registry

    def register(self, type_: type, parser: Any, zero: Any = _NO_ZERO) -> None:
        """
        Register a parser (function or Translator) for type_.

        Args:
            type_: The target type.
            parser: A callable taking the text, or any object with a
                   parse(text) method (see configutils.translation.Translator).
            zero: Value returned for the "{null}" sentinel. If omitted, the
                 type's zero value is None.
        """
        if not callable(parser) and callable(getattr(parser, "parse", None)):
            parser = parser.parse
        if not callable(parser):
            raise TypeError(f"parser for {_type_name(type_)} must be callable or have a parse() method")
        self._parsers[type_] = parser
        if zero is not _NO_ZERO:
            self._zero_values[type_] = zero
        else:
            self._zero_values.pop(type_, None)

    def is_registered(self, type_: type) -> bool:
        return type_ in self._parsers

    def copy(self) -> "ParserRegistry":
        """Return an independent copy (register on it without touching the original)."""
        clone = ParserRegistry()
        clone._parsers = dict(self._parsers)
        clone._zero_values = dict(self._zero_values)
        return clone

    def resolve(self, type_: Any) -> Optional[ParserFunc]:
        """Find the parsing strategy for type_, or None if there is none."""
        parser = self._parsers.get(type_)
        if parser is not None:
            return parser

        if isinstance(type_, type) and issubclass(type_, enum.Enum):
            return _enum_parser(type_)

        if isinstance(type_, type) and isinstance(
            inspect.getattr_static(type_, "parse", None), (classmethod, staticmethod)
        ):
            return type_.parse

        if callable(type_):
            return type_

        return None

    def parse(self, type_: Any, text: str) -> Any:
        """
        Convert text into an instance of type_.

        Raises:
            ParseError: If no strategy exists for type_ or the strategy
                       rejects the text.
        """
        parser = self.resolve(type_)
        if parser is None:
            raise ParseError(_type_name(type_), text)

        try:
            return parser(text)
        except Exception as e:
            raise ParseError(_type_name(type_), text) from e

    def zero_value(self, type_: Any) -> Any:
        """Default value for type_ (used for the "{null}" sentinel)."""
        return self._zero_values.get(type_)


default_registry = ParserRegistry.with_builtins()


def register(type_: type, parser: Any, zero: Any = _NO_ZERO) -> None:
    """Register a parser on the module-level default registry."""
    default_registry.register(type_, parser, zero=zero)
