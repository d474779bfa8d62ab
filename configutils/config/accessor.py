"""
Typed settings accessor.

**Conceptual**: Configuration stores hold strings. Application code wants
ints, timeouts, lists of hostnames and connection strings, and it wants a
missing setting to fail loudly at startup. SettingsAccessor sits between the
two: it reads raw text from an injected ConfigStore and hands back typed
values, raising a descriptive SettingsError when a value is missing or
malformed.

**Conventions**:
  - "{null}" as a value means "use the type's default" (0, False, "", None...)
    for get_typed(). This lets an environment explicitly blank out a
    setting that has a non-null default in code.
  - "," separates list and map items; ":" separates a map key from its value.
  - Empty list items are preserved: "a,,b" -> ["a", "", "b"].

Usage example:
    >>> from configutils.config.accessor import SettingsAccessor
    >>> from configutils.config.stores import MappingStore
    >>>
    >>> settings = SettingsAccessor(MappingStore({
    ...     "TIMEOUT_SECONDS": "30",
    ...     "HOSTS": "a.local,b.local",
    ...     "WEIGHTS": "a:1,b:2",
    ... }))
    >>> settings.get_typed("TIMEOUT_SECONDS", 10)
    30
    >>> settings.get_list("HOSTS")
    ['a.local', 'b.local']
    >>> settings.get_map("WEIGHTS")
    {'a': '1', 'b': '2'}
"""

from typing import Any, Dict, List, Optional

from configutils.config.connection import ConnectionDescriptor
from configutils.config.errors import FormatError, NotFoundError
from configutils.config.parsers import ParserRegistry, default_registry
from configutils.config.stores import ConfigStore

NULL_VALUE = "{null}"
ITEM_SEPARATOR = ","
KEY_VALUE_SEPARATOR = ":"
PROVIDER_SUFFIX = ".provider"


class SettingsAccessor:
    """
    Read-only typed view over a ConfigStore.

    Args:
        store: Where settings are read from.
        connection_store: Where connection strings are read from. Defaults to
                          store, so a single .env file can hold both.
        registry: Parser registry used by get_typed(). Defaults to the
                 module-level default_registry.
    """

    def __init__(
        self,
        store: ConfigStore,
        connection_store: Optional[ConfigStore] = None,
        registry: Optional[ParserRegistry] = None,
    ):
        self.store = store
        self.connection_store = connection_store if connection_store is not None else store
        self.registry = registry if registry is not None else default_registry

    def get_optional(self, key: str) -> Optional[str]:
        """Return the raw value for key, or None if it is not set."""
        return self.store.get(key)

    def get_required(self, key: str) -> str:
        """
        Return the raw value for key.

        Raises:
            NotFoundError: If key is not set.
        """
        value = self.store.get(key)
        if value is None:
            raise NotFoundError(key)
        return value

    def get_or_default(self, key: str, default: str) -> str:
        value = self.store.get(key)
        return default if value is None else value

    def get_typed(self, key: str, default: Any, type_: Optional[type] = None) -> Any:
        """
        Return the value for key parsed into a typed value.

        **Behaviour**:
          - Key not set: returns default unchanged.
          - Value is "{null}": returns the type's zero value (0 for int,
            False for bool, None for types without one).
          - Otherwise: parses the text via the registry (see parsers.py).

        Args:
            key: Setting name.
            default: Returned when the key is absent. Also determines the
                    target type when type_ is not given.
            type_: Explicit target type. Required when default is None.

        Returns:
            The parsed value, default, or the type's zero value.

        Raises:
            ParseError: If the text cannot be converted to the target type.
            TypeError: If default is None and no type_ was given.

        Usage example:
            >>> settings.get_typed("MAX_RETRIES", 3)
            5
            >>> settings.get_typed("POLL_INTERVAL", None, datetime.timedelta)
            datetime.timedelta(seconds=90)
        """
        if type_ is None:
            if default is None:
                raise TypeError(f"get_typed({key!r}) needs type_ when default is None")
            type_ = type(default)

        value = self.store.get(key)
        if value is None:
            return default
        if value == NULL_VALUE:
            return self.registry.zero_value(type_)
        return self.registry.parse(type_, value)

    def get_required_connection(self, key: str) -> ConnectionDescriptor:
        """
        Return the connection string stored under key as a descriptor.

        A provider hint is picked up from "<key>.provider" when present.

        Raises:
            NotFoundError: If no connection string is stored under key.
        """
        value = self.connection_store.get(key)
        if value is None:
            raise NotFoundError(key, kind="connection string")
        return ConnectionDescriptor(
            name=key,
            connection_string=value,
            provider_name=self.connection_store.get(key + PROVIDER_SUFFIX),
        )

    def get_connection_string(self, key: str) -> str:
        return str(self.get_required_connection(key))

    def get_list(self, key: str) -> List[str]:
        """
        Split the required value for key on commas.

        Order and empty items are preserved; items are not stripped.

        Raises:
            NotFoundError: If key is not set.
        """
        return self.get_required(key).split(ITEM_SEPARATOR)

    def get_typed_list(self, key: str, item_type: type) -> List[Any]:
        """
        Split the required value for key on commas and parse each item.

        Raises:
            NotFoundError: If key is not set.
            ParseError: If any item cannot be parsed as item_type.
        """
        return [self.registry.parse(item_type, item) for item in self.get_list(key)]

    def get_map(self, key: str) -> Dict[str, str]:
        """
        Parse the required value for key as "k1:v1,k2:v2" into a dict.

        Each item must contain exactly one colon. When a key appears more
        than once, the last occurrence wins.

        Raises:
            NotFoundError: If key is not set.
            FormatError: If an item has no colon or more than one.
        """
        result: Dict[str, str] = {}
        for item in self.get_list(key):
            parts = item.split(KEY_VALUE_SEPARATOR)
            if len(parts) != 2:
                raise FormatError(
                    key,
                    item,
                    f"expected exactly one '{KEY_VALUE_SEPARATOR}', found {len(parts) - 1}",
                )
            item_key, item_value = parts
            result[item_key] = item_value
        return result
