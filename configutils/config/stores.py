"""
Configuration stores: read-only string-to-string lookups.

**Conceptual**: The accessor never owns configuration. It reads from a store
that somebody else populated: the process environment, a .env file, a dict
built by a test. A store only has to answer "what is the text for this key?"
and "is this key present?", so all of them satisfy the small ConfigStore
protocol below.

**Why a protocol instead of plain dicts?**
  - os.environ changes while the process runs; EnvironmentStore reads it at
    lookup time instead of copying it once.
  - ChainStore lets a test or a CLI override a few keys on top of the
    environment without mutating either.
"""

import os
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union

from dotenv import dotenv_values


class ConfigStore(Protocol):
    """Protocol for a read-only key-value configuration source."""

    def get(self, key: str) -> Optional[str]:
        """Return the raw value for key, or None if absent."""
        ...

    def __contains__(self, key: object) -> bool:
        ...


class MappingStore:
    """
    Store backed by any Mapping[str, str].

    The mapping is copied, so later changes to the caller's dict are not seen.
    """

    def __init__(self, values: Mapping[str, str]):
        self._values = dict(values)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"MappingStore({len(self._values)} keys)"


class EnvironmentStore:
    """
    Store backed by os.environ, read at lookup time.

    Args:
        prefix: Optional key prefix, e.g. "MYAPP_" makes get("PORT") read
               MYAPP_PORT.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(self.prefix + key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and (self.prefix + key) in os.environ

    def __repr__(self) -> str:
        return f"EnvironmentStore(prefix={self.prefix!r})"


class DotenvStore:
    """
    Store backed by a .env file, parsed once with python-dotenv.

    **Conceptual**: Unlike load_dotenv(), this does not touch os.environ.
    The file is read when the store is created; keys declared without a value
    (a bare "KEY" line) are treated as absent.

    Raises:
        FileNotFoundError: If path does not exist.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        if not self.path.is_file():
            raise FileNotFoundError(f".env file not found: {self.path}")
        self._values = {
            key: value
            for key, value in dotenv_values(self.path).items()
            if value is not None
        }

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"DotenvStore({str(self.path)!r})"


class ChainStore:
    """Store that consults several stores in order; the first hit wins."""

    def __init__(self, *stores: ConfigStore):
        self.stores = stores

    def get(self, key: str) -> Optional[str]:
        for store in self.stores:
            value = store.get(key)
            if value is not None:
                return value
        return None

    def __contains__(self, key: object) -> bool:
        return any(key in store for store in self.stores)

    def __repr__(self) -> str:
        return f"ChainStore({', '.join(repr(s) for s in self.stores)})"
