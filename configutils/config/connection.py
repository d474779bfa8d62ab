"""
Connection descriptor value object.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConnectionDescriptor:
    """
    A named connection target read from configuration.

    **Conceptual**: Connection strings (database DSNs, broker URLs, etc.) are
    ordinary string settings, but callers usually want to keep the name they
    were looked up under, and sometimes which driver/provider they are meant
    for. str(descriptor) yields the connection string itself, so a descriptor
    can be passed anywhere a plain DSN is expected.

    Attributes:
        name: The key the connection string was stored under.
        connection_string: The raw connection string.
        provider_name: Optional provider/driver hint (e.g. "postgresql").
    """
    name: str
    connection_string: str
    provider_name: Optional[str] = None

    def __str__(self) -> str:
        return self.connection_string
