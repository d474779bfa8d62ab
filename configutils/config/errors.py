"""
Exceptions raised by the settings accessor.

**Conceptual**: Configuration errors are treated as unrecoverable at the point
of use. A missing or malformed setting should stop the application at startup
with a message that names the offending key or text, not fail later with a
confusing TypeError deep inside business logic.

All exceptions derive from SettingsError, so callers can catch every
configuration failure with one except clause, or catch the specific subclass
when they want to handle only (say) a missing key.
"""


class SettingsError(Exception):
    """Base exception for all settings accessor errors."""
    pass


class NotFoundError(SettingsError, LookupError):
    """
    Raised when a required setting or connection string is absent.

    **Recovery**: Add the key to your .env file or environment variables.

    Attributes:
        key: The setting name that could not be found.
    """

    def __init__(self, key: str, kind: str = "setting"):
        self.key = key
        self.kind = kind
        super().__init__(f"Unable to find {kind}: {key}")


class ParseError(SettingsError, ValueError):
    """
    Raised when a setting's text cannot be coerced into the requested type.

    Covers two situations: no parsing strategy exists for the type at all, or
    the strategy exists but rejected the text (e.g. int("abc")).

    Attributes:
        type_name: Name of the requested type (e.g. "int").
        text: The raw setting value that failed to parse.
    """

    def __init__(self, type_name: str, text: str):
        self.type_name = type_name
        self.text = text
        super().__init__(f"Error creating type {type_name} from text '{text}'")


class FormatError(SettingsError, ValueError):
    """
    Raised when a list or map setting contains a malformed entry.

    Attributes:
        key: The setting name holding the malformed value.
        segment: The offending item (e.g. "b" in "a:1,b").
    """

    def __init__(self, key: str, segment: str, reason: str):
        self.key = key
        self.segment = segment
        super().__init__(f"Malformed entry '{segment}' in setting {key}: {reason}")
