"""
Translator abstraction: a one-method contract for converting one type to another.

**Conceptual**: A Translator is anything that can turn a value of type From
into a value of type To. It is deliberately minimal: one method, parse().
The settings accessor uses translators to turn configuration text into typed
values, but nothing here is specific to configuration.

**Why a Protocol?**
  - Structural typing: any object with a parse() method qualifies, no base class.
  - Plain functions are just as good; FunctionTranslator adapts them when an
    object with a parse() method is required.
"""

from typing import Callable, Generic, Protocol, TypeVar

From = TypeVar("From", contravariant=True)
To = TypeVar("To", covariant=True)

_F = TypeVar("_F")
_T = TypeVar("_T")


class Translator(Protocol[From, To]):
    """
    Protocol for converting a From value into a To value.

    **Example**:
        >>> class HostPortTranslator:
        ...     def parse(self, text: str) -> tuple:
        ...         host, port = text.rsplit(":", 1)
        ...         return host, int(port)
        >>>
        >>> HostPortTranslator().parse("db.local:5432")
        ('db.local', 5432)
    """

    def parse(self, from_: From) -> To:
        """
        Convert from_ into the target type.

        Raises:
            ValueError or TypeError if from_ cannot be converted.
        """
        ...


class FunctionTranslator(Generic[_F, _T]):
    """Adapts a plain function into a Translator."""

    def __init__(self, func: Callable[[_F], _T]):
        self.func = func

    def parse(self, from_: _F) -> _T:
        return self.func(from_)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"FunctionTranslator({name})"
