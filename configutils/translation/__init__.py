"""
Generic one-method translation contract (From -> To).
"""

from configutils.translation.base import FunctionTranslator, Translator

__all__ = ["Translator", "FunctionTranslator"]
