#!/usr/bin/env python3
"""
Translator value objects.

A translator captures a phrase tree and a locale at construction and never
reads live state afterwards, so one instance stays valid for its inputs.
Equality is identity: bindings hand out the same instance until their inputs
change, and consumers detect changes with ``is``.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from phrasebind.core.lookup import lookup as default_lookup

__all__ = ["Translator", "build_translator", "capitalize_first"]

Lookup = Callable[[Mapping[str, Any], str, Mapping[str, Any] | None, str | None], str]


def capitalize_first(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


@dataclass(frozen=True, eq=False)
class Translator:
    """Translation functions bound to one phrase tree and locale."""

    phrases: Mapping[str, Any]
    locale: str
    lookup: Lookup = default_lookup

    def t(self, key: str, options: Mapping[str, Any] | None = None, **kwargs) -> str:
        """Translate a key.

        Args:
            key: Translation key
            options: Lookup options (format variables, ``count``, ``default``)
            **kwargs: More options, taking precedence over ``options``

        Returns:
            Translated string as returned by the lookup
        """
        if kwargs:
            options = {**(options or {}), **kwargs}
        return self.lookup(self.phrases, key, options, self.locale)

    def tc(self, key: str, options: Mapping[str, Any] | None = None, **kwargs) -> str:
        """Translate a key and capitalize the first character."""
        return capitalize_first(self.t(key, options, **kwargs))

    def tu(self, key: str, options: Mapping[str, Any] | None = None, **kwargs) -> str:
        """Translate a key and uppercase the whole result."""
        return self.t(key, options, **kwargs).upper()

    def __repr__(self) -> str:
        return f"Translator(locale={self.locale!r}, keys={len(self.phrases)})"


def build_translator(
    phrases: Mapping[str, Any],
    locale: str,
    lookup: Lookup = default_lookup,
) -> Translator:
    """Build a translator for an effective phrase tree.

    Args:
        phrases: Effective phrase tree (scope resolved, own phrases merged)
        locale: Active locale
        lookup: Lookup collaborator

    Returns:
        New Translator
    """
    return Translator(phrases=phrases, locale=locale, lookup=lookup)
