#!/usr/bin/env python3
"""Per-binding translator cache.

Reuse rules:
    locale       compared by value
    raw subtree  compared by identity (the scope's subtree as held in state,
                 before own phrases are merged)
    own phrases  compared by identity

Identity comparison assumes the store never mutates a subtree in place.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from phrasebind.core.logging_utils import log_event, setup_logger
from phrasebind.core.scope import resolve_phrases, select_scope
from phrasebind.core.translator import Translator, build_translator

__all__ = ["CacheEntry", "get_or_build"]

logger = setup_logger(__name__)

TranslatorFactory = Callable[[Mapping[str, Any], str], Translator]


@dataclass(eq=False)
class CacheEntry:
    """Last inputs and translator of one binding instance."""

    last_locale: str | None = None
    last_phrases: Mapping[str, Any] | None = None
    last_own_phrases: Mapping[str, Any] | None = None
    translator: Translator | None = None
    builds: int = 0

    def matches(
        self, locale: str, phrases: Mapping[str, Any], own_phrases: Mapping[str, Any] | None
    ) -> bool:
        """Check whether the cached translator is valid for these inputs."""
        return (
            self.translator is not None
            and self.last_locale == locale
            and self.last_phrases is phrases
            and self.last_own_phrases is own_phrases
        )

    def clear(self):
        """Drop the cached translator and inputs."""
        self.last_locale = None
        self.last_phrases = None
        self.last_own_phrases = None
        self.translator = None


def get_or_build(
    entry: CacheEntry,
    locale: str,
    phrases: Mapping[str, Any],
    own_phrases: Mapping[str, Any] | None = None,
    scope: str = "",
    factory: TranslatorFactory = build_translator,
) -> Translator:
    """Return the cached translator or build and cache a new one.

    Args:
        entry: Cache entry owned by the calling binding
        locale: Current locale
        phrases: Full phrase tree from current state
        own_phrases: The binding's own phrase overrides
        scope: The binding's scope
        factory: Callable(effective_phrases, locale) building a translator

    Returns:
        Translator (the cached instance when inputs are unchanged)
    """
    raw = select_scope(phrases, scope, warn=False)
    if entry.matches(locale, raw, own_phrases):
        return entry.translator

    effective = resolve_phrases(phrases, scope, own_phrases)
    translator = factory(effective, locale)

    entry.last_locale = locale
    entry.last_phrases = raw
    entry.last_own_phrases = own_phrases
    entry.translator = translator
    entry.builds += 1

    log_event(
        logger,
        "translator_built",
        {"locale": locale, "scope": scope or "<root>", "builds": entry.builds},
        level=logging.DEBUG,
    )
    return translator
