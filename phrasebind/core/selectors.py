"""Selectors over the polyglot slice of store state."""

from collections.abc import Mapping
from typing import Any

from phrasebind.core.config_loader import get_settings
from phrasebind.core.scope import EMPTY_PHRASES, resolve_phrases
from phrasebind.core.translator import Translator, build_translator


def get_polyglot(state: Mapping[str, Any]) -> Mapping[str, Any]:
    """Get the polyglot slice, empty when the store has none."""
    return state.get(get_settings().state_key) or EMPTY_PHRASES


def get_locale(state: Mapping[str, Any]) -> str:
    """Get the active locale."""
    return get_polyglot(state).get("locale") or get_settings().default_locale


def get_phrases(state: Mapping[str, Any]) -> Mapping[str, Any]:
    """Get the full phrase tree."""
    phrases = get_polyglot(state).get("phrases")
    return phrases if isinstance(phrases, Mapping) else EMPTY_PHRASES


def get_p(
    state: Mapping[str, Any],
    scope: str = "",
    own_phrases: Mapping[str, Any] | None = None,
) -> Translator:
    """Build a translator straight from state.

    Not memoized: every call returns a new Translator. Bindings use
    the per-instance cache in ``phrasebind.core.memo`` instead.
    """
    phrases = resolve_phrases(get_phrases(state), scope, own_phrases)
    return build_translator(phrases, get_locale(state))
