"""Scope selection and own-phrase merging."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from phrasebind.core.config_loader import get_settings
from phrasebind.core.logging_utils import setup_logger

logger = setup_logger(__name__)

# Shared result for missing scopes so repeated misses keep one reference
EMPTY_PHRASES: Mapping[str, Any] = MappingProxyType({})


def select_scope(
    phrases: Mapping[str, Any], scope: str = "", warn: bool = True
) -> Mapping[str, Any]:
    """Select the raw phrase subtree for a scope.

    Args:
        phrases: Full phrase tree from state
        scope: Top-level key, empty for the whole tree
        warn: Log when the scope cannot be used

    Returns:
        The subtree itself (same object as in state), or EMPTY_PHRASES when
        the scope is absent or not a mapping
    """
    if not scope:
        return phrases

    subtree = phrases.get(scope) if isinstance(phrases, Mapping) else None
    if isinstance(subtree, Mapping):
        return subtree

    if warn and get_settings().warn_missing_scope:
        if subtree is None:
            logger.warning(f"Scope '{scope}' not found in phrases, translations will be empty")
        else:
            logger.warning(
                f"Scope '{scope}' holds {type(subtree).__name__}, not a phrase tree; "
                "translations will be empty"
            )
    return EMPTY_PHRASES


def merge_own_phrases(
    subtree: Mapping[str, Any], own_phrases: Mapping[str, Any] | None
) -> Mapping[str, Any]:
    """Overlay own phrases on a subtree, one level deep.

    Args:
        subtree: Selected phrase subtree
        own_phrases: Instance-local overrides

    Returns:
        The subtree when there is nothing to merge, otherwise a new dict
    """
    if not own_phrases:
        return subtree
    return {**subtree, **own_phrases}


def resolve_phrases(
    phrases: Mapping[str, Any],
    scope: str = "",
    own_phrases: Mapping[str, Any] | None = None,
) -> Mapping[str, Any]:
    """Compute the effective phrase tree for a binding.

    Args:
        phrases: Full phrase tree from state
        scope: Top-level key selecting a subtree
        own_phrases: Instance-local overrides, winning on key collision

    Returns:
        Effective phrase tree
    """
    return merge_own_phrases(select_scope(phrases, scope), own_phrases)
