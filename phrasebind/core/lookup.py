"""Default phrase lookup with fallbacks, variable substitution and plurals."""

from collections.abc import Mapping
from typing import Any

from phrasebind.core.logging_utils import setup_logger

logger = setup_logger(__name__)

# Locales whose phrases have a single form regardless of count
SINGLE_FORM_LOCALES = {"ja", "jp", "ko", "zh", "th", "vi", "id", "ms", "tr"}


def find_phrase(phrases: Mapping[str, Any], key: str) -> str | None:
    """Find a phrase by flat key or dotted path.

    Args:
        phrases: Phrase tree
        key: Translation key (e.g., 'menu.title')

    Returns:
        Phrase string, or None if missing or not a string
    """
    value = phrases.get(key)
    if isinstance(value, str):
        return value

    node: Any = phrases
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def _has_plural_forms(locale: str | None) -> bool:
    if not locale:
        return True
    return locale.lower().replace("_", "-").split("-")[0] not in SINGLE_FORM_LOCALES


def lookup(
    phrases: Mapping[str, Any],
    key: str,
    options: Mapping[str, Any] | None = None,
    locale: str | None = None,
) -> str:
    """Translate a key against a phrase tree.

    Args:
        phrases: Phrase tree
        key: Translation key
        options: Format variables plus optional ``default`` (text when the key
            is missing) and ``count`` (selects ``<key>_plural`` when not 1)
        locale: Active locale, used for plural selection

    Returns:
        Translated string, or the default/key when missing

    Example:
        lookup({'items': '{count} item', 'items_plural': '{count} items'},
               'items', {'count': 5}) -> '5 items'
    """
    variables = dict(options or {})
    default = variables.pop("default", None)

    template = None
    count = variables.get("count")
    if count is not None and count != 1 and _has_plural_forms(locale):
        template = find_phrase(phrases, f"{key}_plural")
    if template is None:
        template = find_phrase(phrases, key)
    if template is None:
        template = default if default is not None else key

    if not variables:
        return template

    try:
        return template.format(**variables)
    except (KeyError, ValueError, IndexError, AttributeError, TypeError) as e:
        logger.warning(f"Failed to format translation '{key}': {e}")
        return template
