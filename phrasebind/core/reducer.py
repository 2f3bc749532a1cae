"""Polyglot state slice: reducer and action creator."""

from collections.abc import Mapping
from typing import Any

from phrasebind.core.actions import Action, ActionType
from phrasebind.core.config_loader import get_settings
from phrasebind.core.logging_utils import log_event, setup_logger

logger = setup_logger(__name__)


def set_language(locale: str, phrases: Mapping[str, Any]) -> Action:
    """Create an action replacing the active locale and phrase tree.

    Args:
        locale: Locale code ('en', 'fr', ...)
        phrases: Phrase tree for that locale

    Returns:
        SET_LANGUAGE action
    """
    return Action(ActionType.SET_LANGUAGE, {"locale": locale, "phrases": phrases})


def polyglot_reducer(state: Mapping[str, Any] | None, action: Action) -> Mapping[str, Any]:
    """Reduce the polyglot slice.

    Unrelated actions return the same state object.
    """
    if state is None:
        state = {"locale": get_settings().default_locale, "phrases": {}}

    if action.type != ActionType.SET_LANGUAGE:
        return state

    payload = action.payload or {}
    locale = payload.get("locale", state["locale"])
    phrases = payload.get("phrases", state["phrases"])
    if locale != state["locale"]:
        log_event(logger, "language_changed", {"from": state["locale"], "to": locale})
    return {"locale": locale, "phrases": phrases}
