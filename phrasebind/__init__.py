#!/usr/bin/env python3
"""phrasebind - translations bound to store state.

Bindings hand rendering units a translator (``p``) built from the store's
locale and phrase tree, and keep handing out the same translator until the
inputs of that binding change.

Example:
    from phrasebind import combine_reducers, create_store, polyglot_reducer, set_language, translate

    store = create_store(combine_reducers({"polyglot": polyglot_reducer}))
    store.dispatch(set_language("en", {"hello": "hello"}))

    Greeting = translate(lambda p, **props: p.tc("hello"))
    with Greeting.mount(store) as binding:
        binding.output  # 'Hello'
"""

from .__version__ import __version__
from .core.actions import Action, ActionType
from .core.binding import (
    Binding,
    EnhancedUnit,
    connect,
    enhance,
    get_display_name,
    translate,
)
from .core.binding_config import BindingConfig, FullConfig, NoConfig, ScopeOnly, normalize
from .core.component import Component
from .core.config_loader import configure, get_settings, load_settings
from .core.config_schema import Settings
from .core.lookup import lookup
from .core.memo import CacheEntry, get_or_build
from .core.reducer import polyglot_reducer, set_language
from .core.scope import EMPTY_PHRASES, resolve_phrases, select_scope
from .core.selectors import get_locale, get_p, get_phrases
from .core.store import Store, Subscription, combine_reducers, create_store
from .core.translator import Translator, build_translator

__all__ = [
    "__version__",
    # Store
    "Action",
    "ActionType",
    "Store",
    "Subscription",
    "combine_reducers",
    "create_store",
    # Polyglot slice
    "polyglot_reducer",
    "set_language",
    "get_locale",
    "get_phrases",
    "get_p",
    # Translators
    "Translator",
    "build_translator",
    "lookup",
    "EMPTY_PHRASES",
    "select_scope",
    "resolve_phrases",
    "CacheEntry",
    "get_or_build",
    # Bindings
    "BindingConfig",
    "NoConfig",
    "ScopeOnly",
    "FullConfig",
    "normalize",
    "Binding",
    "Component",
    "EnhancedUnit",
    "connect",
    "enhance",
    "get_display_name",
    "translate",
    # Settings
    "Settings",
    "configure",
    "get_settings",
    "load_settings",
]
