#!/usr/bin/env python3
"""
Store bindings for rendering units.

``connect`` subscribes a rendering unit to a store and re-renders it only when
the props it maps from state change identity. ``translate`` is a connect whose
mapping hands the unit a cached Translator as ``p``.

Usage:
    Greeting = translate("home")(greeting)
    with Greeting.mount(store, name="Ada") as binding:
        binding.output
"""

from collections.abc import Callable, Mapping
from typing import Any

from phrasebind.core.binding_config import BindingConfig, FullConfig, NoConfig, ScopeOnly, normalize
from phrasebind.core.component import Component
from phrasebind.core.logging_utils import setup_logger
from phrasebind.core.memo import CacheEntry, get_or_build
from phrasebind.core.selectors import get_locale, get_phrases
from phrasebind.core.store import Store, Subscription
from phrasebind.core.translator import Translator

__all__ = [
    "Binding",
    "EnhancedUnit",
    "TranslationMapper",
    "connect",
    "enhance",
    "get_display_name",
    "shallow_equal",
    "translate",
]

logger = setup_logger(__name__)

DEFAULT_NAME = "Component"

MapState = Callable[[Mapping[str, Any], dict[str, Any]], dict[str, Any]]


def get_display_name(unit: Any) -> str:
    """Get a diagnostic name for a rendering unit.

    Args:
        unit: Function or Component class

    Returns:
        Explicit display_name, else __name__, else "Component" for anonymous units
    """
    name = getattr(unit, "display_name", None)
    if isinstance(name, str) and name:
        return name
    name = getattr(unit, "__name__", None)
    if isinstance(name, str) and name and not name.startswith("<"):
        return name
    return DEFAULT_NAME


def shallow_equal(a: Mapping[str, Any] | None, b: Mapping[str, Any] | None) -> bool:
    """Compare two prop mappings key by key using identity."""
    if a is b:
        return True
    if a is None or b is None or a.keys() != b.keys():
        return False
    return all(a[key] is b[key] for key in a)


def _is_component_class(unit: Any) -> bool:
    return isinstance(unit, type) and issubclass(unit, Component)


class TranslationMapper:
    """Maps state to ``{"p": translator}`` for one binding instance."""

    def __init__(self, config: BindingConfig):
        self.config = config
        self.entry = CacheEntry()

    def __call__(self, state: Mapping[str, Any], props: dict[str, Any]) -> dict[str, Any]:
        translator = get_or_build(
            self.entry,
            get_locale(state),
            get_phrases(state),
            self.config.own_phrases,
            self.config.scope,
        )
        return {"p": translator}


class Binding:
    """One mounted rendering unit with its own store subscription.

    Closing is unconditional and idempotent; use as a context manager so the
    subscription is released on every exit path.
    """

    def __init__(self, enhanced: "EnhancedUnit", store: Store, props: dict[str, Any]):
        """Initialize binding (not yet subscribed).

        Args:
            enhanced: Enhanced unit being mounted
            store: Store to subscribe to
            props: Props from the parent
        """
        self.enhanced = enhanced
        self.store = store
        self.props = props
        self.mapper = enhanced.map_state_factory()
        self.output: Any = None
        self.render_count = 0

        self._mapped: dict[str, Any] | None = None
        self._instance: Component | None = None
        self._subscription: Subscription | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the binding has been torn down."""
        return self._closed

    @property
    def translator(self) -> Translator | None:
        """Translator currently supplied as ``p``, if any."""
        return (self._mapped or {}).get("p")

    @property
    def instance(self) -> Component | None:
        """Component instance for class-based units."""
        return self._instance

    def mount(self) -> "Binding":
        """Subscribe to the store and render for the first time."""
        self._subscription = self.store.subscribe(self._handle_change)
        try:
            self._mapped = self._map_state()
            self._render()
            if self._instance is not None:
                self._instance.did_mount()
        except Exception:
            self.close()
            raise
        logger.debug(f"Mounted {self.enhanced.display_name}")
        return self

    def update(self, **props):
        """Replace parent props and re-render if anything changed.

        Args:
            **props: New parent props
        """
        if self._closed:
            return
        mapped = self._map_state(props)
        if shallow_equal(props, self.props) and shallow_equal(mapped, self._mapped):
            return
        self.props = props
        self._mapped = mapped
        self._render()

    def close(self):
        """Tear down: notify the component and drop the subscription."""
        if self._closed:
            return
        self._closed = True
        try:
            if self._instance is not None:
                self._instance.will_unmount()
        finally:
            if self._subscription is not None:
                self._subscription.close()
            logger.debug(f"Closed {self.enhanced.display_name}")

    def __enter__(self) -> "Binding":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _map_state(self, props: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.mapper(self.store.get_state(), self.props if props is None else props)

    def _handle_change(self):
        """Store listener: re-render only when mapped props changed."""
        if self._closed:
            return
        mapped = self._map_state()
        if shallow_equal(mapped, self._mapped):
            return
        self._mapped = mapped
        self._render()

    def _render(self):
        props = {**self.props, **self._mapped}
        if self.enhanced.pass_dispatch:
            props.setdefault("dispatch", self.store.dispatch)

        wrapped = self.enhanced.wrapped
        if _is_component_class(wrapped):
            if self._instance is None:
                self._instance = wrapped(**props)
            else:
                self._instance.will_receive_props(props)
                self._instance.props = props
            self.output = self._instance.render()
        else:
            self.output = wrapped(**props)
        self.render_count += 1


class EnhancedUnit:
    """A rendering unit wrapped with a store mapping, ready to mount."""

    def __init__(
        self,
        wrapped: Any,
        map_state_factory: Callable[[], MapState],
        display_name: str,
        config: BindingConfig | None = None,
        pass_dispatch: bool = False,
    ):
        """Initialize enhanced unit.

        Args:
            wrapped: Function or Component class to render
            map_state_factory: Creates one mapping callable per mounted binding
            display_name: Diagnostic name
            config: Translation configuration, for translate() units
            pass_dispatch: Also pass the store's dispatch as a prop
        """
        self.wrapped = wrapped
        self.map_state_factory = map_state_factory
        self.display_name = display_name
        self.config = config
        self.pass_dispatch = pass_dispatch

    def mount(self, store: Store, **props) -> Binding:
        """Mount a new binding instance.

        Args:
            store: Store providing state
            **props: Props from the parent, passed through unchanged

        Returns:
            Mounted Binding
        """
        return Binding(self, store, props).mount()

    def __repr__(self) -> str:
        return f"<EnhancedUnit {self.display_name}>"


def _no_state(state: Mapping[str, Any], props: dict[str, Any]) -> dict[str, Any]:
    return {}


def connect(map_state: MapState | None = None, pass_dispatch: bool = True):
    """Create an enhancer mapping store state to props.

    Args:
        map_state: Function(state, props) returning props taken from state
        pass_dispatch: Also pass the store's dispatch as ``dispatch``

    Returns:
        Function(unit) -> EnhancedUnit
    """
    mapping = map_state or _no_state

    def enhancer(unit: Any) -> EnhancedUnit:
        return EnhancedUnit(
            unit,
            lambda: mapping,
            display_name=f"Connected({get_display_name(unit)})",
            pass_dispatch=pass_dispatch,
        )

    return enhancer


def enhance(config: BindingConfig, unit: Any) -> EnhancedUnit:
    """Bind a rendering unit to translations.

    Args:
        config: Canonical binding configuration
        unit: Function or Component class

    Returns:
        EnhancedUnit supplying ``p`` to the unit
    """
    return EnhancedUnit(
        unit,
        lambda: TranslationMapper(config),
        display_name=f"Translated({get_display_name(unit)})",
        config=config,
    )


def _is_rendering_unit(value: Any) -> bool:
    return callable(value) and not isinstance(value, (str, Mapping, NoConfig, ScopeOnly, FullConfig))


def translate(options: Any = None, unit: Any = None):
    """Translation enhancer.

    Accepted forms:
        translate(unit)
        translate()(unit)
        translate("scope")(unit)            translate("scope", unit)
        translate({"scope": ..., "own_phrases": {...}})(unit)
        translate({"scope": ..., "own_phrases": {...}}, unit)

    A NoConfig, ScopeOnly or FullConfig instance can replace the options.

    Returns:
        EnhancedUnit when a unit is given, otherwise Function(unit) -> EnhancedUnit
    """
    if unit is None and _is_rendering_unit(options):
        return enhance(normalize(None), options)

    config = normalize(options)
    if unit is not None:
        return enhance(config, unit)

    def enhancer(wrapped: Any) -> EnhancedUnit:
        return enhance(config, wrapped)

    return enhancer
