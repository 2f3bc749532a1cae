"""Test the translate enhancer and store bindings."""

import pytest

from phrasebind.core.actions import Action
from phrasebind.core.binding import connect, get_display_name, translate
from phrasebind.core.binding_config import ScopeOnly
from phrasebind.core.component import Component
from phrasebind.core.reducer import set_language


def dummy_component(p, **props):
    """Render the three translator forms."""
    return {"t": p.t("hello"), "tc": p.tc("hello"), "tu": p.tu("hello")}


def create_anonymous_component():
    return lambda **props: None


class TrackingComponent(Component):
    """Records every translator change it receives."""

    def __init__(self, **props):
        super().__init__(**props)
        self.p_changed = False
        self.renders = 0

    def will_receive_props(self, next_props):
        if next_props["p"] is not self.props["p"]:
            self.p_changed = True

    def render(self):
        self.renders += 1
        return self.props["p"].t("hello")


class UnrelatedComponent(Component):
    """Dispatches an unrelated action once mounted."""

    dispatches = 0

    def did_mount(self):
        UnrelatedComponent.dispatches += 1
        self.props["dispatch"](Action("DUMMY", "re-render on every dispatch"))

    def render(self):
        return self.props["dummy"]


@pytest.fixture(autouse=True)
def reset_unrelated():
    UnrelatedComponent.dispatches = 0


def test_provides_valid_translator(store):
    """Test that the wrapped unit receives a working p."""
    enhanced = translate(dummy_component)

    with enhanced.mount(store) as binding:
        assert binding.output == {"t": "hello", "tc": "Hello", "tu": "HELLO"}


def test_all_call_shapes_give_same_display_name():
    """Test curried and direct forms name the unit identically."""
    expected = translate(dummy_component).display_name
    shapes = [
        translate()(dummy_component),
        translate(dummy_component),
        translate("", dummy_component),
        translate("")(dummy_component),
        translate({"polyglotScope": ""})(dummy_component),
        translate({"polyglotScope": "", "ownPhrases": {"hello": "Hi !"}})(dummy_component),
        translate({"ownPhrases": {"hello": "Hi !"}})(dummy_component),
        translate({"ownPhrases": {"hello": "Hi !"}}, dummy_component),
        translate(ScopeOnly("scope1"), dummy_component),
    ]

    assert expected == "Translated(dummy_component)"
    for enhanced in shapes:
        assert enhanced.display_name == expected


def test_display_name_prefers_explicit_name():
    """Test explicit display_name wins over __name__."""
    unit = create_anonymous_component()
    unit.display_name = "DummyComponent"

    assert translate(unit).display_name == "Translated(DummyComponent)"
    assert translate("scope1", unit).display_name == "Translated(DummyComponent)"


def test_display_name_for_anonymous_unit():
    """Test the fallback name for lambdas."""
    assert translate(create_anonymous_component()).display_name == "Translated(Component)"
    assert get_display_name(object()) == "Component"
    assert translate(TrackingComponent).display_name == "Translated(TrackingComponent)"


def test_no_rerender_on_unrelated_dispatch(store):
    """Test that an unrelated dispatch keeps p and skips re-rendering."""
    enhanced = translate(TrackingComponent)
    connected = connect(lambda state, props: {"dummy": state["dummy"]})(UnrelatedComponent)

    with enhanced.mount(store) as binding, connected.mount(store) as unrelated:
        p_before = binding.translator

        assert UnrelatedComponent.dispatches == 1
        assert store.get_state()["dummy"] == "re-render on every dispatch"
        assert unrelated.render_count == 2
        assert unrelated.output == "re-render on every dispatch"

        assert binding.translator is p_before
        assert binding.render_count == 1
        assert binding.instance.p_changed is False
        assert binding.output == "hello"


def test_no_rerender_with_multiple_configured_bindings(store):
    """Test four differently configured bindings under one shared dispatch."""
    units = [
        translate()(TrackingComponent),
        translate("scope1")(TrackingComponent),
        translate("scope2")(TrackingComponent),
        translate(TrackingComponent),
    ]
    bindings = [unit.mount(store) for unit in units]
    translators = [binding.translator for binding in bindings]
    try:
        assert [b.output for b in bindings] == ["hello", "hello2", "hello3", "hello"]

        unrelated = connect(lambda state, props: {"dummy": state["dummy"]})(UnrelatedComponent).mount(
            store
        )
        with unrelated:
            assert UnrelatedComponent.dispatches == 1
            assert unrelated.render_count == 2

        for binding, before in zip(bindings, translators):
            assert binding.translator is before
            assert binding.render_count == 1
            assert binding.instance.p_changed is False
            assert binding.mapper.entry.builds == 1
    finally:
        for binding in bindings:
            binding.close()


def test_identical_configurations_keep_separate_caches(store):
    """Test that two mounts of one enhancer never share a translator."""
    enhanced = translate("scope1")(dummy_component)

    with enhanced.mount(store) as first, enhanced.mount(store) as second:
        assert first.translator is not second.translator
        assert first.mapper.entry is not second.mapper.entry
        assert first.output == second.output


def test_locale_change_rebuilds_translator(store):
    """Test that SET_LANGUAGE produces a new p and a re-render."""
    enhanced = translate(TrackingComponent)

    with enhanced.mount(store) as binding:
        p_before = binding.translator
        store.dispatch(set_language("fr", {"hello": "bonjour"}))

        assert binding.translator is not p_before
        assert binding.translator.locale == "fr"
        assert binding.output == "bonjour"
        assert binding.instance.p_changed is True
        assert binding.render_count == 2


def test_phrase_replacement_with_same_locale_rebuilds(store, phrases):
    """Test that a new phrase tree reference rebuilds even for the same locale."""
    enhanced = translate(dummy_component)

    with enhanced.mount(store) as binding:
        p_before = binding.translator
        store.dispatch(set_language("en", {**phrases, "hello": "hi"}))

        assert binding.translator is not p_before
        assert binding.output["tc"] == "Hi"


def test_sibling_scope_change_keeps_scoped_translator(store, phrases):
    """Test that changing another scope's subtree does not touch this binding."""
    enhanced = translate("scope1")(dummy_component)

    with enhanced.mount(store) as binding:
        p_before = binding.translator
        store.dispatch(set_language("en", {**phrases, "scope2": {"hello": "other"}}))

        assert binding.translator is p_before
        assert binding.render_count == 1


def test_own_phrases_override(store):
    """Test own phrases win over the store's phrases at the scope level."""
    enhanced = translate({"polyglotScope": "scope1", "ownPhrases": {"bye": "bye"}})(
        lambda p, **props: (p.t("hello"), p.tc("bye"))
    )
    overriding = translate({"ownPhrases": {"hello": "Hi !"}}, dummy_component)

    with enhanced.mount(store) as scoped, overriding.mount(store) as root:
        assert scoped.output == ("hello2", "Bye")
        assert root.output["t"] == "Hi !"

        p_before = root.translator
        store.dispatch(Action("DUMMY", "x"))
        assert root.translator is p_before


def test_missing_scope_renders_keys(store):
    """Test that an unknown scope yields empty translations, not an error."""
    enhanced = translate("nope", dummy_component)

    with enhanced.mount(store) as binding:
        assert binding.output["t"] == "hello"
        p_before = binding.translator
        store.dispatch(Action("DUMMY", "x"))
        assert binding.translator is p_before


def test_props_pass_through(store):
    """Test parent props reach the unit unchanged and p always wins."""
    received = []

    def unit(**props):
        received.append(props)
        return props["p"].t("hello")

    enhanced = translate(unit)
    payload = {"id": 7}

    with enhanced.mount(store, item=payload, p="parent") as binding:
        assert received[-1]["item"] is payload
        assert received[-1]["p"] is binding.translator

        binding.update(item=payload, p="parent")
        assert binding.render_count == 1

        binding.update(item={"id": 8})
        assert binding.render_count == 2
        assert received[-1]["item"] == {"id": 8}
        assert received[-1]["p"] is binding.translator


def test_close_unsubscribes(store):
    """Test teardown releases the store subscription."""
    enhanced = translate(TrackingComponent)
    listeners = store.listener_count

    binding = enhanced.mount(store)
    assert store.listener_count == listeners + 1

    binding.close()
    binding.close()
    assert binding.closed
    assert store.listener_count == listeners

    store.dispatch(set_language("fr", {"hello": "bonjour"}))
    assert binding.render_count == 1


def test_context_manager_unsubscribes_on_error(store):
    """Test teardown runs when the block raises."""
    enhanced = translate(dummy_component)
    listeners = store.listener_count

    with pytest.raises(RuntimeError):
        with enhanced.mount(store):
            raise RuntimeError("unmount abnormally")

    assert store.listener_count == listeners


def test_failed_first_render_unsubscribes(store):
    """Test that a unit raising during mount leaves no subscription behind."""

    def broken(**props):
        raise ValueError("render failed")

    listeners = store.listener_count
    with pytest.raises(ValueError):
        translate(broken).mount(store)

    assert store.listener_count == listeners


def test_will_unmount_hook_runs(store):
    """Test class units are told about teardown."""
    unmounted = []

    class Hooked(TrackingComponent):
        def will_unmount(self):
            unmounted.append(True)

    with translate(Hooked).mount(store):
        pass

    assert unmounted == [True]


def test_mount_survives_invalid_env_level(store, monkeypatch):
    """Test a bad PHRASEBIND_LOG_LEVEL does not stop bindings from mounting."""
    monkeypatch.setenv("PHRASEBIND_LOG_LEVEL", "verbose")

    with translate(lambda p, **props: p.t("hello")).mount(store) as binding:
        assert binding.output == "hello"


def test_enhanced_unit_exposes_config():
    """Test the normalized configuration is available for inspection."""
    enhanced = translate({"polyglotScope": "scope1", "ownPhrases": {"bye": "bye"}}, dummy_component)

    assert enhanced.config.scope == "scope1"
    assert enhanced.config.own_phrases["bye"] == "bye"
    assert connect()(dummy_component).config is None
