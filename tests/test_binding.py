"""Tests for GeezBinding, TextField and type_keys (binding.py)."""

import pytest
from unittest.mock import MagicMock
from geez_input.binding import SPECIAL_KEYS, GeezBinding, TextField, type_keys
from geez_input.engine import EngineResult, TransformType


def _type_into(binding: GeezBinding, field: TextField, keys: str) -> None:
    for key in keys:
        binding.handle_key(field, key)


# ── TextField ─────────────────────────────────────────────────────────────────

def test_field_with_cursor_at_end():
    f = TextField.with_cursor_at_end("ሰላም")
    assert f.selection_start == f.selection_end == 3
    assert f.before_cursor() == "ሰላም"
    assert f.after_cursor() == ""


def test_field_selection_is_replaced():
    f = TextField("abcd", selection_start=1, selection_end=3)
    assert f.before_cursor() == "a"
    assert f.after_cursor() == "d"


def test_set_cursor_clamps():
    f = TextField("ab")
    f.set_cursor(10)
    assert f.selection_start == f.selection_end == 2
    f.set_cursor(-1)
    assert f.selection_start == 0


# ── handle_key ────────────────────────────────────────────────────────────────

def test_typing_a_word():
    f = TextField()
    _type_into(GeezBinding(), f, "selam")
    assert f.value == "ሰላም"
    assert f.selection_start == 3


def test_labialized_moves_cursor_back():
    f = TextField()
    _type_into(GeezBinding(), f, "kwa")
    assert f.value == "ኳ"
    assert f.selection_start == f.selection_end == 1


def test_typing_in_the_middle():
    f = TextField("ሰም", selection_start=1, selection_end=1)
    binding = GeezBinding()
    _type_into(binding, f, "la")
    assert f.value == "ሰላም"
    assert f.selection_start == 2


def test_typing_over_a_selection():
    f = TextField("ሰxxም", selection_start=1, selection_end=3)
    GeezBinding().handle_key(f, "l")
    assert f.value == "ሰልም"
    assert f.selection_start == 2


@pytest.mark.parametrize("key", sorted(SPECIAL_KEYS))
def test_special_keys_are_left_to_host(key):
    f = TextField.with_cursor_at_end("ሰ")
    assert GeezBinding().handle_key(f, key) is None
    assert f.value == "ሰ"


@pytest.mark.parametrize("mods", [{"ctrl": True}, {"meta": True}, {"alt": True}])
def test_modifier_combinations_are_left_to_host(mods):
    f = TextField()
    assert GeezBinding().handle_key(f, "h", **mods) is None
    assert f.value == ""


def test_named_keys_are_left_to_host():
    f = TextField()
    assert GeezBinding().handle_key(f, "F5") is None
    assert GeezBinding().handle_key(f, "Shift") is None


def test_returns_engine_result():
    f = TextField()
    r = GeezBinding().handle_key(f, "h")
    assert isinstance(r, EngineResult)
    assert r.transform_type is TransformType.CONSONANT


# ── mode / enabled ────────────────────────────────────────────────────────────

def test_latin_mode_skips_engine():
    f = TextField()
    binding = GeezBinding(mode="latin")
    assert binding.handle_key(f, "h") is None
    assert f.value == ""


def test_disabled_skips_engine():
    binding = GeezBinding(enabled=False)
    assert binding.handle_key(TextField(), "h") is None


def test_toggle_mode():
    binding = GeezBinding()
    assert binding.toggle_mode() == "latin"
    assert binding.toggle_mode() == "geez"


def test_unknown_mode_rejected():
    with pytest.raises(ValueError, match="Unknown mode"):
        GeezBinding(mode="amharic")
    binding = GeezBinding()
    with pytest.raises(ValueError):
        binding.mode = "tigrinya"
    assert binding.mode == "geez"


def test_binding_does_not_change_engine():
    binding = GeezBinding(mode="latin")
    r = binding.engine.transform("", "", "h")
    assert r.transformed_value == "ህ"


# ── on_transform callback ─────────────────────────────────────────────────────

def test_callback_receives_each_result():
    cb = MagicMock()
    f = TextField()
    _type_into(GeezBinding(on_transform=cb), f, "ha")
    assert cb.call_count == 2
    last = cb.call_args[0][0]
    assert last.transformed_value == "ሃ"
    assert last.is_replacement


def test_callback_not_called_for_skipped_keys():
    cb = MagicMock()
    GeezBinding(on_transform=cb).handle_key(TextField(), "Backspace")
    cb.assert_not_called()


def test_custom_engine_is_used():
    engine = MagicMock()
    engine.transform.return_value = EngineResult("X", 1, False)
    f = TextField()
    GeezBinding(engine=engine).handle_key(f, "h")
    engine.transform.assert_called_once_with("", "", "h")
    assert f.value == "X"


# ── type_keys ─────────────────────────────────────────────────────────────────

def test_type_keys_word():
    r = type_keys("selam")
    assert r.transformed_value == "ሰላም"
    assert r.new_cursor_position == 3


def test_type_keys_empty():
    r = type_keys("", before="ሰ", after="ም")
    assert r.transformed_value == "ሰም"
    assert r.new_cursor_position == 1
    assert r.transform_type is TransformType.PASSTHROUGH


def test_type_keys_keeps_after_text():
    r = type_keys("kwa", after="ም")
    assert r.transformed_value == "ኳም"
    assert r.new_cursor_position == 1


def test_type_keys_sentence():
    assert type_keys("selam::").transformed_value == "ሰላም።"
