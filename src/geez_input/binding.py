"""
Headless input binding for the Geez engine.

A host toolkit (web, Qt, Tk, a terminal) owns the real text widget.  What
every host has to do is the same: ignore navigation and shortcut keys,
slice the field at the cursor, call the engine, write the result back and
move the caret.  GeezBinding does exactly that against a plain TextField,
so a host only needs to copy value/selection in and out.

The Geez/Latin mode and the enabled flag live here, never in the engine:
the binding simply decides whether to call the engine at all.

Usage:
    from geez_input.binding import GeezBinding, TextField, type_keys

    field = TextField()
    binding = GeezBinding(on_transform=print)
    for key in "selam":
        binding.handle_key(field, key)
    field.value                      # "ሰላም"

    type_keys("selam").transformed_value   # same thing, no field needed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from geez_input.engine import EngineResult, GeezEngine, TransformType


logger = logging.getLogger(__name__)

# Keys that keep their native editing behaviour
SPECIAL_KEYS = frozenset({
    "Backspace",
    "Delete",
    "ArrowLeft",
    "ArrowRight",
    "ArrowUp",
    "ArrowDown",
    "Home",
    "End",
    "Tab",
    "Enter",
    "Escape",
    "PageUp",
    "PageDown",
})

MODES = ("geez", "latin")


@dataclass
class TextField:
    """Minimal model of a text input: a value and a selection."""

    value: str = ""
    selection_start: int = 0
    selection_end: int = 0

    @classmethod
    def with_cursor_at_end(cls, value: str) -> TextField:
        return cls(value=value, selection_start=len(value), selection_end=len(value))

    def before_cursor(self) -> str:
        return self.value[:self.selection_start]

    def after_cursor(self) -> str:
        # A selected range is overwritten by the next key, as in a browser
        return self.value[self.selection_end:]

    def set_cursor(self, position: int) -> None:
        position = max(0, min(position, len(self.value)))
        self.selection_start = self.selection_end = position


class GeezBinding:
    """Routes committable keystrokes from one field through the engine.

    handle_key() returns None when the key is left to the host (special
    keys, Ctrl/Cmd/Alt combinations, multi-character key names, Latin
    mode, disabled binding) and the EngineResult otherwise.
    """

    def __init__(
        self,
        engine: GeezEngine | None = None,
        mode: str = "geez",
        enabled: bool = True,
        on_transform: Callable[[EngineResult], None] | None = None,
    ):
        self.engine = engine or GeezEngine()
        self._mode = "geez"
        self.mode = mode
        self.enabled = enabled
        self.on_transform = on_transform

    @property
    def mode(self) -> str:
        return self._mode

    @mode.setter
    def mode(self, value: str) -> None:
        if value not in MODES:
            raise ValueError(f"Unknown mode {value!r}; expected one of {', '.join(MODES)}")
        self._mode = value

    def toggle_mode(self) -> str:
        """Switch between Geez and Latin input, returning the new mode."""
        self.mode = "latin" if self._mode == "geez" else "geez"
        return self._mode

    def should_handle(self, key: str, *, ctrl: bool = False, meta: bool = False,
                      alt: bool = False) -> bool:
        if not self.enabled or self._mode != "geez":
            return False
        if key in SPECIAL_KEYS or ctrl or meta:
            return False
        return len(key) == 1 and not alt

    def handle_key(self, field: TextField, key: str, *, ctrl: bool = False,
                   meta: bool = False, alt: bool = False) -> EngineResult | None:
        """Apply one key event to the field."""
        if not self.should_handle(key, ctrl=ctrl, meta=meta, alt=alt):
            return None

        result = self.engine.transform(field.before_cursor(), field.after_cursor(), key)
        field.value = result.transformed_value
        field.set_cursor(result.new_cursor_position)

        if self.on_transform is not None:
            self.on_transform(result)
        return result


def type_keys(
    keys: str,
    engine: GeezEngine | None = None,
    before: str = "",
    after: str = "",
) -> EngineResult:
    """Feed each character of keys through the engine, as if typed.

    Each result's text up to the cursor becomes the next call's
    text_before_cursor.  Returns the last result, or an empty passthrough
    result when keys is empty.
    """
    engine = engine or GeezEngine()
    result = EngineResult(
        transformed_value=before + after,
        new_cursor_position=len(before),
        is_replacement=False,
        transform_type=TransformType.PASSTHROUGH,
    )
    for key in keys:
        result = engine.transform(before, after, key)
        before = result.transformed_value[:result.new_cursor_position]
    logger.debug("typed %r -> %r", keys, result.transformed_value)
    return result
