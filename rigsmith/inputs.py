"""Editor input controls reduced to their state and the events they raise."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from rigsmith.react import ReactValue

PathLike = str | os.PathLike


def _as_path(value: PathLike | None) -> Path | None:
    """A path, or None for an empty or missing one."""
    if value is None:
        return None
    text = os.fspath(value)
    return Path(text) if text else None


class BoneSelector:
    """A choice of one bone name among a list; an empty string means none."""

    def __init__(self, widget_id: str) -> None:
        self.id = widget_id
        self.choices: list[str] = []
        self.react: ReactValue[str] = ReactValue("")

    @property
    def value(self) -> str:
        return self.react.value or ""

    def set_choices(self, choices: Iterable[str]) -> None:
        """Replace the choices, clearing the selection if it is no longer offered."""
        self.choices = list(choices)
        if self.value not in self.choices:
            self.react.set("")

    def set_current(self, value: str | int) -> None:
        """Select by name or by index; an unknown name or index clears the selection."""
        if isinstance(value, int) and not isinstance(value, bool):
            self.react.set(self.choices[value] if 0 <= value < len(self.choices) else "")
            return
        self.react.set(value if value in self.choices else "")

    def select(self, choice: str) -> None:
        """Pick one of the offered choices, as a click on it would."""
        if choice not in self.choices:
            raise ValueError(f"{choice!r} is not among the choices of {self.id!r}")
        self.react.set(choice)


class FloatInput:
    """A labelled float field."""

    STEP = 0.01
    STEP_FAST = 1.0

    def __init__(self, label: str, value: float = 0.0) -> None:
        self.label = label
        self.react: ReactValue[float] = ReactValue(float(value))

    @property
    def value(self) -> float:
        return self.react.value if self.react.value is not None else 0.0

    def submit(self, value: float) -> bool:
        """Enter a value; listeners hear of it only if it changed. Returns whether it did."""
        new_value = float(value)
        if new_value == self.react.value:
            return False
        self.react.set(new_value)
        return True


class FilePicker:
    """A button that opens a file dialog and remembers the chosen path."""

    def __init__(self, unique_id: str) -> None:
        self.id = unique_id
        self.default_title = ""
        self.dialog_title = "Select File"
        self.file_extensions = ""
        self.default_path = "."
        self.save_last_path = True
        self.react: ReactValue[Path | None] = ReactValue(None)

    @property
    def path(self) -> Path | None:
        return self.react.value

    def title(self) -> str:
        """Caption of the button: the chosen path, or the default title."""
        return str(self.path) if self.path is not None else self.default_title

    def choose(self, path: PathLike | None, current_dir: PathLike | None = None) -> None:
        """Accept a path from the dialog, remembering its folder if asked to."""
        self.react.set(_as_path(path))
        if self.save_last_path and current_dir is not None:
            self.default_path = os.fspath(current_dir)