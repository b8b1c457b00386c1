"""Vehicle project settings: meshes, skins, wheel placement and sounds."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from rigsmith.inputs import BoneSelector, FilePicker, FloatInput, _as_path

MESH_PATH_KEY = "meshPath"
COLLISION_PATH_KEY = "collisionPath"
TIRE_COLLISION_PATH_KEY = "tireCollisionPath"
SKINS_PATH_KEY = "skinsPath"
ENGINE_SOUND_PATH_KEY = "engineSoundPath"

WHEEL_STEER_ACROSS_KEY = "wheelSteerAcross"
WHEEL_STEER_ALONG_KEY = "wheelSteerAlong"
WHEEL_ENG_ACROSS_KEY = "wheelEngAcross"
WHEEL_ENG_ALONG_KEY = "wheelEngAlong"
VERT_KEY = "wheelVert"

STEER_WHEEL_BONE_NAME_KEY = "steerWheelBone"

SkinChangedCallback = Callable[[int, Path | None], None]


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    return float(value)


def _path_text(path: Path | None) -> str:
    return str(path) if path is not None else ""


class Configuration:
    """All settings of one vehicle project.

    ``bone_loader`` maps a mesh path to the names of the bones in it; when
    given, choosing a mesh refreshes the steering wheel bone choices.
    """

    def __init__(self, bone_loader: Callable[[Path], Iterable[str]] | None = None) -> None:
        self.skin_changed_callback: SkinChangedCallback | None = None
        self.emulate_button_pressed_callback: Callable[[], None] | None = None

        self.wheel_steer_across = FloatInput("WheelSteerAcrossInput", 0.0)
        self.wheel_steer_along = FloatInput("WheelSteerAlongInput", 0.0)
        self.wheel_eng_across = FloatInput("WheelEngAcrossInput", 0.0)
        self.wheel_eng_along = FloatInput("WheelEngAlongInput", 0.0)
        self.wheel_vert = FloatInput("WheelVertInput", 0.0)

        self.skins: list[FilePicker] = []

        self.mesh = FilePicker("MeshFilePicker")
        self.mesh.file_extensions = ".psk"
        self.mesh.default_title = "Select Mesh"

        self.collision = FilePicker("CollisionFilePicker")
        self.collision.file_extensions = ".psk"
        self.collision.default_title = "Select Collision"

        self.tire_collision = FilePicker("TireCollisionFilePicker")
        self.tire_collision.file_extensions = ".psk"
        self.tire_collision.default_title = "Select Tire Collision"

        self.engine_sound = FilePicker("EngineSoundFilePicker")
        self.engine_sound.file_extensions = ".wav"
        self.engine_sound.default_title = "Select Engine Sound"

        self.steer_wheel_bone = BoneSelector("SteerWheelBone")

        if bone_loader is not None:
            def refresh_bones(path: Path | None) -> None:
                if path is not None:
                    self.steer_wheel_bone.set_choices(bone_loader(path))

            self.mesh.react.callbacks.add(refresh_bones)

    def emulate(self) -> None:
        """Press the emulation button."""
        if self.emulate_button_pressed_callback is not None:
            self.emulate_button_pressed_callback()

    def _skin_changed(self, index: int, path: Path | None) -> None:
        if self.skin_changed_callback is not None:
            self.skin_changed_callback(index, path)

    def resize_texture_array(self, new_size: int) -> None:
        """Grow or shrink the list of skin pickers."""
        if new_size > len(self.skins):
            for index in range(len(self.skins), new_size):
                picker = FilePicker(f"SkinFileDlgId {index}")
                picker.file_extensions = ".tga,.dds"
                picker.default_title = "Choose texture"
                picker.react.callbacks.add(
                    lambda path, index=index: self._skin_changed(index, path)
                )
                self.skins.append(picker)
        else:
            del self.skins[max(new_size, 0):]

    def set_texture(self, index: int, path: str | os.PathLike | None) -> None:
        """Set the skin at ``index``; an index past the end is ignored."""
        if not 0 <= index < len(self.skins):
            return
        self.skins[index].react.set(_as_path(path))

    def from_json(self, data: Mapping[str, Any]) -> None:
        """Apply the settings present in ``data``, notifying listeners of each."""
        pickers = (
            (MESH_PATH_KEY, self.mesh),
            (COLLISION_PATH_KEY, self.collision),
            (TIRE_COLLISION_PATH_KEY, self.tire_collision),
            (ENGINE_SOUND_PATH_KEY, self.engine_sound),
        )
        for key, picker in pickers:
            if key in data:
                picker.react.set(_as_path(_string(data, key)))

        if SKINS_PATH_KEY in data:
            skins = data[SKINS_PATH_KEY]
            if not isinstance(skins, list):
                raise TypeError(f"{SKINS_PATH_KEY!r} must be a list")
            if not all(isinstance(skin, str) for skin in skins):
                raise TypeError(f"{SKINS_PATH_KEY!r} must hold strings")
            self.resize_texture_array(len(skins))
            for index, skin in enumerate(skins):
                self.set_texture(index, skin)

        floats = (
            (WHEEL_STEER_ACROSS_KEY, self.wheel_steer_across),
            (WHEEL_STEER_ALONG_KEY, self.wheel_steer_along),
            (WHEEL_ENG_ACROSS_KEY, self.wheel_eng_across),
            (WHEEL_ENG_ALONG_KEY, self.wheel_eng_along),
            (VERT_KEY, self.wheel_vert),
        )
        for key, field in floats:
            if key in data:
                field.react.set(_number(data, key))

        if STEER_WHEEL_BONE_NAME_KEY in data:
            self.steer_wheel_bone.react.set(_string(data, STEER_WHEEL_BONE_NAME_KEY))

    def to_json(self) -> dict[str, Any]:
        """All settings as a JSON-ready dictionary."""
        return {
            MESH_PATH_KEY: _path_text(self.mesh.path),
            COLLISION_PATH_KEY: _path_text(self.collision.path),
            TIRE_COLLISION_PATH_KEY: _path_text(self.tire_collision.path),
            ENGINE_SOUND_PATH_KEY: _path_text(self.engine_sound.path),
            SKINS_PATH_KEY: [_path_text(skin.path) for skin in self.skins],
            WHEEL_STEER_ACROSS_KEY: self.wheel_steer_across.value,
            WHEEL_STEER_ALONG_KEY: self.wheel_steer_along.value,
            WHEEL_ENG_ACROSS_KEY: self.wheel_eng_across.value,
            WHEEL_ENG_ALONG_KEY: self.wheel_eng_along.value,
            VERT_KEY: self.wheel_vert.value,
            STEER_WHEEL_BONE_NAME_KEY: self.steer_wheel_bone.value,
        }

    def save(self, path: str | os.PathLike) -> None:
        """Write the settings as indented JSON."""
        with open(path, "w", encoding="utf-8") as stream:
            json.dump(self.to_json(), stream, indent=4)
            stream.write("\n")

    def load(self, path: str | os.PathLike) -> None:
        """Read settings written by :meth:`save`."""
        with open(path, encoding="utf-8") as stream:
            data = json.load(stream)
        if not isinstance(data, dict):
            raise TypeError("project file must hold a JSON object")
        self.from_json(data)