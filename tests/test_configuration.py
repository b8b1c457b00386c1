import json
from pathlib import Path

import pytest

from rigsmith.configuration import (
    MESH_PATH_KEY,
    SKINS_PATH_KEY,
    STEER_WHEEL_BONE_NAME_KEY,
    VERT_KEY,
    Configuration,
)


def test_resize_creates_skin_pickers():
    config = Configuration()
    config.resize_texture_array(2)
    assert [skin.id for skin in config.skins] == ["SkinFileDlgId 0", "SkinFileDlgId 1"]
    assert all(skin.file_extensions == ".tga,.dds" for skin in config.skins)
    config.resize_texture_array(1)
    assert len(config.skins) == 1


def test_skin_changed_callback_gets_index():
    config = Configuration()
    events = []
    config.skin_changed_callback = lambda index, path: events.append((index, path))
    config.resize_texture_array(3)
    config.set_texture(2, "skin.dds")
    config.set_texture(7, "ignored.dds")
    assert events == [(2, Path("skin.dds"))]


def test_json_round_trip():
    config = Configuration()
    data = {
        MESH_PATH_KEY: "car.psk",
        "collisionPath": "col.psk",
        "tireCollisionPath": "tire.psk",
        "engineSoundPath": "engine.wav",
        SKINS_PATH_KEY: ["a.tga", "b.dds"],
        "wheelSteerAcross": 1.5,
        "wheelSteerAlong": 2.0,
        "wheelEngAcross": -1.0,
        "wheelEngAlong": 3.25,
        VERT_KEY: -0.5,
        STEER_WHEEL_BONE_NAME_KEY: "wheel",
    }
    config.from_json(data)
    assert config.to_json() == data


def test_default_json_has_empty_values():
    result = Configuration().to_json()
    assert result[MESH_PATH_KEY] == ""
    assert result[SKINS_PATH_KEY] == []
    assert result[VERT_KEY] == 0.0
    assert result[STEER_WHEEL_BONE_NAME_KEY] == ""


def test_from_json_notifies_listeners():
    config = Configuration()
    seen = []
    config.wheel_vert.react.callbacks.add(seen.append)
    config.from_json({VERT_KEY: 4})
    assert seen == [4.0]


def test_from_json_rejects_wrong_types():
    config = Configuration()
    with pytest.raises(TypeError):
        config.from_json({MESH_PATH_KEY: 3})
    with pytest.raises(TypeError):
        config.from_json({VERT_KEY: "high"})


def test_bone_loader_refreshes_choices():
    config = Configuration(bone_loader=lambda path: ["root", path.stem])
    config.from_json({MESH_PATH_KEY: "truck.psk"})
    assert config.steer_wheel_bone.choices == ["root", "truck"]


def test_save_and_load(tmp_path):
    source = Configuration()
    source.from_json({MESH_PATH_KEY: "car.psk", SKINS_PATH_KEY: ["x.tga"], VERT_KEY: 2.0})
    target_file = tmp_path / "project.json"
    source.save(target_file)
    assert json.loads(target_file.read_text(encoding="utf-8")) == source.to_json()
    loaded = Configuration()
    loaded.load(target_file)
    assert loaded.to_json() == source.to_json()


def test_emulate_calls_callback():
    config = Configuration()
    presses = []
    config.emulate_button_pressed_callback = lambda: presses.append(True)
    config.emulate()
    assert presses == [True]