import pytest

from pallet_load import config
from pallet_load.config import DEFAULT_SETTINGS, load_settings


def test_defaults_when_file_missing(tmp_path):
    settings = load_settings(str(tmp_path / "missing.yaml"))
    assert settings == DEFAULT_SETTINGS


def test_settings_override_known_keys(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "box_length: 50\nbox_weight: '2,5'\npallet: iso\nunknown: 1\n",
        encoding="utf-8",
    )
    settings = load_settings(str(path))
    assert settings["box_length"] == pytest.approx(50.0)
    assert settings["box_weight"] == pytest.approx(2.5)
    assert settings["pallet"] == "iso"
    assert settings["max_stack_height"] == DEFAULT_SETTINGS["max_stack_height"]
    assert "unknown" not in settings


def test_settings_invalid_number(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("box_height: tall\n", encoding="utf-8")
    with pytest.raises(ValueError, match="box_height"):
        load_settings(str(path))


def test_settings_from_env(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("max_stack_height: 150\n", encoding="utf-8")
    monkeypatch.setenv(config.SETTINGS_ENV, str(path))
    config.clear_settings_cache()

    settings = load_settings()
    assert settings["max_stack_height"] == pytest.approx(150.0)

    settings["max_stack_height"] = 1.0
    assert load_settings()["max_stack_height"] == pytest.approx(150.0)
    config.clear_settings_cache()
