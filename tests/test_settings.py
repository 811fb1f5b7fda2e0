import json

import pytest

from edinit.core.settings import EditorSettings, Setting, apply_settings, load_custom_file, settings_from_pairs


def test_apply_settings_in_order():
    settings = apply_settings([
        Setting("fill-column", 72),
        Setting("line-numbers", True),
        Setting("fill-column", 80),
    ])

    assert settings.fill_column == 80
    assert settings.line_numbers is True


def test_unknown_settings_go_to_extra():
    settings = apply_settings(settings_from_pairs([("sample-ready", True)]))

    assert settings.extra == {"sample-ready": True}
    assert settings.get("sample-ready") is True
    assert settings.get("missing", "default") == "default"


def test_apply_settings_onto_existing_record():
    base = EditorSettings(theme="light")
    result = apply_settings([Setting("bell-style", "none")], base)

    assert result is base
    assert result.theme == "light"
    assert result.bell_style == "none"


@pytest.mark.parametrize("name, value", [
    ("bell-style", "loud"),
    ("fill-column", 0),
    ("fill-column", "80"),
    ("fill-column", True),
])
def test_invalid_values_raise(name, value):
    with pytest.raises(ValueError):
        EditorSettings().set(name, value)


def test_extra_is_not_a_setting_name():
    settings = EditorSettings()
    settings.set("extra", 1)

    assert settings.extra == {"extra": 1}


def test_as_dict_uses_setting_names():
    data = EditorSettings(extra={"custom": 1}).as_dict()

    assert data["fill-column"] == 70
    assert data["bell-style"] == "audible"
    assert data["custom"] == 1
    assert "extra" not in data


def test_missing_custom_file_is_skipped(tmp_path):
    assert load_custom_file(str(tmp_path / "custom.json")) == []
    assert load_custom_file("") == []


def test_custom_file_is_read(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"theme": "dark", "fill-column": 100}), encoding="utf-8")

    assert load_custom_file(str(path)) == [Setting("theme", "dark"), Setting("fill-column", 100)]


def test_custom_file_must_hold_an_object(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_custom_file(str(path))
