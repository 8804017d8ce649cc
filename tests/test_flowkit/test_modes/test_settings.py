from flowkit.settings import (
    CONTROLLER_SENSITIVITY_KEY,
    INVERT_Y_KEY,
    MASTER_VOLUME_KEY,
    MUSIC_VOLUME_KEY,
    SFX_VOLUME_KEY,
    MOUSE_SENSITIVITY_KEY,
    SettingsStore,
)


def test_defaults():
    settings = SettingsStore()

    assert settings.get_float(MASTER_VOLUME_KEY) == 1.0
    assert settings.get_float(MUSIC_VOLUME_KEY) == 1.0
    assert settings.get_float(SFX_VOLUME_KEY) == 1.0
    assert settings.get_float(MOUSE_SENSITIVITY_KEY) == 1.0
    assert settings.get_float(CONTROLLER_SENSITIVITY_KEY) == 1.0
    assert settings.get_bool(INVERT_Y_KEY) is True


def test_stored_values_override_defaults():
    settings = SettingsStore({
        MUSIC_VOLUME_KEY: 0.25,
        INVERT_Y_KEY: 0,
    })

    assert settings.get_float(MUSIC_VOLUME_KEY) == 0.25
    assert settings.get_bool(INVERT_Y_KEY) is False


def test_bools_are_stored_as_ints():
    settings = SettingsStore({INVERT_Y_KEY: 1, "Custom.Flag": 5})

    assert settings.get_bool(INVERT_Y_KEY) is True
    assert settings.get_bool("Custom.Flag") is True


def test_explicit_default_for_unknown_key():
    settings = SettingsStore()

    assert settings.get_float("Custom.Speed", 3.5) == 3.5
    assert settings.get_bool("Custom.Flag", False) is False


def test_bad_value_falls_back(caplog):
    settings = SettingsStore({MASTER_VOLUME_KEY: "loud"})

    assert settings.get_float(MASTER_VOLUME_KEY) == 1.0
    assert "is not a number" in caplog.text
