from filter_editor.filters import LIST_ITEM_HEIGHT
from filter_editor.services import Settings


def test_defaults_are_written(settings):
    assert settings.settings_file.exists()
    assert settings.get_row_height() == LIST_ITEM_HEIGHT
    assert settings.get_slow_multiplier() == 0.1
    assert settings.get_fast_multiplier() == 10
    assert settings.get_last_filter_value() == "none"


def test_values_persist(tmp_path):
    path = tmp_path / "settings.ini"
    settings = Settings(path)
    settings.set_row_height(40)
    settings.set_multipliers(0.5, 4)
    settings.set_last_filter_value("blur(2px) sepia(50%)")

    reloaded = Settings(path)
    assert reloaded.get_row_height() == 40
    assert reloaded.get_slow_multiplier() == 0.5
    assert reloaded.get_fast_multiplier() == 4
    assert reloaded.get_last_filter_value() == "blur(2px) sepia(50%)"


def test_invalid_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text("[preferences]\nrow_height = tall\nfast_multiplier = -3\n")
    settings = Settings(path)
    assert settings.get_row_height() == LIST_ITEM_HEIGHT
    assert settings.get_fast_multiplier() == 10
    assert settings.get_slow_multiplier() == 0.1
