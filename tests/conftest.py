import pytest

from filter_editor.filters import FilterListModel
from filter_editor.services import Settings


@pytest.fixture
def model() -> FilterListModel:
    return FilterListModel("blur(30px) grayscale(100%) drop-shadow(2px 2px 1px red)")


@pytest.fixture
def empty_model() -> FilterListModel:
    return FilterListModel()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(tmp_path / "settings.ini")
