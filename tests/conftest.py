import pytest

from valuegraph.config import get_config, set_config
from valuegraph.core.tape import use_tape


@pytest.fixture(autouse=True)
def _fresh_tape():
    with use_tape() as tape:
        yield tape


@pytest.fixture(autouse=True)
def _restore_config():
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture
def tape(_fresh_tape):
    return _fresh_tape
