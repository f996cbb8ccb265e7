import pytest

from symbolic_taylor import variable, reset_config, configure_logging


@pytest.fixture(autouse=True)
def _restore_globals():
    yield
    reset_config()
    configure_logging()


@pytest.fixture
def x():
    return variable()
