import pytest

from fakevoikko import FakeVoikko
from safevoikko import InitError, LibraryNotFoundError, Voikko
from safevoikko._binding import load_library


@pytest.fixture
def engine():
    """A fresh fake libvoikko."""
    return FakeVoikko()


@pytest.fixture
def voikko(engine):
    """A Finnish session on the fake engine; checks for leaks afterwards."""
    v = Voikko("fi", library=engine)
    yield v
    v.terminate()
    assert not engine.sessions
    engine.assert_all_freed()


@pytest.fixture(scope="session")
def real_library():
    try:
        return load_library()
    except LibraryNotFoundError as e:
        pytest.skip(str(e))


@pytest.fixture
def finnish(real_library):
    try:
        v = Voikko("fi", library=real_library)
    except InitError as e:
        pytest.skip(str(e))
    yield v
    v.terminate()
