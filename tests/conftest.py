# tests/conftest.py
import pytest

from markov_textgen.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def reset_log_settings():
    """Log settings are class level; keep one test's configure() out of the next."""
    saved = (Log.level, Log.path, Log.use_color)
    yield
    Log.level, Log.path, Log.use_color = saved


class ScriptedRandom:
    """Random source that replays fixed indices, then repeats the last one."""

    def __init__(self, *indices):
        self.indices = list(indices)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        idx = self.indices.pop(0) if len(self.indices) > 1 else self.indices[0]
        assert 0 <= idx < stop
        return idx


@pytest.fixture
def scripted():
    return ScriptedRandom
