import pytest

from ownergrep.config.settings import get_settings
from ownergrep.utils.logger import logger


@pytest.fixture(autouse=True)
def _reset_state():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # CLI runs install a stderr handler bound to the runner's stream
    logger.remove()


@pytest.fixture
def log_messages():
    """Capture loguru output as a list of "LEVEL message" strings."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(f"{m.record['level'].name} {m.record['message']}"), level="DEBUG")
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path from a {relative_path: content} mapping."""

    def _make(files):
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path

    return _make
