import pytest

from statusline_values.config.loader import clear_config_cache


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Keep the module-level config cache from leaking between tests."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def temp_config_dir(monkeypatch, tmp_path):
    """Point the config directory at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    return tmp_path


@pytest.fixture
def mock_stdin(monkeypatch):
    """Factory fixture to mock stdin with custom content."""
    import io
    import sys

    def _mock_stdin(content: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(content))

    return _mock_stdin


@pytest.fixture
def mock_argv(monkeypatch):
    """Factory fixture to set command line arguments."""
    import sys

    def _mock_argv(*args: str):
        monkeypatch.setattr(sys, "argv", ["statusline-values", *args])

    return _mock_argv
