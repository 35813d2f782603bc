import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def mock_argv(monkeypatch):
    """
    Fixture to replace sys.argv for tests that read the invocation.

    Usage:
        def test_collect(mock_argv):
            mock_argv(["-v", "file.txt"])
            assert collect_args() == ["-v", "file.txt"]
    """

    def _set_args(args, program="prog"):
        monkeypatch.setattr("sys.argv", [program, *args])

    return _set_args


@pytest.fixture
def clean_env(monkeypatch):
    """Fixture that removes simple_arg_parser settings from the environment."""
    for var in ("SAP_DEBUG", "SAP_STRICT"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
