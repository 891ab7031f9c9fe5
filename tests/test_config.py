from pathlib import Path

import pytest
from pydantic import ValidationError

from pitstop.config import RunConfig


@pytest.fixture
def module_file(tmp_path):
    path = tmp_path / "sample_tests.py"
    path.write_text("")
    return path


def test_defaults(module_file):
    config = RunConfig(modules=[module_file])
    assert config.color is True
    assert config.strict is False
    assert config.verbose is False
    assert config.debug_log is None


def test_accepts_string_paths(module_file):
    config = RunConfig(modules=[str(module_file)], debug_log="logs/debug.log")
    assert config.modules == [module_file]
    assert config.debug_log == Path("logs/debug.log")


def test_empty_modules_rejected():
    with pytest.raises(ValidationError, match="at least one test module"):
        RunConfig(modules=[])


def test_missing_module_rejected(tmp_path):
    with pytest.raises(ValidationError, match="not found"):
        RunConfig(modules=[tmp_path / "nope.py"])


def test_non_python_module_rejected(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("")
    with pytest.raises(ValidationError, match=r"\.py"):
        RunConfig(modules=[path])


def test_unknown_option_rejected(module_file):
    with pytest.raises(ValidationError):
        RunConfig(modules=[module_file], parallel=4)
