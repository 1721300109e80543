import shutil
import tempfile
from pathlib import Path

import pytest

import cmdparse.__main__ as cli
from cmdparse.__main__ import find_cmdparse_config, main

DEFINITION = """\
usage: "build [options] command [arguments]"
options:
  - long: verbose
    short: v
    description: Talk more
  - long: output
    short: o
    flags: [arg, unique]
commands:
  - name: clean
    description: Remove build artefacts
    options:
      - long: all
        short: a
"""


@pytest.fixture(autouse=True)
def fake_home(monkeypatch):
    """Redirect Path.home() to a temporary directory for all tests."""
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    monkeypatch.delenv("CMDPARSE_CONFIG", raising=False)
    yield temp_home
    shutil.rmtree(temp_home, ignore_errors=True)


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch):
    """Record setup_logging calls instead of installing handlers."""
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.fixture
def definition(tmp_path):
    path = tmp_path / "build.yaml"
    path.write_text(DEFINITION)
    return path


def test_help(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "--config=argument" in out
    assert "Error :" not in out


def test_invalid_option(capsys):
    assert main(["--bogus"]) == 2
    assert "Invalid option : bogus." in capsys.readouterr().out


def test_missing_config_argument(capsys):
    assert main(["-c"]) == 2
    assert "Missing argument for option : c" in capsys.readouterr().out


def test_config_given_twice(capsys, definition):
    assert main(["-c", str(definition), "-c", str(definition)]) == 2
    assert "The option : c was given more than once" in capsys.readouterr().out


def test_no_definition_found(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "No definition file given and none found" in capsys.readouterr().out


def test_unreadable_definition(capsys, tmp_path):
    assert main(["-c", str(tmp_path / "missing.yaml"), "--args=-v"]) == 1
    assert "Could not read definition file" in capsys.readouterr().out


def test_prints_definition_help_without_args(capsys, definition):
    assert main(["-c", str(definition)]) == 0
    out = capsys.readouterr().out
    assert "build [options] command [arguments]" in out
    assert "Valid options for clean :" in out


def test_validates_argument_line(capsys, definition):
    assert main(["-c", str(definition), "--args=-v --output=out clean -a file"]) == 0
    out = capsys.readouterr().out
    assert "Validation results" in out
    assert "out" in out
    assert "file" in out


def test_argument_line_errors(capsys, definition):
    assert main(["-c", str(definition), "--args=--nope"]) == 2
    out = capsys.readouterr().out
    assert "Error : Invalid option : nope." in out
    assert "build [options] command [arguments]" in out


def test_unbalanced_quotes(capsys, definition):
    assert main(["-c", str(definition), "--args='unclosed"]) == 2
    assert "Invalid argument line" in capsys.readouterr().out


def test_discovers_definition_in_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / "cmdparse.yaml"
    config_file.write_text(DEFINITION)
    assert find_cmdparse_config() == config_file
    assert main(["--args=clean"]) == 0


def test_discovers_definition_from_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / "elsewhere.toml"
    config_file.write_text('usage = "x"\n')
    monkeypatch.setenv("CMDPARSE_CONFIG", str(config_file))
    assert find_cmdparse_config() == config_file


def test_discovers_global_definition(fake_home, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config_file = fake_home / ".config" / "cmdparse" / "cmdparse.toml"
    config_file.parent.mkdir(parents=True)
    config_file.write_text('usage = "x"\n')
    assert find_cmdparse_config() == config_file


def test_logging_options(logging_calls, definition):
    log_file = str(definition.with_suffix(".log"))
    assert (
        main(["-vv", "--log-mode=json", "--log-file", log_file, "-c", str(definition)])
        == 0
    )
    assert logging_calls == [
        {"mode": "json", "verbosity": 2, "log_filename": log_file}
    ]


def test_default_logging(logging_calls, definition):
    assert main(["-c", str(definition)]) == 0
    assert logging_calls == [{"mode": None, "verbosity": 0, "log_filename": None}]
