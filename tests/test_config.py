import pytest

from cmdparse.config import build_context, load_definition, loader
from cmdparse.exceptions import ConfigError, ValidationError
from cmdparse.flags import OptionFlag
from cmdparse.option import CommandHandle, OptionHandle

YAML_DEFINITION = """\
usage: "build [options] command [arguments]"
options:
  - long: verbose
    short: v
    description: Talk more
  - long: output
    short: o
    flags: [arg, unique]
  - short: q
commands:
  - name: clean
    description: Remove build artefacts
    options:
      - key: everything
        long: all
        short: a
"""

TOML_DEFINITION = """\
usage = "build [options]"

[[options]]
long = "level"
flags = "optional"

[[commands]]
name = "status"
description = "Show status"
"""


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "cmdparse.yaml"
    path.write_text(YAML_DEFINITION)
    return path


def test_load_yaml_definition(yaml_file):
    definition = load_definition(yaml_file)
    assert definition.usage == "build [options] command [arguments]"
    assert [option.key for option in definition.options] == ["verbose", "output", "q"]
    assert definition.options[1].flags == OptionFlag.TAKES_ARG | OptionFlag.UNIQUE
    assert definition.commands[0].options[0].key == "everything"


def test_load_toml_definition(tmp_path):
    path = tmp_path / "cmdparse.toml"
    path.write_text(TOML_DEFINITION)
    definition = load_definition(path)
    assert definition.options[0].flags == OptionFlag.TAKES_OPTIONAL_ARG
    assert definition.commands[0].name == "status"


def test_loader_builds_a_context(yaml_file):
    ctx, handles = loader(yaml_file, ["-vq", "--output=out", "clean", "-a", "x"])
    assert isinstance(handles["verbose"], OptionHandle)
    assert isinstance(handles["clean"], CommandHandle)
    ctx.validate()
    assert ctx.check(handles["verbose"])
    assert ctx.check(handles["q"])
    assert ctx.take_value(handles["output"]).value == "out"
    assert ctx.check(handles["clean"])
    assert ctx.check(handles["clean.everything"])
    assert ctx.get_leftover_args() == ["x"]


def test_loader_context_enforces_flags(yaml_file):
    ctx, _ = loader(yaml_file, ["-o", "a", "-o", "b"])
    with pytest.raises(ValidationError):
        ctx.validate()


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "cmdparse.json"
    path.write_text("{}")
    with pytest.raises(ConfigError):
        load_definition(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_definition(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("usage: [unclosed\n")
    with pytest.raises(ConfigError):
        load_definition(path)


def test_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_definition(path)


@pytest.mark.parametrize(
    "body",
    [
        "options: []\n",
        "usage: x\noptions:\n  - description: no names\n",
        "usage: x\noptions:\n  - long: ok\n    flags: sometimes\n",
    ],
)
def test_invalid_definitions(tmp_path, body):
    path = tmp_path / "invalid.yaml"
    path.write_text(body)
    with pytest.raises(ConfigError):
        load_definition(path)


def test_duplicate_names_are_config_errors(tmp_path):
    path = tmp_path / "dup.yaml"
    path.write_text("usage: x\noptions:\n  - long: same\n  - long: same\n")
    definition = load_definition(path)
    with pytest.raises(ConfigError):
        build_context(definition, [])
