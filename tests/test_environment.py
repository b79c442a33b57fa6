import pytest

from mshell.environment import (
    Environment,
    is_valid_identifier,
    validate_export_name,
)


@pytest.fixture
def env():
    return Environment(["HOME=/home/user", "PATH=/bin:/usr/bin", "LANG=C"])


def test_init_copies_entries():
    source = ["A=1"]
    env = Environment(source)
    source.append("B=2")
    assert list(env) == ["A=1"]
    assert len(env) == 1


def test_empty_environment():
    env = Environment()
    assert len(env) == 0
    assert list(env) == []
    assert env.get("HOME") is None


def test_get_returns_value(env):
    assert env.get("HOME") == "/home/user"
    assert env.get("PATH") == "/bin:/usr/bin"


def test_get_requires_exact_name(env):
    assert env.get("HOM") is None
    assert env.get("HOMEX") is None


def test_index_of(env):
    assert env.index_of("HOME") == 0
    assert env.index_of("LANG") == 2
    assert env.index_of("MISSING") is None


def test_value_may_contain_equals():
    env = Environment(["OPTS=a=b"])
    assert env.get("OPTS") == "a=b"


def test_set_replaces_in_place(env):
    env.set("PATH", "/opt")
    assert env.get("PATH") == "/opt"
    assert env.index_of("PATH") == 1
    assert len(env) == 3


def test_set_appends_new(env):
    env.set("OLDPWD", "/tmp")
    assert list(env)[-1] == "OLDPWD=/tmp"
    assert len(env) == 4


def test_set_rejects_none(env):
    with pytest.raises(ValueError):
        env.set("PWD", None)


def test_update_entry_replaces_existing(env):
    assert env.update_entry("LANG=en") is True
    assert env.get("LANG") == "en"
    assert len(env) == 3


def test_update_entry_missing_or_without_value(env):
    assert env.update_entry("NEW=1") is False
    assert env.update_entry("HOME") is False
    assert env.get("HOME") == "/home/user"
    assert len(env) == 3


def test_add_entry(env):
    env.add_entry("NEW=1")
    assert env.get("NEW") == "1"
    assert len(env) == 4


def test_remove_by_name(env):
    assert env.remove("PATH") is True
    assert env.get("PATH") is None
    assert list(env) == ["HOME=/home/user", "LANG=C"]


def test_remove_ignores_value_part(env):
    assert env.remove("LANG=whatever") is True
    assert env.get("LANG") is None


def test_remove_bare_entry():
    env = Environment(["FLAG", "A=1"])
    assert env.remove("FLAG") is True
    assert list(env) == ["A=1"]


def test_remove_missing(env):
    assert env.remove("NOPE") is False
    assert len(env) == 3


def test_env_lines_skip_entries_without_value():
    env = Environment(["A=1", "FLAG", "B="])
    assert env.env_lines() == ["A=1", "B="]


def test_export_lines_sorted_and_quoted():
    env = Environment(["b=2", "FLAG", "A=1"])
    assert env.export_lines() == [
        'declare -x A="1"',
        "declare -x FLAG",
        'declare -x b="2"',
    ]


def test_export_lines_do_not_reorder_environment():
    env = Environment(["Z=1", "A=2"])
    env.export_lines()
    assert list(env) == ["Z=1", "A=2"]


@pytest.mark.parametrize("name", ["HOME", "_x", "a1_b"])
def test_valid_identifiers(name):
    assert is_valid_identifier(name) is True


@pytest.mark.parametrize("name", ["", None, "1abc", "a-b", "A=1"])
def test_invalid_identifiers(name):
    assert is_valid_identifier(name) is False


@pytest.mark.parametrize("arg", ["A=1", "_x", "name=with spaces", "A1="])
def test_valid_export_names(arg):
    assert validate_export_name(arg) is True


@pytest.mark.parametrize("arg", ["", None, "=1", "1A=2", "a-b=3", "-n"])
def test_invalid_export_names(arg):
    assert validate_export_name(arg) is False