import pytest

from pyminishell.env import EnvVar, Environment, split_assignment


@pytest.fixture
def env():
    return Environment.from_envp(["HOME=/home/u", "PATH=/bin:/usr/bin", "A=1"])


def test_split_assignment_first_equals():
    assert split_assignment("A=b=c") == ("A", "b=c")


def test_split_assignment_empty_parts():
    assert split_assignment("A=") == ("A", "")
    assert split_assignment("=x") == ("", "x")


def test_split_assignment_without_equals_raises():
    with pytest.raises(ValueError):
        split_assignment("NOEQ")


def test_from_envp_keeps_order(env):
    assert [v.key for v in env] == ["HOME", "PATH", "A"]
    assert len(env) == 3


def test_from_envp_mapping():
    env = Environment.from_envp({"X": "1", "Y": "2"})
    assert env.to_envp() == ["X=1", "Y=2"]


def test_from_envp_none_is_empty():
    assert len(Environment.from_envp(None)) == 0


def test_from_envp_skips_entries_without_equals():
    env = Environment.from_envp(["BROKEN", "OK=1"])
    assert [v.key for v in env] == ["OK"]


def test_get(env):
    assert env.get("PATH") == "/bin:/usr/bin"
    assert env.get("MISSING") is None


def test_set_updates_in_place(env):
    env.set("HOME", "/root", False)
    assert env.get("HOME") == "/root"
    assert [v.key for v in env] == ["HOME", "PATH", "A"]


def test_set_appends_new(env):
    env.set("NEW", "v", False)
    assert [v.key for v in env][-1] == "NEW"
    assert env.get("NEW") == "v"


def test_set_without_equals_keeps_existing_value(env):
    env.set("A", None, True)
    assert env.get("A") == "1"
    assert list(env)[2] == EnvVar("A", "1", False)


def test_set_update_keeps_no_eq_flag():
    env = Environment()
    env.set("X", None, True)
    env.set("X", "2", False)
    assert list(env) == [EnvVar("X", "2", True)]


def test_declared_without_value_is_not_in_envp(env):
    env.set("DECL", None, True)
    assert len(env) == 4
    assert env.get("DECL") is None
    assert not any(entry.startswith("DECL") for entry in env.to_envp())


def test_add_allows_duplicates():
    env = Environment()
    env.add("K", "1", False)
    env.add("K", "2", False)
    assert env.to_envp() == ["K=1", "K=2"]
    assert env.get("K") == "1"


def test_delete_first_middle_and_missing(env):
    env.delete("PATH")
    assert [v.key for v in env] == ["HOME", "A"]
    env.delete("HOME")
    assert [v.key for v in env] == ["A"]
    env.delete("NOPE")
    assert [v.key for v in env] == ["A"]


def test_delete_on_empty():
    env = Environment()
    env.delete("X")
    assert len(env) == 0


def test_sort_orders_by_key():
    env = Environment.from_envp(["b=1", "B=2", "a=3", "_x=4"])
    env.sort()
    keys = [v.key for v in env]
    assert keys == sorted(keys)
    assert set(keys) == {"b", "B", "a", "_x"}


def test_sort_keeps_values_with_keys():
    env = Environment.from_envp(["Z=last", "M=mid", "A=first"])
    env.sort()
    assert env.to_envp() == ["A=first", "M=mid", "Z=last"]


def test_to_envp_round_trip(env):
    again = Environment.from_envp(env.to_envp())
    assert again.to_envp() == env.to_envp()
    assert list(again) == list(env)


def test_empty_value_is_kept(env):
    env.set("EMPTY", "", False)
    assert "EMPTY=" in env.to_envp()