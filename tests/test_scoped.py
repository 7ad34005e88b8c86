from __future__ import annotations

import os

import pytest

from envaccess.backends import MemoryBackend
from envaccess.environment import EnvironmentAccessor
from envaccess.scoped import patched, preserved


def test_preserved_restores_bound_and_unbound():
    env = EnvironmentAccessor(MemoryBackend({"KEEP": "1"}))
    with preserved("KEEP", "NEW", accessor=env) as acc:
        assert acc is env
        acc.set("KEEP", "changed")
        acc.set("NEW", "tmp")
    assert env.get_or("KEEP", "") == "1"
    assert env.exists("NEW") is False


def test_preserved_restores_removed_key_on_error():
    env = EnvironmentAccessor(MemoryBackend({"KEEP": ""}))
    with pytest.raises(RuntimeError):
        with preserved("KEEP", accessor=env):
            env.remove("KEEP")
            raise RuntimeError("boom")
    assert env.exists("KEEP") is True
    assert env.get_or("KEEP", "D") == ""


def test_patched_sets_and_unsets():
    env = EnvironmentAccessor(MemoryBackend({"GONE": "x", "OTHER": "o"}))
    with patched({"GONE": None, "ADDED": "a"}, accessor=env):
        assert env.exists("GONE") is False
        assert env.get_or("ADDED", "") == "a"
    assert env.get_or("GONE", "") == "x"
    assert env.exists("ADDED") is False
    assert env.get_or("OTHER", "") == "o"


def test_patched_default_accessor_uses_process_env(monkeypatch):
    k = "ENVACCESS_SCOPED_K"
    monkeypatch.setenv(k, "")
    monkeypatch.delenv(k)
    with patched({k: "inside"}):
        assert os.environ[k] == "inside"
    assert k not in os.environ
