"""Tests for session credential holders"""

import stat

from gistfolio.infrastructure.session import (
    FileSessionHolder,
    InMemorySessionHolder,
    default_session_path,
)


def test_in_memory_round_trip():
    holder = InMemorySessionHolder()

    assert holder.load() is None
    holder.save("token-1")
    holder.save("token-2")
    assert holder.load() == "token-2"
    holder.clear()
    assert holder.load() is None


def test_file_holder_survives_new_instance(tmp_path):
    path = tmp_path / "gistfolio" / "session"

    FileSessionHolder(path).save("secret-token")

    assert FileSessionHolder(path).load() == "secret-token"


def test_file_holder_is_private(tmp_path):
    holder = FileSessionHolder(tmp_path / "session")

    holder.save("secret-token")

    assert stat.S_IMODE(holder.path.stat().st_mode) == 0o600


def test_file_holder_keeps_one_token(tmp_path):
    holder = FileSessionHolder(tmp_path / "session")

    holder.save("a-much-longer-first-token")
    holder.save("short")

    assert holder.load() == "short"


def test_file_holder_missing_or_blank_is_none(tmp_path):
    holder = FileSessionHolder(tmp_path / "session")
    assert holder.load() is None

    holder.path.write_text("  \n", encoding="utf-8")
    assert holder.load() is None


def test_file_holder_clear_is_idempotent(tmp_path):
    holder = FileSessionHolder(tmp_path / "session")
    holder.save("token")

    holder.clear()
    holder.clear()

    assert holder.load() is None
    assert not holder.path.exists()


def test_default_path_uses_runtime_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))

    assert default_session_path() == tmp_path / "gistfolio" / "session"
    assert FileSessionHolder().path == tmp_path / "gistfolio" / "session"
