from app.core.db import _to_async_url
from app.core.storage import ensure_storage_dirs


def test_to_async_url():
    assert _to_async_url("sqlite:///./database/questions.db") == "sqlite+aiosqlite:///./database/questions.db"
    assert _to_async_url("postgresql://u:p@localhost/q") == "postgresql+asyncpg://u:p@localhost/q"
    assert _to_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"


def test_ensure_storage_dirs_creates_sqlite_parent(tmp_path):
    db_file = tmp_path / "nested" / "dir" / "questions.db"
    ensure_storage_dirs(f"sqlite+aiosqlite:///{db_file}")
    assert db_file.parent.is_dir()


def test_ensure_storage_dirs_ignores_other_databases(tmp_path):
    ensure_storage_dirs("sqlite+aiosqlite:///:memory:")
    ensure_storage_dirs("postgresql+asyncpg://u:p@localhost/q")
