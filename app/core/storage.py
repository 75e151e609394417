from pathlib import Path

from sqlalchemy.engine import make_url

from app.core.config import settings


def ensure_storage_dirs(database_url: str | None = None) -> None:
    """SQLite 库文件所在目录不存在时创建；其他数据库无需处理。"""
    url = make_url(database_url or settings.database_url)
    if not url.drivername.startswith("sqlite"):
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
