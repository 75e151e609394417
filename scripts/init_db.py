"""创建 SQLite 库文件所在目录及 questions / options 表（已存在则跳过）。
与应用使用同一 DATABASE_URL（会从项目根目录 .env 加载环境变量）。
使用方式（在项目根目录）：
  python scripts/init_db.py
"""
import asyncio
import os
import sys

# 项目根目录
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)
os.chdir(_project_root)

# 在导入 app 前加载 .env，保证与 uvicorn 启动时使用同一 DATABASE_URL
_env_file = os.path.join(_project_root, ".env")
if os.path.isfile(_env_file):
    with open(_env_file, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and "=" in line and not line.startswith("#"):
                k, _, v = line.partition("=")
                k, v = k.strip(), v.strip()
                if k and os.environ.get(k) is None:
                    os.environ[k] = v

from sqlalchemy import inspect

from app.core.config import settings
from app.core.db import engine, init_db
from app.core.storage import ensure_storage_dirs


async def run() -> None:
    ensure_storage_dirs()
    async with engine.connect() as conn:
        before = await conn.run_sync(lambda c: inspect(c).get_table_names())
    print(f"当前已有表: {before}")
    await init_db()
    async with engine.connect() as conn:
        after = await conn.run_sync(lambda c: inspect(c).get_table_names())
    await engine.dispose()
    missing = {"questions", "options"} - set(after)
    if missing:
        print(f"ERROR: 建表后仍缺少: {missing}")
        sys.exit(1)
    print(f"数据库已就绪: {settings.database_url} 表: {after}")


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()
