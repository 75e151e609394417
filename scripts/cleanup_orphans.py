"""清理题目相关脏数据：没有任何选项的题目（新增时补偿删除失败的残留）、所属题目已不存在的选项。
使用方式（在项目根目录）：
  python scripts/cleanup_orphans.py
  python scripts/cleanup_orphans.py --dry-run   # 只打印将删除的 ID，不执行
"""
import argparse
import asyncio
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)
os.chdir(_project_root)

# 加载 .env
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

from app.core.db import SessionLocal, engine
from app.repositories.question_repository import (
    delete_orphans,
    find_orphan_option_ids,
    find_orphan_question_ids,
)


async def _cleanup(dry_run: bool) -> None:
    async with SessionLocal() as db:
        question_ids = await find_orphan_question_ids(db)
        option_ids = await find_orphan_option_ids(db)
        if not question_ids and not option_ids:
            print("没有需要清理的脏数据。")
            return

        print(f"无选项的题目 {len(question_ids)} 条，无题目的选项 {len(option_ids)} 条")
        print("question_id 列表:", question_ids[:20], "..." if len(question_ids) > 20 else "")
        print("option_id 列表:", option_ids[:20], "..." if len(option_ids) > 20 else "")

        if dry_run:
            print("[dry-run] 未执行删除。去掉 --dry-run 后重新运行将真正删除。")
            return

        deleted_questions, deleted_options = await delete_orphans(db)
        print(f"已删除题目 {len(deleted_questions)} 条，选项 {len(deleted_options)} 条。")


async def run_cleanup(dry_run: bool = False) -> None:
    try:
        await _cleanup(dry_run)
    finally:
        await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="清理题目脏数据（无选项的题目、无题目的选项）")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="只打印将要删除的 ID，不执行删除",
    )
    args = parser.parse_args()
    asyncio.run(run_cleanup(dry_run=args.dry_run))


if __name__ == "__main__":
    main()
