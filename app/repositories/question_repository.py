"""题目（Question）与选项（Option）数据访问层。

新增题目分两步提交：先插入题目拿到自增 ID，再在单独事务中插入全部选项；
选项写入失败时删除刚插入的题目作为补偿。更新、删除各自在一个事务内完成。
"""
import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.errors import CompensationError, PersistenceError, QuestionNotFoundError
from app.entities.question import Option, Question
from app.models.option import Option as OptionModel
from app.models.question import Question as QuestionModel

logger = logging.getLogger(__name__)


class QuestionRepository(Protocol):
    async def add(self, question: Question) -> int: ...

    async def update(self, question: Question) -> None: ...

    async def delete(self, question_id: int) -> None: ...

    async def get(self, question_id: int) -> Question: ...

    async def get_all(self, last_id: int, size: int) -> list[Question]: ...


def _option_rows(options: list[Option], question_id: int) -> list[OptionModel]:
    """按列表位置生成 optionOrder，调用方传入的 question_id / option_order 一律覆盖。"""
    return [
        OptionModel(
            question_id=question_id,
            body=o.body,
            correct=o.correct,
            option_order=i,
        )
        for i, o in enumerate(options)
    ]


def _to_entity(row: QuestionModel, option_rows: list[OptionModel]) -> Question:
    return Question(
        id=row.id,
        body=row.body,
        options=[
            Option(
                id=o.id,
                question_id=o.question_id,
                body=o.body,
                correct=bool(o.correct),
                option_order=o.option_order,
            )
            for o in option_rows
        ],
    )


async def get_options_by_question_id(db: AsyncSession, question_id: int) -> list[OptionModel]:
    """按题目 ID 查询选项，按 optionOrder 升序。"""
    result = await db.execute(
        select(OptionModel)
        .where(OptionModel.question_id == question_id)
        .order_by(OptionModel.option_order.asc())
    )
    return list(result.scalars().all())


class SqlQuestionRepository:
    """基于 SQLAlchemy AsyncSession 的实现。每个操作从 session_factory 取新会话，互不共享事务。"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def _insert_question(self, body: str) -> int:
        async with self.session_factory() as db:
            row = QuestionModel(body=body)
            db.add(row)
            try:
                await db.commit()
            except Exception as e:
                await db.rollback()
                raise PersistenceError(f"unable to execute insert question statement: {e}") from e
            return row.id

    async def _insert_options(self, options: list[Option], question_id: int) -> None:
        async with self.session_factory() as db:
            db.add_all(_option_rows(options, question_id))
            try:
                await db.commit()
            except Exception as e:
                await db.rollback()
                raise PersistenceError(f"unable to insert question options: {e}") from e

    async def add(self, question: Question) -> int:
        """插入题目及其选项，返回新题目 ID。"""
        question_id = await self._insert_question(question.body)
        try:
            await self._insert_options(question.options, question_id)
        except PersistenceError as e:
            logger.warning("选项写入失败，删除刚插入的题目 question_id=%s: %s", question_id, e)
            try:
                await self.delete(question_id)
            except PersistenceError as cleanup_error:
                logger.error(
                    "补偿删除失败，库中可能残留无选项的题目 question_id=%s: %s",
                    question_id,
                    cleanup_error,
                )
                raise CompensationError(question_id, e, cleanup_error) from e
            raise
        return question_id

    async def update(self, question: Question) -> None:
        """同一事务内：更新题干 -> 删除旧选项 -> 插入新选项。不做新旧选项比对，整体替换。"""
        async with self.session_factory() as db:
            try:
                result = await db.execute(
                    QuestionModel.__table__.update()
                    .where(QuestionModel.id == question.id)
                    .values(body=question.body)
                )
                if result.rowcount == 0:
                    await db.rollback()
                    raise QuestionNotFoundError(question.id)
                await db.execute(
                    OptionModel.__table__.delete().where(OptionModel.question_id == question.id)
                )
                db.add_all(_option_rows(question.options, question.id))
                await db.commit()
            except QuestionNotFoundError:
                raise
            except Exception as e:
                await db.rollback()
                raise PersistenceError(f"unable to update question {question.id}: {e}") from e

    async def delete(self, question_id: int) -> None:
        """同一事务内删除题目及其全部选项。ID 不存在时不报错。"""
        async with self.session_factory() as db:
            try:
                await db.execute(QuestionModel.__table__.delete().where(QuestionModel.id == question_id))
                await db.execute(OptionModel.__table__.delete().where(OptionModel.question_id == question_id))
                await db.commit()
            except Exception as e:
                await db.rollback()
                raise PersistenceError(f"unable to delete question {question_id}: {e}") from e

    async def get(self, question_id: int) -> Question:
        async with self.session_factory() as db:
            try:
                result = await db.execute(select(QuestionModel).where(QuestionModel.id == question_id))
                row = result.scalars().first()
                if row is None:
                    raise QuestionNotFoundError(question_id)
                option_rows = await get_options_by_question_id(db, row.id)
            except QuestionNotFoundError:
                raise
            except Exception as e:
                raise PersistenceError(f"unable to fetch question {question_id}: {e}") from e
            return _to_entity(row, option_rows)

    async def get_all(self, last_id: int, size: int) -> list[Question]:
        """
        last_id 非 0 时为游标分页：取 id < last_id 的至多 size 条，按 id 降序。
        last_id 为 0 时返回全部题目，不限制条数，也不指定排序（由数据库决定）。
        任一题目的选项查询失败则整体失败，不返回部分结果。
        """
        stmt = select(QuestionModel)
        if last_id != 0:
            stmt = stmt.where(QuestionModel.id < last_id).order_by(QuestionModel.id.desc()).limit(size)
        async with self.session_factory() as db:
            try:
                rows = (await db.execute(stmt)).scalars().all()
                questions = []
                for row in rows:
                    option_rows = await get_options_by_question_id(db, row.id)
                    questions.append(_to_entity(row, option_rows))
            except Exception as e:
                raise PersistenceError(f"unable to fetch questions: {e}") from e
            return questions


# ----- 数据核对：补偿删除失败后残留的脏数据 -----
async def find_orphan_question_ids(db: AsyncSession) -> list[int]:
    """没有任何选项的题目 ID。"""
    subq = select(OptionModel.question_id).distinct()
    result = await db.execute(select(QuestionModel.id).where(~QuestionModel.id.in_(subq)))
    return [row[0] for row in result.all()]


async def find_orphan_option_ids(db: AsyncSession) -> list[int]:
    """所属题目已不存在的选项 ID。"""
    subq = select(QuestionModel.id)
    result = await db.execute(select(OptionModel.id).where(~OptionModel.question_id.in_(subq)))
    return [row[0] for row in result.all()]


async def delete_orphans(db: AsyncSession) -> tuple[list[int], list[int]]:
    """同一事务内删除无选项的题目和无题目的选项，返回 (题目 ID 列表, 选项 ID 列表)。"""
    question_ids = await find_orphan_question_ids(db)
    option_ids = await find_orphan_option_ids(db)
    if question_ids:
        await db.execute(QuestionModel.__table__.delete().where(QuestionModel.id.in_(question_ids)))
    if option_ids:
        await db.execute(OptionModel.__table__.delete().where(OptionModel.id.in_(option_ids)))
    await db.commit()
    return question_ids, option_ids
