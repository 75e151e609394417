"""题目 CRUD：POST /question、PUT/DELETE/GET /question/{id}、GET /questions。"""
import logging

from fastapi import APIRouter, Depends, Path, Query

from app.api.deps import get_question_service
from app.core.config import settings
from app.schemas.questions import QuestionIn, QuestionItem
from app.services.question_service import QuestionService

logger = logging.getLogger(__name__)
router = APIRouter()

# 数据库主键为 64 位有符号整数，超出范围的路径/查询参数按 400 处理
MAX_INT64 = 2**63 - 1


@router.post("/question", response_model=QuestionItem)
async def add_question(
    body: QuestionIn,
    service: QuestionService = Depends(get_question_service),
):
    """新增题目，返回落库后的题目（含 ID 与选项顺序）。"""
    logger.info("Handle Add question")
    question_id = await service.create(body.to_entity())
    return QuestionItem.from_entity(await service.get(question_id))


@router.put("/question/{question_id}", response_model=QuestionItem)
async def update_question(
    body: QuestionIn,
    question_id: int = Path(..., ge=0, le=MAX_INT64),
    service: QuestionService = Depends(get_question_service),
):
    """整体替换题干与全部选项。"""
    logger.info("Handle Update question question_id=%s", question_id)
    await service.update(body.to_entity(question_id))
    return QuestionItem.from_entity(await service.get(question_id))


@router.delete("/question/{question_id}", status_code=204)
async def delete_question(
    question_id: int = Path(..., ge=0, le=MAX_INT64),
    service: QuestionService = Depends(get_question_service),
):
    """删除题目及其选项。ID 不存在时同样返回 204。"""
    logger.info("Handle Delete question question_id=%s", question_id)
    await service.remove(question_id)


@router.get("/question/{question_id}", response_model=QuestionItem)
async def get_question(
    question_id: int = Path(..., ge=0, le=MAX_INT64),
    service: QuestionService = Depends(get_question_service),
):
    logger.info("Handle Get question question_id=%s", question_id)
    return QuestionItem.from_entity(await service.get(question_id))


@router.get("/questions", response_model=list[QuestionItem])
async def list_questions(
    last_id: int = Query(0, ge=0, le=MAX_INT64, description="游标分页：返回 id 小于该值的题目；为 0 时返回全部"),
    size: int = Query(settings.default_page_size, ge=1, le=MAX_INT64, description="游标分页时每页条数"),
    service: QuestionService = Depends(get_question_service),
):
    """
    题目列表。传 last_id 时按 id 降序取 size 条（游标分页），下一页以本页最后一条的 id 作为 last_id。
    不传 last_id 时返回全部题目，顺序由数据库决定。
    """
    logger.info("Handle GetAll questions last_id=%s size=%s", last_id, size)
    questions = await service.list_all(last_id, size)
    return [QuestionItem.from_entity(q) for q in questions]
