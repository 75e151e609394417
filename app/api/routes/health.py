"""健康检查：GET /health。"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.health import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(db: AsyncSession = Depends(get_db)):
    """服务存活检查，同时探测数据库连接。数据库不可用时 database 为 error，接口仍返回 200。"""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("数据库连通性检查失败: %s", e)
        return HealthResponse(status="ok", database="error")
    return HealthResponse()
