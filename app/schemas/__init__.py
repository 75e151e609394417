"""API 请求/响应 Pydantic 模型。按模块组织，路由从本包或子模块导入。"""
from app.schemas.health import HealthResponse
from app.schemas.questions import OptionIn, OptionItem, QuestionIn, QuestionItem

__all__ = [
    "HealthResponse",
    "OptionIn",
    "OptionItem",
    "QuestionIn",
    "QuestionItem",
]
