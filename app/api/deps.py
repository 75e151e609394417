"""API 依赖项：题目业务服务。测试中通过 app.dependency_overrides 替换。"""
from app.core.db import SessionLocal
from app.repositories.question_repository import SqlQuestionRepository
from app.services.question_service import QuestionService


def get_question_service() -> QuestionService:
    return QuestionService(SqlQuestionRepository(SessionLocal))
