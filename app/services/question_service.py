"""题目业务入口：写操作先校验再落库，其余直接委托给仓储。异常原样向上抛出。"""
from app.entities.question import Question, validate_question
from app.repositories.question_repository import QuestionRepository


class QuestionService:
    def __init__(self, repo: QuestionRepository):
        self.repo = repo

    async def create(self, question: Question) -> int:
        """校验通过后插入题目及选项，返回新题目 ID。"""
        validate_question(question)
        return await self.repo.add(question)

    async def update(self, question: Question) -> None:
        validate_question(question)
        await self.repo.update(question)

    async def remove(self, question_id: int) -> None:
        await self.repo.delete(question_id)

    async def get(self, question_id: int) -> Question:
        return await self.repo.get(question_id)

    async def list_all(self, last_id: int, size: int) -> list[Question]:
        return await self.repo.get_all(last_id, size)
