"""题目相关请求/响应模型。字段长度、选项数量等约束由 app.entities.question 校验，这里只做类型解析。"""
from pydantic import BaseModel, Field

from app.entities.question import Option, Question


# ----- 请求体 -----
class OptionIn(BaseModel):
    body: str = Field(..., description="选项内容")
    correct: bool = Field(False, description="是否为正确选项")


class QuestionIn(BaseModel):
    """新增/更新题目请求体。更新为整体替换，选项顺序即展示顺序。"""
    body: str = Field(..., description="题干，至少 10 个字符")
    options: list[OptionIn] = Field(default_factory=list, description="选项列表，至少 2 个且至少 1 个正确")

    def to_entity(self, question_id: int = 0) -> Question:
        return Question(
            id=question_id,
            body=self.body,
            options=[Option(body=o.body, correct=o.correct) for o in self.options],
        )


# ----- 响应体 -----
class OptionItem(BaseModel):
    id: int
    body: str
    correct: bool
    optionOrder: int


class QuestionItem(BaseModel):
    id: int
    body: str
    options: list[OptionItem] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, question: Question) -> "QuestionItem":
        return cls(
            id=question.id,
            body=question.body,
            options=[
                OptionItem(id=o.id, body=o.body, correct=o.correct, optionOrder=o.option_order)
                for o in question.options
            ],
        )
