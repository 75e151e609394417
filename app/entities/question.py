"""题目（Question）与选项（Option）领域对象及写库前的结构校验。"""
from dataclasses import dataclass, field
from typing import Callable

from app.core.errors import (
    OptionBodyLengthError,
    OptionOrderError,
    OptionQuestionIdError,
    QuestionBodyLengthError,
    QuestionOptionsCorrectError,
    QuestionOptionsLengthError,
    ValidationError,
)

MIN_OPTIONS = 2
MIN_QUESTION_BODY_LENGTH = 10
MIN_OPTION_BODY_LENGTH = 1


@dataclass
class Option:
    body: str
    correct: bool = False
    id: int = 0
    question_id: int = 0
    # 由持久化层按选项在列表中的位置重新计算，调用方传入的值会被忽略
    option_order: int = 0


@dataclass
class Question:
    body: str
    options: list[Option] = field(default_factory=list)
    id: int = 0


Check = tuple[Callable[[object], bool], type[ValidationError]]

# 按顺序执行，第一个不通过的检查决定异常类型
_OPTION_CHECKS: tuple[Check, ...] = (
    (lambda o: len(o.body or "") >= MIN_OPTION_BODY_LENGTH, OptionBodyLengthError),
    (lambda o: o.question_id >= 0, OptionQuestionIdError),
    (lambda o: o.option_order >= 0, OptionOrderError),
)

_QUESTION_CHECKS: tuple[Check, ...] = (
    (lambda q: len(q.options or []) >= MIN_OPTIONS, QuestionOptionsLengthError),
    (lambda q: any(o.correct for o in q.options), QuestionOptionsCorrectError),
    (lambda q: len(q.body or "") >= MIN_QUESTION_BODY_LENGTH, QuestionBodyLengthError),
)


def _run_checks(target: object, checks: tuple[Check, ...]) -> None:
    for predicate, error in checks:
        if not predicate(target):
            raise error()


def validate_option(option: Option) -> None:
    """校验单个选项的字段约束，不依赖所属题目。不通过时抛出对应的 ValidationError 子类。"""
    _run_checks(option, _OPTION_CHECKS)


def validate_question(question: Question) -> None:
    """
    校验题目：先选项数量，再是否存在正确选项，再题干长度，最后逐个校验选项。
    第一个不通过的检查即抛出，后续检查不再执行。
    """
    _run_checks(question, _QUESTION_CHECKS)
    for option in question.options:
        validate_option(option)
