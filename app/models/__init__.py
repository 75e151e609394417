from app.core.db import Base
from app.models.question import Question
from app.models.option import Option

__all__ = [
    "Base",
    "Question",
    "Option",
]
