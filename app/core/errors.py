"""题目领域与持久化层的异常类型。HTTP 层按类型映射状态码（见 app/api/errors.py）。"""


class ValidationError(ValueError):
    """题目或选项不满足结构约束，调用方修正输入即可，不重试。"""

    message = "invalid question"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class QuestionOptionsLengthError(ValidationError):
    message = "question should have at least 2 options"


class QuestionOptionsCorrectError(ValidationError):
    message = "there isn't a correct option in the list"


class QuestionBodyLengthError(ValidationError):
    message = "question body should have at least 10 characters"


class OptionBodyLengthError(ValidationError):
    message = "option body should have at least 1 character"


class OptionQuestionIdError(ValidationError):
    message = "option questionId should be greater than or equal to 0"


class OptionOrderError(ValidationError):
    message = "option optionOrder should be greater than or equal to 0"


class QuestionNotFoundError(LookupError):
    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"question {question_id} not found")


class PersistenceError(RuntimeError):
    """数据库连接、事务、语句执行或读取结果失败。"""


class CompensationError(PersistenceError):
    """
    新增题目时选项写入失败，随后删除刚插入的题目（补偿）也失败。
    库中可能残留无选项的题目行，需人工核对（scripts/cleanup_orphans.py）。
    """

    def __init__(self, question_id: int, cause: Exception, cleanup_error: Exception):
        self.question_id = question_id
        self.cause = cause
        self.cleanup_error = cleanup_error
        super().__init__(
            f"unable to insert question options and to delete question {question_id}: "
            f"insert error: {cause}; delete error: {cleanup_error}"
        )
