import pytest

from app.core.errors import (
    OptionBodyLengthError,
    OptionOrderError,
    OptionQuestionIdError,
    QuestionBodyLengthError,
    QuestionOptionsCorrectError,
    QuestionOptionsLengthError,
    ValidationError,
)
from app.entities.question import Option, Question, validate_option, validate_question


# --- validate_option ---

def test_validate_option_ok():
    validate_option(Option(body="is this user correct?", correct=True))


@pytest.mark.parametrize(
    "option, error",
    [
        (Option(body=""), OptionBodyLengthError),
        (Option(body=None), OptionBodyLengthError),
        (Option(body="correct body", question_id=-1), OptionQuestionIdError),
        (Option(body="correct body", option_order=-1), OptionOrderError),
    ],
    ids=["empty body", "missing body", "negative questionId", "negative optionOrder"],
)
def test_validate_option_errors(option, error):
    with pytest.raises(error):
        validate_option(option)


# --- validate_question ---

def test_validate_question_ok(sun_question):
    validate_question(sun_question)


def test_question_body_exactly_ten_characters_is_valid():
    q = Question(body="0123456789", options=[Option(body="a", correct=True), Option(body="b")])
    validate_question(q)


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_options(count):
    options = [Option(body="West", correct=True)][:count]
    with pytest.raises(QuestionOptionsLengthError) as exc_info:
        validate_question(Question(body="Where does the sun set?", options=options))
    assert str(exc_info.value) == "question should have at least 2 options"


def test_option_count_checked_before_everything_else():
    # 题干过短、选项为空，仍报选项数量错误
    q = Question(body="short", options=[Option(body="", correct=False)])
    with pytest.raises(QuestionOptionsLengthError):
        validate_question(q)


def test_no_correct_option():
    q = Question(
        body="Where does the sun set?",
        options=[Option(body="East"), Option(body="West"), Option(body="North")],
    )
    with pytest.raises(QuestionOptionsCorrectError) as exc_info:
        validate_question(q)
    assert str(exc_info.value) == "there isn't a correct option in the list"


def test_correct_option_checked_before_body_length():
    q = Question(body="short", options=[Option(body="a"), Option(body="b")])
    with pytest.raises(QuestionOptionsCorrectError):
        validate_question(q)


def test_question_body_too_short():
    q = Question(body="Where?", options=[Option(body="East"), Option(body="West", correct=True)])
    with pytest.raises(QuestionBodyLengthError):
        validate_question(q)


def test_invalid_option_inside_question():
    q = Question(
        body="Where does the sun set?",
        options=[Option(body="East"), Option(body="", correct=True)],
    )
    with pytest.raises(OptionBodyLengthError):
        validate_question(q)


def test_all_errors_are_validation_errors():
    with pytest.raises(ValidationError):
        validate_question(Question(body="Where does the sun set?"))
