"""QuestionService 使用内存假仓储，只验证“先校验再委托”的顺序与异常透传。"""
import pytest

from app.core.errors import (
    PersistenceError,
    QuestionBodyLengthError,
    QuestionOptionsCorrectError,
    QuestionOptionsLengthError,
)
from app.entities.question import Option, Question
from app.services.question_service import QuestionService

add_error = PersistenceError("unable to add the question")
update_error = PersistenceError("unable to update the question")
delete_error = PersistenceError("unable to delete the question")
get_all_error = PersistenceError("unable to fetch questions")


class FakeRepository:
    def __init__(self):
        self.calls = []

    async def add(self, question):
        self.calls.append(("add", question))
        if question.body != "Where does the sun set?":
            raise add_error
        return 1

    async def update(self, question):
        self.calls.append(("update", question))
        if question.body != "Where does the sun set?":
            raise update_error

    async def delete(self, question_id):
        self.calls.append(("delete", question_id))
        if question_id != 1:
            raise delete_error

    async def get(self, question_id):
        self.calls.append(("get", question_id))
        return Question(id=question_id, body="Where does the sun set?")

    async def get_all(self, last_id, size):
        self.calls.append(("get_all", last_id, size))
        if last_id == -2:
            raise get_all_error
        return []


@pytest.fixture
def fake_repo():
    return FakeRepository()


@pytest.fixture
def fake_service(fake_repo):
    return QuestionService(fake_repo)


def _valid(body="Where does the sun set?"):
    return Question(body=body, options=[Option(body="East"), Option(body="West", correct=True)])


# --- create ---

async def test_create_delegates_after_validation(fake_service, fake_repo):
    assert await fake_service.create(_valid()) == 1
    assert [c[0] for c in fake_repo.calls] == ["add"]


@pytest.mark.parametrize(
    "question, error",
    [
        (Question(body="Where does the sun set?", options=[]), QuestionOptionsLengthError),
        (
            Question(body="Where does the sun set?", options=[Option(body="East"), Option(body="West")]),
            QuestionOptionsCorrectError,
        ),
        (Question(body="Where?", options=[Option(body="East"), Option(body="West", correct=True)]), QuestionBodyLengthError),
    ],
    ids=["no options", "no correct option", "short body"],
)
async def test_create_invalid_never_reaches_repository(fake_service, fake_repo, question, error):
    with pytest.raises(error):
        await fake_service.create(question)
    assert fake_repo.calls == []


async def test_create_passes_repository_error_through(fake_service):
    with pytest.raises(PersistenceError) as exc_info:
        await fake_service.create(_valid("Where does the sun rise?"))
    assert exc_info.value is add_error


# --- update ---

async def test_update_delegates_after_validation(fake_service, fake_repo):
    q = _valid()
    q.id = 1
    await fake_service.update(q)
    assert fake_repo.calls == [("update", q)]


async def test_update_invalid_never_reaches_repository(fake_service, fake_repo):
    with pytest.raises(QuestionOptionsLengthError):
        await fake_service.update(Question(id=1, body="Where does the sun set?", options=[Option(body="x", correct=True)]))
    assert fake_repo.calls == []


async def test_update_passes_repository_error_through(fake_service):
    with pytest.raises(PersistenceError) as exc_info:
        await fake_service.update(_valid("Where does the sun rise?"))
    assert exc_info.value is update_error


# --- remove / list_all / get ---

async def test_remove(fake_service, fake_repo):
    await fake_service.remove(1)
    assert fake_repo.calls == [("delete", 1)]


async def test_remove_error(fake_service):
    with pytest.raises(PersistenceError) as exc_info:
        await fake_service.remove(2)
    assert exc_info.value is delete_error


async def test_list_all(fake_service, fake_repo):
    assert await fake_service.list_all(10, 5) == []
    assert fake_repo.calls == [("get_all", 10, 5)]


async def test_list_all_error(fake_service):
    with pytest.raises(PersistenceError) as exc_info:
        await fake_service.list_all(-2, 10)
    assert exc_info.value is get_all_error


async def test_get(fake_service):
    q = await fake_service.get(3)
    assert q.id == 3
