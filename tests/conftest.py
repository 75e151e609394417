"""公共 fixture：每个测试使用 tmp_path 下独立的 SQLite 文件库。"""
import pytest
from httpx import ASGITransport, AsyncClient

from app.core.db import init_db, make_engine, make_session_factory
from app.entities.question import Option, Question
from app.repositories.question_repository import SqlQuestionRepository
from app.services.question_service import QuestionService


@pytest.fixture
async def engine(tmp_path):
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'questions.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def repo(session_factory):
    return SqlQuestionRepository(session_factory)


@pytest.fixture
def service(repo):
    return QuestionService(repo)


@pytest.fixture
async def client(session_factory, service):
    from app.api.deps import get_question_service
    from app.core.db import get_db
    from app.main import app

    async def _get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_question_service] = lambda: service
    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sun_question():
    return Question(
        body="Where does the sun set?",
        options=[Option(body="East", correct=False), Option(body="West", correct=True)],
    )


@pytest.fixture
def sun_payload():
    return {
        "body": "Where does the sun set?",
        "options": [
            {"body": "East", "correct": False},
            {"body": "West", "correct": True},
        ],
    }
