from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings


def _to_async_url(url: str) -> str:
    if url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    return create_async_engine(_to_async_url(url), echo=echo, future=True)


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, class_=AsyncSession, autoflush=False, autocommit=False, expire_on_commit=False)


engine = make_engine(settings.database_url, echo=settings.db_echo)
SessionLocal = make_session_factory(engine)
Base = declarative_base()


async def init_db(bind: AsyncEngine | None = None) -> None:
    """建表（已存在则跳过），不做迁移。"""
    # 注册模型到 Base.metadata
    import app.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db():
    async with SessionLocal() as db:
        yield db
