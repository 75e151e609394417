import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # 路由前缀，默认与旧版接口一致（/question、/questions）
    api_prefix: str = os.getenv("API_PREFIX", "")
    environment: str = os.getenv("ENVIRONMENT", "development")
    database_url: str = os.getenv(
        "DATABASE_URL",
        "sqlite+aiosqlite:///./database/questions.db",
    )
    db_echo: bool = os.getenv("DB_ECHO", "false").lower() == "true"
    # GET /questions 未传 size 时的每页条数
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


settings = Settings()
