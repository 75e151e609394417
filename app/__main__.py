"""python -m app：用 uvicorn 启动服务，Ctrl+C / SIGTERM 时等待进行中的请求结束后退出。"""
import uvicorn

from app.core.config import settings


def main():
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
