"""异常到 HTTP 状态码的映射：校验失败 422，路径/查询参数错误 400，不存在 404，存储失败 500。"""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import CompensationError, PersistenceError, QuestionNotFoundError, ValidationError

logger = logging.getLogger(__name__)

_PARAM_LOCATIONS = ("path", "query")


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    bad_params = [e for e in errors if e.get("loc") and e["loc"][0] in _PARAM_LOCATIONS]
    if bad_params:
        detail = "; ".join(
            f"invalid {e['loc'][-1]} parameter: {e.get('msg', '')}" for e in bad_params
        )
        return JSONResponse(status_code=400, content={"detail": detail})
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _not_found_handler(request: Request, exc: QuestionNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    if isinstance(exc, CompensationError):
        logger.error("数据可能不一致，需人工核对 question_id=%s: %s", exc.question_id, exc)
    else:
        logger.error("%s %s 存储失败: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(QuestionNotFoundError, _not_found_handler)
    app.add_exception_handler(PersistenceError, _persistence_error_handler)
