"""错误处理中间件"""
from typing import Callable, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from ..dice import DiceError, DiceSyntaxError


class ErrorResponse:
    """统一错误响应"""

    def __init__(self, code: int, message: str, detail: Optional[str] = None):
        self.code = code
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "detail": self.detail}


async def dice_syntax_error_handler(request: Request, exc: DiceSyntaxError) -> JSONResponse:
    """表达式不合法 -> 400"""
    logger.info(f"Bad notation: {request.method} {request.url.path} | notation={exc.notation!r}")
    error = ErrorResponse(code=400, message=str(exc), detail=exc.notation)
    return JSONResponse(status_code=400, content=error.to_dict())


async def dice_error_handler(request: Request, exc: DiceError) -> JSONResponse:
    """参数或限制不合法 -> 422"""
    logger.info(f"Rejected roll: {request.method} {request.url.path} | error={exc}")
    error = ErrorResponse(code=422, message=str(exc))
    return JSONResponse(status_code=422, content=error.to_dict())


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """全局错误处理中间件"""

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(f"Unhandled error: {request.method} {request.url.path}")
            error = ErrorResponse(
                code=500,
                message="Internal server error",
                detail=str(e) if self.debug else None,
            )
            return JSONResponse(status_code=500, content=error.to_dict())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """请求日志中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.debug(f"Response: {request.method} {request.url.path} -> {response.status_code}")
        return response
