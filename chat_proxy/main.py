import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse

from chat_proxy.api.routes import api_router
from chat_proxy.core.config import settings
from chat_proxy.core.exceptions import ChatProxyError

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


async def chat_proxy_error_handler(request: Request, exc: ChatProxyError):
    logger.warning("%s: %s", type(exc).__name__, exc.message)
    return PlainTextResponse(f"Error: {exc.message}", status_code=exc.status_code)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("요청 형식 오류: %s %s", request.method, request.url.path)
    return PlainTextResponse("Error: invalid request body", status_code=400)


def health_check():
    return {"status": "UP"}


def index():
    return FileResponse(STATIC_DIR / "index.html")


def create_app(cors_origins: List[str]) -> FastAPI:
    app = FastAPI(
        title="Chat Proxy API",
        description="API 키를 서버에만 두고 완성 API를 중계하는 채팅 프록시",
        version="0.1.0",
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix="/api")
    app.add_exception_handler(ChatProxyError, chat_proxy_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_api_route("/health", health_check, methods=["GET"])
    app.add_api_route("/", index, methods=["GET"], include_in_schema=False)
    return app


app = create_app(settings.cors_origins)
