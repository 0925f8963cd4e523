import logging

from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import PlainTextResponse

from chat_proxy.api.deps import get_chat_proxy_service, get_rate_limit_gate
from chat_proxy.core.RateLimit.BaseRateLimitGate import BaseRateLimitGate
from chat_proxy.schemas.chat import ChatReply, ChatRequest
from chat_proxy.service.Chat.ChatProxyService import ChatProxyService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["Chat"])

RATE_LIMIT_MESSAGE = "Error: rate limit exceeded"

# 요청 단위 오류는 두 엔드포인트 모두 text/plain "Error: ..." 로 응답
PLAIN_TEXT_ERRORS = {
    status_code: {"content": {"text/plain": {}}, "description": description}
    for status_code, description in (
        (400, "입력값 오류"),
        (429, "rate limit 거부"),
        (500, "API 키 미설정"),
    )
}


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post("", response_class=PlainTextResponse, responses=PLAIN_TEXT_ERRORS)
async def chat_form_endpoint(
    request: Request,
    input: str = Form(""),
    service: ChatProxyService = Depends(get_chat_proxy_service),
    gate: BaseRateLimitGate = Depends(get_rate_limit_gate),
):
    """폼 필드 `input`을 받아 응답 텍스트(또는 "Error: ...")를 그대로 반환"""
    if not gate.is_allowed(_client_key(request)):
        logger.warning("rate limit 거부: %s", _client_key(request))
        return PlainTextResponse(RATE_LIMIT_MESSAGE, status_code=429)

    reply = await service.handle(input)
    return PlainTextResponse(reply.reply, status_code=200 if reply.ok else 502)


@router.post("/json", response_model=ChatReply, responses=PLAIN_TEXT_ERRORS)
async def chat_json_endpoint(
    request: Request,
    response: Response,
    body: ChatRequest,
    service: ChatProxyService = Depends(get_chat_proxy_service),
    gate: BaseRateLimitGate = Depends(get_rate_limit_gate),
):
    if not gate.is_allowed(_client_key(request)):
        logger.warning("rate limit 거부: %s", _client_key(request))
        return PlainTextResponse(RATE_LIMIT_MESSAGE, status_code=429)

    reply = await service.handle(body.input)
    if not reply.ok:
        response.status_code = 502
    return reply
