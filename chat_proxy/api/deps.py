"""
의존성 팩토리: FastAPI Depends()에서 사용할 서비스 객체 생성

모든 의존성을 모듈 레벨 싱글턴으로 관리하여
동시 요청 시 불필요한 객체 재생성을 방지합니다.
"""
from chat_proxy.core.config import settings
from chat_proxy.core.LLMClient.OpenAiApiClient import OpenAiApiClient
from chat_proxy.core.RateLimit.AllowAllRateLimitGate import AllowAllRateLimitGate
from chat_proxy.core.RateLimit.BaseRateLimitGate import BaseRateLimitGate
from chat_proxy.core.Sanitizer import InputSanitizer
from chat_proxy.service.Chat.ChatProxyService import ChatProxyService

# ── 모듈 레벨 싱글턴: 모든 요청이 동일한 객체를 공유 ──
_llm_client = OpenAiApiClient()
_sanitizer = InputSanitizer(max_length=settings.input_max_length)
_rate_limit_gate = AllowAllRateLimitGate()
_chat_proxy_service = ChatProxyService(
    llm_client=_llm_client,
    sanitizer=_sanitizer,
    system_prompt=settings.chat_system_prompt,
)


def get_chat_proxy_service() -> ChatProxyService:
    return _chat_proxy_service


def get_rate_limit_gate() -> BaseRateLimitGate:
    return _rate_limit_gate
