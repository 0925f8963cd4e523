import logging
import time
import httpx
from typing import Optional
from chat_proxy.core.LLMClient.BaseLlmClient import BaseLLMClient
from chat_proxy.core.config import get_api_key, settings
from chat_proxy.core.exceptions import UpstreamRequestError
from chat_proxy.core.models.LlmClientDataclass.ChatMessageDataclass import ChatMessage, CompletionResult

logger = logging.getLogger(__name__)


class OpenAiApiClient(BaseLLMClient):
    """
    OpenAI 호환 Chat Completions 클라이언트 (httpx 기반 async)

    API 키는 서버에서만 읽고, 요청마다 Authorization 헤더로 전달합니다.
    요청당 POST는 정확히 1회이며 재시도하지 않습니다.
    """

    def __init__(
        self,
        base_url: str = settings.openai_base_url,
        model: str = settings.openai_model,
        timeout: int = settings.llm_client_timeout,
        max_tokens: int = settings.llm_client_max_tokens,
        temperature: Optional[float] = settings.llm_client_temperature,
        top_p: float = settings.llm_client_top_p,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
        )
        self.model = model
        self.transport = transport

    def build_request_data(self, prompt: ChatMessage) -> dict:
        request_data = {
            "model": self.model,
            "messages": self.chatMessageToDictList(prompt),
            "max_completion_tokens": self.max_tokens,
            "top_p": self.top_p,
        }
        if self.temperature is not None:
            request_data["temperature"] = self.temperature
        return request_data

    async def post_chat_completion(self, prompt: ChatMessage) -> CompletionResult:
        """
        /chat/completions 로 POST 1회 호출

        Returns:
            CompletionResult: HTTP 상태 코드와 원본 응답 본문
        Raises:
            MissingApiKeyError: API 키가 설정되지 않음
            UpstreamRequestError: 네트워크 오류 또는 타임아웃
        """
        api_key = get_api_key()
        started = time.monotonic()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
            ) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=self.build_request_data(prompt),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("완성 API 요청 실패: %s", type(e).__name__)
            raise UpstreamRequestError(f"completion request failed: {type(e).__name__}") from e

        elapsed_ms = (time.monotonic() - started) * 1000
        logger.info(
            "완성 API 응답: HTTP %d (%.0fms, model=%s)",
            response.status_code, elapsed_ms, self.model,
        )
        return CompletionResult(status_code=response.status_code, body=response.text)

    async def call_llm(self, prompt: ChatMessage) -> str:
        """
        응답 텍스트만 반환 (HTTP 200이 아니면 "Error: " + 응답 본문)
        """
        return self.render_reply(await self.post_chat_completion(prompt))
