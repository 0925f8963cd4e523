import logging
from typing import Optional

from chat_proxy.core.LLMClient.BaseLlmClient import BaseLLMClient
from chat_proxy.core.ModelCatalog import CHAT_COMPLETIONS_ENDPOINT, is_supported
from chat_proxy.core.Sanitizer import InputSanitizer
from chat_proxy.core.models.LlmClientDataclass.ChatMessageDataclass import (
    ChatMessage,
    CompletionResult,
    MessageData,
)
from chat_proxy.schemas.chat import ChatReply

logger = logging.getLogger(__name__)


class ChatProxyService:
    """
    브라우저 입력을 받아 서버 측에서 완성 API를 호출하는 서비스

    입력 정제 → 메시지 구성 → 완성 API 호출 → 응답 렌더링
    """

    def __init__(
        self,
        llm_client: BaseLLMClient,
        sanitizer: InputSanitizer,
        system_prompt: Optional[str] = None,
    ):
        self.llm_client = llm_client
        self.sanitizer = sanitizer
        self.system_prompt = system_prompt

        model = getattr(llm_client, "model", None)
        if model and not is_supported(CHAT_COMPLETIONS_ENDPOINT, model):
            logger.warning(
                "모델 %s 은(는) %s 참고 목록에 없음", model, CHAT_COMPLETIONS_ENDPOINT
            )

    def build_messages(self, user_input: str) -> ChatMessage:
        messages = []
        if self.system_prompt:
            messages.append(MessageData(role="system", content=self.system_prompt))
        messages.append(MessageData(role="user", content=user_input))
        return ChatMessage(content=messages)

    def render(self, result: CompletionResult) -> ChatReply:
        return ChatReply(reply=self.llm_client.render_reply(result), ok=result.ok)

    async def handle(self, raw_input: Optional[str]) -> ChatReply:
        user_input = self.sanitizer.sanitize(raw_input)
        result = await self.llm_client.post_chat_completion(self.build_messages(user_input))
        if not result.ok:
            logger.warning("완성 API 오류 응답: HTTP %d", result.status_code)
        return self.render(result)
