from abc import ABC, abstractmethod
import json
import logging
from typing import List, Dict, Optional
from chat_proxy.core.config import settings
from chat_proxy.core.models.LlmClientDataclass.ChatMessageDataclass import (
    ChatMessage,
    CompletionResult,
    MessageData,
)

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


class BaseLLMClient(ABC):
    def __init__(
        self,
        base_url: str,
        timeout: int = settings.llm_client_timeout,
        max_tokens: int = settings.llm_client_max_tokens,
        temperature: Optional[float] = settings.llm_client_temperature,
        top_p: float = settings.llm_client_top_p,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.top_p = top_p

    @abstractmethod
    async def post_chat_completion(self, prompt: ChatMessage) -> CompletionResult:
        pass

    @abstractmethod
    async def call_llm(self, prompt: ChatMessage) -> str:
        pass

    def messageDataToDict(self, messageData: MessageData) -> Dict[str, str]:
        return {"role": messageData.role, "content": messageData.content}

    def dictToMessageData(self, dict: Dict[str, str]) -> MessageData:
        return MessageData(role=dict["role"], content=dict["content"])

    def chatMessageToDictList(self, chatMessage: ChatMessage) -> List[Dict[str, str]]:
        return [self.messageDataToDict(message) for message in chatMessage.content]

    def dictListToChatMessage(self, messages: List[Dict[str, str]]) -> ChatMessage:
        return ChatMessage(content=[self.dictToMessageData(message) for message in messages])

    def extract_reply(self, body: str) -> str:
        """
        완성 API 응답 본문에서 choices[0].message.content를 꺼냄

        JSON이 아니거나 choices 형태가 맞지 않으면 빈 문자열을 반환
        """
        try:
            data = json.loads(body)
        except json.JSONDecodeError:
            logger.warning("완성 API 응답이 JSON이 아님 (%d bytes)", len(body))
            return ""

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            return ""

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            logger.warning(
                "완성 API 응답에 문자열 content가 없음 (choices[0]=%s)", type(first).__name__
            )
            return ""
        return content

    def render_reply(self, result: CompletionResult) -> str:
        """HTTP 200이면 응답 텍스트, 아니면 "Error: " + 응답 본문"""
        if not result.ok:
            return ERROR_PREFIX + result.body
        return self.extract_reply(result.body)
