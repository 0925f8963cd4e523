"""
OpenAiApiClient 단위 테스트 (httpx.MockTransport로 완성 API 대체)
"""
import json

import httpx
import pytest

from chat_proxy.core.LLMClient.OpenAiApiClient import OpenAiApiClient
from chat_proxy.core.exceptions import MissingApiKeyError, UpstreamRequestError
from chat_proxy.core.models.LlmClientDataclass.ChatMessageDataclass import ChatMessage, MessageData


def _completion_body(content: str) -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


@pytest.fixture
def chat_message():
    return ChatMessage(content=[MessageData(role="user", content="Hello")])


@pytest.fixture
def captured():
    return []


@pytest.fixture
def make_client(captured):
    def _make(status_code=200, payload=None, text=None, model="gpt-4o-mini", temperature=0.7):
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=payload)

        return OpenAiApiClient(
            base_url="https://api.example.test/v1/",
            model=model,
            temperature=temperature,
            transport=httpx.MockTransport(handler),
        )
    return _make


class TestOpenAiApiClientUnit:
    """요청 형태와 응답 처리 확인"""

    @pytest.mark.unit
    def test_message_data_to_dict(self, make_client):
        client = make_client()
        assert client.messageDataToDict(MessageData(role="user", content="Hi")) == {
            "role": "user", "content": "Hi"
        }

    @pytest.mark.unit
    def test_dict_list_to_chat_message(self, make_client):
        client = make_client()
        result = client.dictListToChatMessage([
            {"role": "system", "content": "S"},
            {"role": "user", "content": "U"},
        ])
        assert isinstance(result, ChatMessage)
        assert [m.role for m in result.content] == ["system", "user"]

    @pytest.mark.unit
    def test_build_request_data_omits_temperature_when_none(self, make_client, chat_message):
        client = make_client(temperature=None)
        data = client.build_request_data(chat_message)
        assert "temperature" not in data
        assert data["model"] == "gpt-4o-mini"
        assert data["messages"] == [{"role": "user", "content": "Hello"}]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_post_sends_bearer_token_and_payload(self, monkeypatch, make_client, captured, chat_message):
        """환경변수의 키가 Bearer 헤더로, {model, messages}가 본문으로 전달"""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test-123")
        client = make_client(payload=_completion_body("Hi there"))

        result = await client.post_chat_completion(chat_message)

        assert result.status_code == 200
        assert result.ok
        assert len(captured) == 1
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.example.test/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer sk-test-123"
        body = json.loads(request.content)
        assert body["model"] == "gpt-4o-mini"
        assert body["messages"] == [{"role": "user", "content": "Hello"}]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_api_key_read_at_call_time(self, monkeypatch, make_client, captured, chat_message):
        client = make_client(payload=_completion_body("ok"))

        monkeypatch.setenv("OPENAI_API_KEY", "sk-first")
        await client.post_chat_completion(chat_message)
        monkeypatch.setenv("OPENAI_API_KEY", "sk-rotated")
        await client.post_chat_completion(chat_message)

        assert captured[0].headers["Authorization"] == "Bearer sk-first"
        assert captured[1].headers["Authorization"] == "Bearer sk-rotated"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_call_llm_returns_reply(self, monkeypatch, make_client, chat_message):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        client = make_client(payload=_completion_body("Hi there"))
        assert await client.call_llm(chat_message) == "Hi there"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_call_llm_non_200_returns_error_string(self, monkeypatch, make_client, captured, chat_message):
        """HTTP 200이 아니면 "Error: " + 응답 본문, 재시도 없음"""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        client = make_client(status_code=429, text='{"error": "quota"}')

        assert await client.call_llm(chat_message) == 'Error: {"error": "quota"}'
        assert len(captured) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_api_key_raises(self, monkeypatch, make_client, captured, chat_message):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setattr("chat_proxy.core.config.settings.openai_api_key", None)
        client = make_client(payload=_completion_body("unused"))

        with pytest.raises(MissingApiKeyError):
            await client.post_chat_completion(chat_message)
        assert captured == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_network_error_raises_upstream_error(self, monkeypatch, chat_message):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = OpenAiApiClient(
            base_url="https://api.example.test/v1",
            transport=httpx.MockTransport(handler),
        )
        with pytest.raises(UpstreamRequestError) as exc_info:
            await client.post_chat_completion(chat_message)
        assert "sk-test" not in exc_info.value.message

    @pytest.mark.unit
    def test_extract_reply_handles_bad_bodies(self, make_client):
        client = make_client()
        assert client.extract_reply("not json") == ""
        assert client.extract_reply('{"choices": []}') == ""
        assert client.extract_reply("[1, 2]") == ""
        assert client.extract_reply('{"choices": ["x"]}') == ""
        assert client.extract_reply('{"choices": {"a": 1}}') == ""
        assert client.extract_reply('{"choices": [{"message": "hi"}]}') == ""
        assert client.extract_reply(
            '{"choices": [{"message": {"content": [{"type": "text", "text": "hi"}]}}]}'
        ) == ""
        assert client.extract_reply('{"choices": [{"message": {"content": null}}]}') == ""
        assert client.extract_reply(json.dumps(_completion_body("x"))) == "x"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_base_url_raises_upstream_error(self, monkeypatch, chat_message):
        """잘못된 base_url(포트 오류)도 UpstreamRequestError로 변환"""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=_completion_body("unused"))

        client = OpenAiApiClient(
            base_url="https://api.example.test:notaport/v1",
            transport=httpx.MockTransport(handler),
        )
        with pytest.raises(UpstreamRequestError):
            await client.post_chat_completion(chat_message)
