from pydantic import BaseModel
from typing import List

class MessageData(BaseModel):
    role: str
    content: str

class ChatMessage(BaseModel):
    content: List[MessageData]

class CompletionResult(BaseModel):
    """완성 API 1회 호출 결과 (상태 코드 + 원본 응답 본문)"""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200
