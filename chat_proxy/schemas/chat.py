from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class ChatRequest(BaseModel):
    input: Optional[str] = Field(None, description="사용자 입력 메시지")


class ChatReply(BaseModel):
    reply: str = Field(..., description="어시스턴트 응답 또는 \"Error: ...\" 문자열")
    ok: bool = Field(..., description="완성 API가 HTTP 200을 반환했는지 여부")


class ModelCatalogResponse(BaseModel):
    endpoints: Dict[str, List[str]]
