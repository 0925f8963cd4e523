"""
API 엔드포인트별 사용 가능한 모델 목록 (참고용)
"""
from typing import Dict, List, Optional

CHAT_COMPLETIONS_ENDPOINT = "/v1/chat/completions"

MODEL_CATALOG: Dict[str, List[str]] = {
    CHAT_COMPLETIONS_ENDPOINT: [
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4-turbo",
        "gpt-4",
        "gpt-4-0613",
        "gpt-4-32k",
        "gpt-3.5-turbo",
        "gpt-3.5-turbo-0125",
        "gpt-3.5-turbo-16k",
        "o1-mini",
        "o1-preview",
    ],
    "/v1/completions": [
        "gpt-3.5-turbo-instruct",
        "davinci-002",
        "babbage-002",
    ],
    "/v1/embeddings": [
        "text-embedding-3-small",
        "text-embedding-3-large",
        "text-embedding-ada-002",
    ],
    "/v1/moderations": [
        "text-moderation-latest",
        "text-moderation-stable",
    ],
    "/v1/audio/transcriptions": ["whisper-1"],
    "/v1/audio/translations": ["whisper-1"],
    "/v1/audio/speech": ["tts-1", "tts-1-hd"],
    "/v1/images/generations": ["dall-e-2", "dall-e-3"],
    "/v1/fine_tuning/jobs": [
        "gpt-4o-mini-2024-07-18",
        "gpt-3.5-turbo",
        "davinci-002",
        "babbage-002",
    ],
}


def models_for(endpoint: str) -> List[str]:
    return list(MODEL_CATALOG.get(endpoint, []))


def is_supported(endpoint: str, model: str) -> bool:
    return model in MODEL_CATALOG.get(endpoint, [])


def endpoint_for(model: str) -> Optional[str]:
    """모델이 처음 등장하는 엔드포인트 (없으면 None)"""
    for endpoint, models in MODEL_CATALOG.items():
        if model in models:
            return endpoint
    return None
