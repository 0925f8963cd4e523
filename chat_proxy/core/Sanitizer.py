"""
클라이언트 입력 정제

폼 필드 `input`을 완성 API 메시지로 전달하기 전에
제어 문자를 제거하고 HTML 특수문자를 이스케이프합니다.
"""
import html
import re
from typing import Optional

from chat_proxy.core.config import settings
from chat_proxy.core.exceptions import InputValidationError

# \t, \n 을 제외한 C0 제어 문자와 DEL
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


class InputSanitizer:
    def __init__(self, max_length: int = settings.input_max_length):
        self.max_length = max_length

    def sanitize(self, value: Optional[str]) -> str:
        if value is None:
            raise InputValidationError("input is required")

        cleaned = value.replace("\r\n", "\n").replace("\r", "\n")
        cleaned = _CONTROL_CHARS.sub("", cleaned).strip()
        if not cleaned:
            raise InputValidationError("input is required")

        # 길이 제한은 이스케이프 전 원문 기준
        if len(cleaned) > self.max_length:
            raise InputValidationError(
                f"input exceeds {self.max_length} characters"
            )

        return html.escape(cleaned, quote=True)
