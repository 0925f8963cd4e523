"""
채팅 프록시 도메인 예외

main.py의 exception handler에서 "Error: ..." 텍스트 응답으로 변환됩니다.
"""


class ChatProxyError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingApiKeyError(ChatProxyError):
    """서버에 API 키가 설정되지 않음"""
    status_code = 500


class InputValidationError(ChatProxyError):
    """클라이언트 입력값 오류"""
    status_code = 400


class UpstreamRequestError(ChatProxyError):
    """완성 API 서버에 요청 자체가 실패함 (네트워크/타임아웃)"""
    status_code = 502
