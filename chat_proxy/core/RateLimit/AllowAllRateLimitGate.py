from chat_proxy.core.RateLimit.BaseRateLimitGate import BaseRateLimitGate


class AllowAllRateLimitGate(BaseRateLimitGate):
    """제한 없이 모든 요청을 허용하는 기본 게이트"""

    def is_allowed(self, client_key: str) -> bool:
        return True
