from abc import ABC, abstractmethod


class BaseRateLimitGate(ABC):
    """요청 허용 여부를 판단하는 게이트 (클라이언트 키 단위)"""

    @abstractmethod
    def is_allowed(self, client_key: str) -> bool:
        pass
