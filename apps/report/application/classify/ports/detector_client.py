"""Detector Client Port - 원격 객체 탐지 API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DetectorClient(ABC):
    """객체 탐지 API Port.

    구현체는 실패를 ServiceTimeoutError / ServiceUnreachableError / ServiceError 로
    변환해야 합니다.
    """

    @abstractmethod
    async def detect(self, image: bytes) -> dict[str, Any]:
        """이미지 탐지 요청.

        Args:
            image: JPEG 이미지 바이트

        Returns:
            detector JSON 응답 본문
        """
        raise NotImplementedError

    async def close(self) -> None:
        """리소스 정리."""
        return None
