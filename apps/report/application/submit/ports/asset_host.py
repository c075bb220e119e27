"""Asset Host Port - 외부 이미지 호스팅."""

from __future__ import annotations

from abc import ABC, abstractmethod

from report.domain.value_objects import HostedAsset


class AssetHost(ABC):
    """이미지 호스팅 Port.

    구현체는 실패 시 AssetHostError 를 발생시킵니다.
    업로드 시간 제한은 호출 측(SubmitReportCommand)이 적용합니다.
    """

    @abstractmethod
    async def upload(self, image_base64: str) -> HostedAsset:
        """이미지 업로드 (고정 크기/품질 변환 적용).

        Args:
            image_base64: data URI 프리픽스가 제거된 base64 이미지

        Returns:
            공개 URL과 삭제용 식별자
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, public_id: str) -> None:
        """업로드된 이미지 삭제 (보상 동작)."""
        raise NotImplementedError
