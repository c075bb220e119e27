"""Ultralytics HUB Detector HTTP 클라이언트.

Ultralytics predict API의 HTTP 구현체.
- 탐지: POST https://predict.ultralytics.com (multipart/form-data)
- 인증: x-api-key 헤더

Clean Architecture:
- Port: DetectorClient (application/classify/ports)
- Adapter: UltralyticsDetectorClient (이 파일)

에러 매핑:
- httpx.TimeoutException → ServiceTimeoutError
- httpx.ConnectError (DNS 실패, 연결 거부) → ServiceUnreachableError
- 2xx 이외 응답 → ServiceError(status, body)
- 그 외 → ServiceError
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from report.application.classify.ports import DetectorClient
from report.application.common.exceptions import (
    ServiceError,
    ServiceTimeoutError,
    ServiceUnreachableError,
)

logger = logging.getLogger(__name__)

# 기본 설정
DEFAULT_TIMEOUT = 30.0
DEFAULT_IMAGE_SIZE = 640
DEFAULT_CONFIDENCE = 0.25
DEFAULT_IOU = 0.45


class UltralyticsDetectorClient(DetectorClient):
    """Ultralytics 탐지 HTTP 클라이언트.

    httpx AsyncClient를 사용한 비동기 HTTP 클라이언트.

    Features:
    - Lazy connection (첫 호출 시 연결)
    - 타임아웃 설정
    - 구조화된 로깅
    - 재시도 없음 (클라이언트가 재제출)

    Usage:
        client = UltralyticsDetectorClient(api_key="xxx", model="https://hub.ultralytics.com/models/...")
        data = await client.detect(image_bytes)
        await client.close()
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        endpoint: str = "https://predict.ultralytics.com",
        image_size: int = DEFAULT_IMAGE_SIZE,
        confidence: float = DEFAULT_CONFIDENCE,
        iou: float = DEFAULT_IOU,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """초기화.

        Args:
            api_key: Ultralytics API key (None이면 첫 호출 시 ServiceError)
            model: 모델 URL
            endpoint: 탐지 엔드포인트
            image_size: 추론 이미지 크기
            confidence: 탐지 신뢰도 임계값
            iou: NMS IoU 임계값
            timeout: 요청 타임아웃 (초)
            transport: 테스트용 httpx transport
        """
        self._api_key = api_key
        self._model = model
        self._endpoint = endpoint
        self._image_size = image_size
        self._confidence = confidence
        self._iou = iou
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazy HTTP 클라이언트 생성."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            )
            logger.info("Ultralytics HTTP client created")
        return self._client

    def _form_fields(self) -> dict[str, str]:
        """고정 모델 파라미터."""
        return {
            "model": self._model,
            "imgsz": str(self._image_size),
            "conf": str(self._confidence),
            "iou": str(self._iou),
        }

    async def detect(self, image: bytes) -> dict[str, Any]:
        """이미지 탐지.

        Args:
            image: JPEG 이미지 바이트

        Returns:
            detector JSON 응답
        """
        if not self._api_key:
            raise ServiceError("ULTRALYTICS_API_KEY is not configured")

        client = await self._get_client()

        try:
            response = await client.post(
                self._endpoint,
                headers={"x-api-key": self._api_key},
                data=self._form_fields(),
                files={"file": ("image.jpg", image, "image/jpeg")},
            )
        except httpx.TimeoutException as e:
            logger.error(
                "Ultralytics API timeout",
                extra={"timeout": self._timeout},
            )
            raise ServiceTimeoutError(self._timeout) from e
        except httpx.ConnectError as e:
            logger.error(
                "Ultralytics API unreachable",
                extra={"endpoint": self._endpoint, "error": str(e)},
            )
            raise ServiceUnreachableError(str(e)) from e
        except httpx.HTTPError as e:
            logger.error(
                "Ultralytics API request failed",
                extra={"endpoint": self._endpoint, "error": str(e)},
            )
            raise ServiceError(str(e)) from e

        if not response.is_success:
            logger.error(
                "Ultralytics API HTTP error",
                extra={
                    "status_code": response.status_code,
                    "detail": response.text[:200] if response.text else "",
                },
            )
            raise ServiceError.from_response(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise ServiceError(f"Invalid JSON response: {e}") from e

        logger.debug(
            "Ultralytics detection completed",
            extra={"status_code": response.status_code, "bytes": len(image)},
        )
        return data

    async def close(self) -> None:
        """HTTP 클라이언트 종료."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Ultralytics HTTP client closed")
