"""UltralyticsDetectorClient Tests.

httpx.MockTransport 로 Ultralytics predict API 를 대체합니다.
"""

import httpx
import pytest

from report.application.common.exceptions import (
    ServiceError,
    ServiceTimeoutError,
    ServiceUnreachableError,
)
from report.infrastructure.detector import UltralyticsDetectorClient

ENDPOINT = "https://predict.example.test"
MODEL = "https://hub.example.test/models/abc"


def make_client(handler, api_key: str | None = "test-key") -> UltralyticsDetectorClient:
    return UltralyticsDetectorClient(
        api_key=api_key,
        model=MODEL,
        endpoint=ENDPOINT,
        transport=httpx.MockTransport(handler),
    )


class TestUltralyticsDetectorClient:
    """UltralyticsDetectorClient.detect() 테스트."""

    @pytest.mark.anyio
    async def test_posts_multipart_with_model_parameters(self, image_bytes):
        """x-api-key 헤더 + model/imgsz/conf/iou 필드 + file 파트."""
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            captured["body"] = request.read()
            return httpx.Response(200, json={"images": [{"results": []}]})

        client = make_client(handler)
        data = await client.detect(image_bytes)
        await client.close()

        request = captured["request"]
        body = captured["body"]
        assert data == {"images": [{"results": []}]}
        assert request.method == "POST"
        assert request.url.host == "predict.example.test"
        assert request.headers["x-api-key"] == "test-key"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="model"' in body and MODEL.encode() in body
        assert b'name="imgsz"\r\n\r\n640' in body
        assert b'name="conf"\r\n\r\n0.25' in body
        assert b'name="iou"\r\n\r\n0.45' in body
        assert b'name="file"; filename="image.jpg"' in body
        assert image_bytes in body

    @pytest.mark.anyio
    async def test_missing_api_key(self, image_bytes):
        """API key 미설정 → 호출 없이 ServiceError."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        client = make_client(handler, api_key=None)

        with pytest.raises(ServiceError, match="ULTRALYTICS_API_KEY"):
            await client.detect(image_bytes)
        assert calls == []

    @pytest.mark.anyio
    async def test_error_status_maps_to_service_error(self, image_bytes):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, text="invalid key")

        client = make_client(handler)

        with pytest.raises(ServiceError) as exc_info:
            await client.detect(image_bytes)

        assert exc_info.value.status == 401
        assert exc_info.value.message == "SERVICE_ERROR: API_ERROR: 401 - invalid key"

    @pytest.mark.anyio
    async def test_connect_error_maps_to_unreachable(self, image_bytes):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(ServiceUnreachableError) as exc_info:
            await client.detect(image_bytes)

        assert exc_info.value.message.startswith("SERVICE_DOWN")

    @pytest.mark.anyio
    async def test_timeout_maps_to_service_timeout(self, image_bytes):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        client = make_client(handler)

        with pytest.raises(ServiceTimeoutError) as exc_info:
            await client.detect(image_bytes)

        assert exc_info.value.message == "SERVICE_TIMEOUT: Request timed out after 30 seconds"

    @pytest.mark.anyio
    async def test_invalid_json_is_service_error(self, image_bytes):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        client = make_client(handler)

        with pytest.raises(ServiceError, match="Invalid JSON"):
            await client.detect(image_bytes)

    @pytest.mark.anyio
    async def test_close_is_idempotent(self, image_bytes):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        client = make_client(handler)
        await client.detect(image_bytes)

        await client.close()
        await client.close()
