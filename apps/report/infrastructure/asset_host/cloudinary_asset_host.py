"""Cloudinary Asset Host Adapter.

Cloudinary SDK는 동기 API이므로 스레드에서 실행합니다.
업로드 대기 제한은 SubmitReportCommand 가 적용하고, 같은 값을 SDK HTTP timeout 으로도 전달합니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import cloudinary.exceptions
import cloudinary.uploader

from report.application.common.exceptions import AssetHostError
from report.application.submit.ports import AssetHost
from report.domain.value_objects import HostedAsset

logger = logging.getLogger(__name__)

# 업로드 변환: 너비 800 제한 + 자동 품질
UPLOAD_TRANSFORMATION: list[dict[str, Any]] = [
    {"width": 800, "crop": "limit"},
    {"quality": "auto:good"},
]


class CloudinaryAssetHost(AssetHost):
    """Cloudinary 이미지 호스팅 Adapter."""

    def __init__(
        self,
        cloud_name: str | None,
        api_key: str | None,
        api_secret: str | None,
        folder: str = "reports",
        upload_timeout: float | None = None,
    ):
        """초기화.

        Args:
            cloud_name: Cloudinary cloud 이름
            api_key: Cloudinary API key
            api_secret: Cloudinary API secret
            folder: 업로드 폴더
            upload_timeout: SDK 업로드 요청 timeout (초)
        """
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }
        self._folder = folder
        self._upload_timeout = upload_timeout
        self._pending_cleanups: set[asyncio.Future[None]] = set()

    def _upload_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            **self._credentials,
            "resource_type": "image",
            "folder": self._folder,
            "quality": "auto",
            "format": "jpg",
            "transformation": UPLOAD_TRANSFORMATION,
        }
        if self._upload_timeout is not None:
            options["timeout"] = self._upload_timeout
        return options

    async def upload(self, image_base64: str) -> HostedAsset:
        """base64 이미지를 JPEG 으로 업로드.

        호출자가 대기를 취소해도 스레드의 업로드는 계속되므로,
        뒤늦게 완료된 업로드는 삭제합니다.
        """
        data_uri = f"data:image/jpeg;base64,{image_base64}"
        upload = asyncio.ensure_future(
            asyncio.to_thread(
                cloudinary.uploader.upload,
                data_uri,
                **self._upload_options(),
            )
        )
        try:
            response = await asyncio.shield(upload)
        except asyncio.CancelledError:
            upload.add_done_callback(self._discard_late_upload)
            raise
        except cloudinary.exceptions.Error as e:
            logger.error("cloudinary_upload_failed", extra={"error": str(e)})
            raise AssetHostError(str(e)) from e

        secure_url = response.get("secure_url")
        public_id = response.get("public_id")
        if not secure_url or not public_id:
            raise AssetHostError("Cloudinary response missing secure_url/public_id")

        logger.info(
            "cloudinary_upload_completed",
            extra={"public_id": public_id, "bytes": response.get("bytes")},
        )
        return HostedAsset(secure_url=secure_url, public_id=public_id)

    async def delete(self, public_id: str) -> None:
        """업로드된 이미지 삭제."""
        try:
            response = await asyncio.to_thread(
                cloudinary.uploader.destroy,
                public_id,
                **self._credentials,
            )
        except cloudinary.exceptions.Error as e:
            logger.error(
                "cloudinary_destroy_failed",
                extra={"public_id": public_id, "error": str(e)},
            )
            raise AssetHostError(str(e)) from e

        if response.get("result") not in ("ok", "not found"):
            raise AssetHostError(f"Cloudinary destroy failed: {response.get('result')}")

    def _discard_late_upload(self, upload: asyncio.Future[dict[str, Any]]) -> None:
        if upload.cancelled() or upload.exception() is not None:
            return
        public_id = upload.result().get("public_id")
        if not public_id:
            return

        logger.warning("cloudinary_late_upload_discarded", extra={"public_id": public_id})
        cleanup = asyncio.ensure_future(self._delete_quietly(public_id))
        self._pending_cleanups.add(cleanup)
        cleanup.add_done_callback(self._pending_cleanups.discard)

    async def _delete_quietly(self, public_id: str) -> None:
        try:
            await self.delete(public_id)
        except AssetHostError as e:
            logger.error(
                "cloudinary_late_upload_cleanup_failed",
                extra={"public_id": public_id, "error": e.message},
            )
