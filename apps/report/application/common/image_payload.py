"""Base64 이미지 페이로드 유틸리티.

클라이언트는 순수 base64 또는 data URI(`data:image/<type>;base64,...`)로 이미지를 보냅니다.
"""

from __future__ import annotations

import base64
import binascii
import re

DATA_URI_PREFIX_PATTERN = re.compile(r"^data:image/\w+;base64,")
IMAGE_PAYLOAD_PATTERN = re.compile(r"^(data:image/\w+;base64,)?[A-Za-z0-9+/=]+$")


def strip_data_uri(payload: str) -> str:
    """data URI 프리픽스 제거."""
    return DATA_URI_PREFIX_PATTERN.sub("", payload, count=1)


def is_valid_image_payload(payload: str) -> bool:
    """허용된 base64/data URI 형식인지 확인."""
    return bool(IMAGE_PAYLOAD_PATTERN.match(payload))


def estimate_decoded_size(payload: str) -> int:
    """디코딩 없이 base64 페이로드의 바이트 크기 추정.

    형식이 잘못된 페이로드에도 예외 없이 동작합니다.
    """
    data = strip_data_uri(payload).rstrip()
    padding = len(data) - len(data.rstrip("="))
    return max(len(data) * 3 // 4 - padding, 0)


def decode_image_payload(payload: str) -> bytes:
    """base64/data URI 페이로드를 원본 바이트로 디코딩.

    Raises:
        ValueError: base64 디코딩 실패
    """
    data = strip_data_uri(payload.strip())
    try:
        return base64.b64decode(data + "=" * (-len(data) % 4))
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image payload: {e}") from e
