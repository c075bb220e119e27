"""Content Fingerprint - 이미지 바이트 해시.

캐시 키 및 중복 판별 용도입니다. 보안 경계가 아니므로 MD5(128-bit)로 충분합니다.
"""

import hashlib


def fingerprint(raw: bytes) -> str:
    """이미지 바이트의 결정적 digest (32자 hex)."""
    return hashlib.md5(raw, usedforsecurity=False).hexdigest()
