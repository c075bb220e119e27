"""Hosted Asset Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HostedAsset:
    """Asset Host에 업로드된 이미지 참조.

    Attributes:
        secure_url: 공개 URL
        public_id: 삭제 시 사용하는 식별자
    """

    secure_url: str
    public_id: str
