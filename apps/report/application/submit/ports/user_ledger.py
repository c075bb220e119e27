"""User Ledger Port - 사용자 포인트 원장."""

from __future__ import annotations

from abc import ABC, abstractmethod


class UserLedger(ABC):
    """사용자 신고 수/포인트 원장 Port."""

    @abstractmethod
    async def award(self, user_id: str, points: int) -> None:
        """신고 수 +1, 포인트 +points 를 원자적으로 반영."""
        raise NotImplementedError
