"""Single Flight - 동일 키 동시 요청 병합.

같은 이미지가 동시에 제출되어도 detector 호출은 한 번만 발생합니다.
첫 요청(leader)만 실제 호출을 수행하고 나머지(follower)는 그 결과를 공유합니다.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default_cancelled_error() -> Exception:
    return RuntimeError("in-flight call was cancelled")


class SingleFlight(Generic[T]):
    """키 단위 in-flight 호출 병합기.

    이벤트 루프 단위로 동작합니다 (asyncio.Future는 루프에 귀속).
    """

    def __init__(
        self, cancelled_error: Callable[[], Exception] = _default_cancelled_error
    ) -> None:
        """초기화.

        Args:
            cancelled_error: leader 취소 시 follower 에게 전달할 예외 생성기
        """
        self._calls: dict[str, asyncio.Future[T]] = {}
        self._cancelled_error = cancelled_error

    def in_flight(self, key: str) -> bool:
        """키에 대한 호출이 진행 중인지 여부."""
        return key in self._calls

    async def do(self, key: str, fn: Callable[[], Awaitable[T]]) -> tuple[T, bool]:
        """키에 대해 fn 을 한 번만 실행.

        Returns:
            (결과, leader 여부)
        """
        existing = self._calls.get(key)
        if existing is not None:
            logger.debug("single_flight_joined", extra={"key": key})
            return await asyncio.shield(existing), False

        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._calls[key] = future
        try:
            result = await fn()
        except asyncio.CancelledError:
            # leader 취소가 follower 워크플로우까지 취소하지 않도록 예외로 전달
            future.set_exception(self._cancelled_error())
            future.exception()
            raise
        except Exception as exc:
            future.set_exception(exc)
            future.exception()
            raise
        else:
            future.set_result(result)
            return result, True
        finally:
            self._calls.pop(key, None)
