"""Pytest configuration for report tests."""

import base64

import pytest

from report.domain.value_objects import ClassificationVerdict


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for anyio."""
    return "asyncio"


class FakeClock:
    """수동으로 진행시키는 시계."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def image_bytes() -> bytes:
    return b"\xff\xd8\xff\xe0fake-jpeg-payload"


@pytest.fixture
def image_base64(image_bytes: bytes) -> str:
    return base64.b64encode(image_bytes).decode()


@pytest.fixture
def image_data_uri(image_base64: str) -> str:
    return f"data:image/jpeg;base64,{image_base64}"


@pytest.fixture
def detector_response():
    """images[0].results 형식의 detector 응답 생성기."""

    def _build(*detections: tuple[int, float]) -> dict:
        return {
            "images": [
                {"results": [{"class": cls, "confidence": conf} for cls, conf in detections]}
            ]
        }

    return _build


@pytest.fixture
def waste_verdict() -> ClassificationVerdict:
    return ClassificationVerdict.from_confidence(0.9)
