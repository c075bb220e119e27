"""Report Type Enum."""

from enum import Enum


class ReportType(str, Enum):
    """신고 유형.

    목록에 없는 유형도 그대로 저장되며 포인트는 기본값을 받습니다.
    """

    STANDARD = "standard"
    HAZARDOUS = "hazardous"
    LARGE = "large"
