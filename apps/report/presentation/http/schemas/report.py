"""Report HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReportSubmitRequest(BaseModel):
    """신고 제출 요청 스키마.

    필수 필드 검증은 SubmitReportCommand 가 수행합니다 (MISSING_FIELDS 코드 제공).
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, description="신고 제목")
    image: str | None = Field(default=None, description="base64 이미지 (data URI 허용)")
    details: str | None = Field(default=None, description="상세 설명")
    address: str | None = Field(default=None, description="주소")
    latitude: float | str | None = Field(default=None, description="위도")
    longitude: float | str | None = Field(default=None, description="경도")
    photo_timestamp: str | None = Field(
        default=None,
        alias="photoTimestamp",
        description="촬영 시각 (ISO 8601, 미지정 시 현재 시각)",
    )
    report_type: str | None = Field(
        default=None,
        alias="reportType",
        description="신고 유형 (standard, hazardous, large)",
        examples=["standard", "hazardous", "large"],
    )
    force_submit: bool = Field(
        default=False,
        alias="forceSubmit",
        description="AI 검증 건너뛰기",
    )


class ClassifyTestRequest(BaseModel):
    """진단용 분류 요청 스키마."""

    image: str | None = Field(default=None, description="base64 이미지 (data URI 허용)")
