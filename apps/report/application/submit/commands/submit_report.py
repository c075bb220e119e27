"""Submit Report Command - 신고 제출 워크플로우.

단계:
1. Validating   - 로컬 검증 (외부 호출 없음)
2. Classifying  - AI 폐기물 판정 (force_submit 이면 건너뜀)
3. Hosting      - Asset Host 업로드 (15초 제한)
4. Persisting   - 신고 저장 (실패 시 업로드된 이미지 보상 삭제)
5. Awarding     - 사용자 포인트 지급 (실패해도 신고는 유지)
6. Completed

어떤 단계도 자동 재시도하지 않습니다.
"""

from __future__ import annotations

import asyncio
import logging

from report.application.classify.services import ClassificationGateway
from report.application.common.exceptions import (
    ClassificationServiceError,
    RejectionCode,
    SubmissionRejectedError,
)
from report.application.common.image_payload import strip_data_uri
from report.application.submit.dto import (
    SubmissionWorkflow,
    SubmitReportRequest,
    SubmitReportResult,
)
from report.application.submit.ports import AssetHost, ReportStore, UserLedger
from report.application.submit.services import PayloadValidator, build_report
from report.domain.entities import Report
from report.domain.enums import SubmissionState
from report.domain.exceptions import ReportValidationError
from report.domain.services import PointsPolicy
from report.domain.value_objects import ClassificationVerdict, HostedAsset

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_TIMEOUT = 15.0
DEFAULT_MIN_SUBMIT_CONFIDENCE = 0.7


class SubmitReportCommand:
    """신고 제출 Command.

    분류, 이미지 호스팅, 신고 저장, 포인트 지급을 하나의 논리적 작업으로 수행합니다.
    실패는 모두 SubmissionRejectedError 로 전달됩니다.
    """

    def __init__(
        self,
        gateway: ClassificationGateway,
        asset_host: AssetHost,
        report_store: ReportStore,
        user_ledger: UserLedger,
        validator: PayloadValidator | None = None,
        points_policy: PointsPolicy | None = None,
        upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT,
        min_confidence: float = DEFAULT_MIN_SUBMIT_CONFIDENCE,
    ):
        """초기화.

        Args:
            gateway: 분류 게이트웨이
            asset_host: 이미지 호스팅
            report_store: 신고 저장소
            user_ledger: 사용자 포인트 원장
            validator: 페이로드 검증기
            points_policy: 유형별 포인트 정책
            upload_timeout: 업로드 대기 제한 (초)
            min_confidence: 제출 허용 최소 신뢰도
        """
        self._gateway = gateway
        self._asset_host = asset_host
        self._report_store = report_store
        self._user_ledger = user_ledger
        self._validator = validator or PayloadValidator()
        self._points_policy = points_policy or PointsPolicy()
        self._upload_timeout = upload_timeout
        self._min_confidence = min_confidence

    async def execute(self, request: SubmitReportRequest) -> SubmitReportResult:
        """신고 제출 실행.

        Raises:
            SubmissionRejectedError: 어느 단계에서든 거절된 경우
        """
        workflow = SubmissionWorkflow(image=request.image, force_submit=request.force_submit)

        try:
            result = await self._run(request, workflow)
        except SubmissionRejectedError as e:
            workflow.reject()
            logger.warning(
                "report_submission_rejected",
                extra={
                    "user_id": request.user_id,
                    "code": e.code.value,
                    "stage": workflow.history[-1].value if workflow.history else None,
                    "reason": e.message,
                },
            )
            raise
        except Exception as e:
            workflow.reject()
            logger.exception("report_submission_failed", extra={"user_id": request.user_id})
            raise SubmissionRejectedError(
                RejectionCode.INTERNAL_SERVER_ERROR,
                "Internal server error",
                error=str(e),
            ) from e

        logger.info(
            "report_submitted",
            extra={
                "user_id": request.user_id,
                "report_id": str(result.report.id),
                "report_type": result.report.report_type,
                "points_earned": result.points_earned,
                "classified": result.classification is not None,
            },
        )
        return result

    async def _run(
        self,
        request: SubmitReportRequest,
        workflow: SubmissionWorkflow,
    ) -> SubmitReportResult:
        # 1. Validating
        self._validator.validate(request)

        # 2. Classifying
        if not request.force_submit:
            workflow.advance(SubmissionState.CLASSIFYING)
            workflow.verdict = await self._classify(request.image)
        else:
            logger.info("classification_skipped", extra={"user_id": request.user_id})

        # 3. Hosting
        workflow.advance(SubmissionState.HOSTING)
        workflow.asset = await self._host(request.image)

        # 4. Persisting
        workflow.advance(SubmissionState.PERSISTING)
        report = await self._persist(request, workflow.asset, workflow.verdict)
        workflow.report_id = report.id

        # 5. Awarding points
        workflow.advance(SubmissionState.AWARDING)
        points = self._points_policy.points_for(report.report_type)
        await self._award(request.user_id, points)

        workflow.advance(SubmissionState.COMPLETED)
        return SubmitReportResult(
            report=report,
            points_earned=points,
            classification=workflow.verdict,
        )

    async def _classify(self, image: str) -> ClassificationVerdict:
        try:
            verdict = await self._gateway.classify(image)
        except ClassificationServiceError as e:
            raise SubmissionRejectedError(
                RejectionCode.SERVICE_UNAVAILABLE,
                "Waste verification service unavailable",
                error=e.message,
            ) from e

        if not verdict.is_waste:
            raise SubmissionRejectedError(
                RejectionCode.NOT_WASTE,
                "Image does not show recognizable waste",
                classification=verdict.to_dict(),
            )
        if verdict.confidence < self._min_confidence:
            raise SubmissionRejectedError(
                RejectionCode.LOW_CONFIDENCE,
                "Low confidence in waste detection",
                classification=verdict.to_dict(),
            )
        return verdict

    async def _host(self, image: str) -> HostedAsset:
        try:
            return await asyncio.wait_for(
                self._asset_host.upload(strip_data_uri(image)),
                timeout=self._upload_timeout,
            )
        except asyncio.TimeoutError as e:
            raise SubmissionRejectedError(
                RejectionCode.CLOUDINARY_TIMEOUT,
                "Image upload timed out",
            ) from e
        except Exception as e:
            raise SubmissionRejectedError(
                RejectionCode.CLOUDINARY_ERROR,
                "Image upload failed",
                error=str(e),
            ) from e

    async def _persist(
        self,
        request: SubmitReportRequest,
        asset: HostedAsset,
        verdict: ClassificationVerdict | None,
    ) -> Report:
        try:
            report = build_report(request, asset, verdict)
            return await self._report_store.save(report)
        except ReportValidationError as e:
            await self._compensate(asset)
            raise SubmissionRejectedError(
                RejectionCode.VALIDATION_ERROR,
                "Validation Error",
                error=e.message,
            ) from e
        except Exception as e:
            await self._compensate(asset)
            raise SubmissionRejectedError(
                RejectionCode.INTERNAL_SERVER_ERROR,
                "Internal server error",
                error=str(e),
            ) from e

    async def _compensate(self, asset: HostedAsset) -> None:
        """저장 실패 시 업로드된 이미지 삭제 (best-effort)."""
        try:
            await self._asset_host.delete(asset.public_id)
            logger.info("hosted_asset_compensated", extra={"public_id": asset.public_id})
        except Exception as e:
            logger.error(
                "hosted_asset_compensation_failed",
                extra={"public_id": asset.public_id, "error": str(e)},
            )

    async def _award(self, user_id: str, points: int) -> None:
        """포인트 지급. 실패는 로깅만 하고 신고는 유지합니다."""
        try:
            await self._user_ledger.award(user_id, points)
        except Exception as e:
            logger.error(
                "user_ledger_update_failed",
                extra={"user_id": user_id, "points": points, "error": str(e)},
            )
