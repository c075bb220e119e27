"""Report Dependencies - FastAPI Dependency Injection."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from report.application.classify.ports import DetectorClient, VerdictCache
from report.application.classify.services import ClassificationGateway
from report.application.submit.commands import SubmitReportCommand
from report.application.submit.ports import AssetHost, ReportStore, UserLedger
from report.application.submit.services import PayloadValidator
from report.infrastructure.asset_host import CloudinaryAssetHost
from report.infrastructure.cache import InMemoryVerdictCache
from report.infrastructure.detector import UltralyticsDetectorClient
from report.infrastructure.persistence_postgres.adapters import SqlaReportStore, SqlaUserLedger
from report.infrastructure.persistence_postgres.session import get_db_session
from report.setup.config import Settings, get_settings

# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies (프로세스 단위 싱글톤)
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_detector_client() -> DetectorClient:
    """Detector Client 인스턴스 반환."""
    settings = get_settings()
    return UltralyticsDetectorClient(
        api_key=settings.detector_api_key,
        model=settings.detector_model,
        endpoint=settings.detector_url,
        image_size=settings.detector_image_size,
        confidence=settings.detector_confidence,
        iou=settings.detector_iou,
        timeout=settings.detector_timeout,
    )


@lru_cache
def get_verdict_cache() -> VerdictCache:
    """Verdict Cache 인스턴스 반환."""
    return InMemoryVerdictCache()


@lru_cache
def get_classification_gateway() -> ClassificationGateway:
    """Classification Gateway 인스턴스 반환.

    캐시와 single-flight 상태를 모든 요청이 공유합니다.
    """
    settings = get_settings()
    return ClassificationGateway(
        detector=get_detector_client(),
        cache=get_verdict_cache(),
        timeout=settings.detector_timeout,
        cache_ttl=settings.verdict_cache_ttl,
        model_version=settings.detector_model_version,
    )


@lru_cache
def get_asset_host() -> AssetHost:
    """Asset Host 인스턴스 반환."""
    settings = get_settings()
    return CloudinaryAssetHost(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=(
            settings.cloudinary_api_key.get_secret_value()
            if settings.cloudinary_api_key
            else None
        ),
        api_secret=(
            settings.cloudinary_api_secret.get_secret_value()
            if settings.cloudinary_api_secret
            else None
        ),
        folder=settings.cloudinary_folder,
        upload_timeout=settings.upload_timeout,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Persistence Dependencies (요청 단위)
# ─────────────────────────────────────────────────────────────────────────────

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_report_store(session: SessionDep) -> ReportStore:
    """Report Store 인스턴스 반환."""
    return SqlaReportStore(session)


def get_user_ledger(session: SessionDep) -> UserLedger:
    """User Ledger 인스턴스 반환."""
    return SqlaUserLedger(session)


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands)
# ─────────────────────────────────────────────────────────────────────────────


def get_submit_command(
    gateway: Annotated[ClassificationGateway, Depends(get_classification_gateway)],
    asset_host: Annotated[AssetHost, Depends(get_asset_host)],
    report_store: Annotated[ReportStore, Depends(get_report_store)],
    user_ledger: Annotated[UserLedger, Depends(get_user_ledger)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SubmitReportCommand:
    """Submit Report Command 인스턴스 반환."""
    return SubmitReportCommand(
        gateway=gateway,
        asset_host=asset_host,
        report_store=report_store,
        user_ledger=user_ledger,
        validator=PayloadValidator(max_image_bytes=settings.max_image_bytes),
        upload_timeout=settings.upload_timeout,
        min_confidence=settings.min_submit_confidence,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
GatewayDep = Annotated[ClassificationGateway, Depends(get_classification_gateway)]
SubmitCommandDep = Annotated[SubmitReportCommand, Depends(get_submit_command)]
