"""
Report API 로깅 설정 (ECS JSON).

stdout JSON → Fluent Bit → Elasticsearch.
- extra= 로 넘긴 필드는 labels 아래에 모임
- 자격증명은 앞뒤 4자만 남기고 가림
- base64 이미지 페이로드는 길이만 기록
- OpenTelemetry 스팬 안에서는 trace.id / span.id 포함
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace

from report.setup.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ECS_VERSION,
    ENV_KEY_ENVIRONMENT,
    ENV_KEY_LOG_FORMAT,
    ENV_KEY_LOG_LEVEL,
    IMAGE_PAYLOAD_KEYS,
    QUIET_LOGGERS,
    SECRET_KEY_FRAGMENTS,
    SECRET_MIN_LENGTH,
    SECRET_PLACEHOLDER,
    SECRET_VISIBLE_CHARS,
    SERVICE_NAME,
    SERVICE_VERSION,
    STANDARD_RECORD_ATTRS,
    TEXT_DATE_FORMAT,
    TEXT_LOG_FORMAT,
)


def _redact_value(key: str, value: Any) -> Any:
    lowered = key.lower()

    if any(fragment in lowered for fragment in SECRET_KEY_FRAGMENTS):
        text = "" if value is None else str(value)
        if len(text) <= SECRET_MIN_LENGTH:
            return SECRET_PLACEHOLDER
        return f"{text[:SECRET_VISIBLE_CHARS]}...{text[-SECRET_VISIBLE_CHARS:]}"

    if lowered in IMAGE_PAYLOAD_KEYS and isinstance(value, str):
        return f"<image payload: {len(value)} chars>"

    if isinstance(value, dict):
        return redact_labels(value)
    if isinstance(value, (list, tuple)):
        return [redact_labels(item) if isinstance(item, dict) else item for item in value]
    return value


def redact_labels(labels: dict[str, Any]) -> dict[str, Any]:
    """로그 labels 에서 자격증명/이미지 페이로드 제거 (중첩 dict 포함)."""
    return {key: _redact_value(key, value) for key, value in labels.items()}


class ECSJsonFormatter(logging.Formatter):
    """Elastic Common Schema JSON 포매터."""

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = DEFAULT_ENVIRONMENT,
    ):
        super().__init__()
        self._service = {
            "service.name": service_name,
            "service.version": service_version,
            "service.environment": environment,
        }

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            "@timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "message": record.getMessage(),
            "ecs.version": ECS_VERSION,
            **self._service,
        }
        document.update(self._trace_context())

        if record.exc_info and record.exc_info[0] is not None:
            document["error.type"] = record.exc_info[0].__name__
            document["error.message"] = str(record.exc_info[1])
            document["error.stack_trace"] = self.formatException(record.exc_info)

        labels = {
            key: value
            for key, value in record.__dict__.items()
            if key not in STANDARD_RECORD_ATTRS and not key.startswith("_")
        }
        if labels:
            document["labels"] = redact_labels(labels)

        return json.dumps(document, ensure_ascii=False, default=str)

    @staticmethod
    def _trace_context() -> dict[str, str]:
        context = trace.get_current_span().get_span_context()
        if not context.is_valid:
            return {}
        return {
            "trace.id": format(context.trace_id, "032x"),
            "span.id": format(context.span_id, "016x"),
        }


def configure_logging(
    service_name: str = SERVICE_NAME,
    service_version: str = SERVICE_VERSION,
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """루트 로거를 stdout 핸들러 하나로 재설정.

    LOG_LEVEL, LOG_FORMAT(json|text), ENVIRONMENT 환경변수를 따릅니다.
    """
    level_name = (log_level or os.getenv(ENV_KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    if json_format is None:
        json_format = os.getenv(ENV_KEY_LOG_FORMAT, DEFAULT_LOG_FORMAT).lower() == "json"

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(
            ECSJsonFormatter(
                service_name=service_name,
                service_version=service_version,
                environment=os.getenv(ENV_KEY_ENVIRONMENT, DEFAULT_ENVIRONMENT),
            )
        )
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT, datefmt=TEXT_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
