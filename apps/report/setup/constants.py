"""
Report API 정적 상수.

빌드 타임에 결정되며 환경변수로 바뀌지 않는 값만 둡니다.
런타임 설정은 config.Settings 를 사용합니다.
"""

# =============================================================================
# Service Identity
# =============================================================================
SERVICE_NAME = "report-api"
SERVICE_VERSION = "1.0.0"

# =============================================================================
# Logging
# =============================================================================
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

TEXT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 표준 LogRecord 속성 (extra 로 넘어온 필드만 labels 에 담기 위해 제외)
STANDARD_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# WARNING 으로 낮출 서드파티 로거
QUIET_LOGGERS = (
    "uvicorn.access",
    "httpx",
    "httpcore",
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "cloudinary",
    "asyncio",
)

# =============================================================================
# Redaction
# =============================================================================
# Ultralytics / Cloudinary 자격증명, 인증 헤더
SECRET_KEY_FRAGMENTS = ("api_key", "secret", "token", "password", "authorization")
SECRET_PLACEHOLDER = "***REDACTED***"
SECRET_VISIBLE_CHARS = 4
SECRET_MIN_LENGTH = 10

# base64 이미지는 로그에 싣지 않고 길이만 남김
IMAGE_PAYLOAD_KEYS = frozenset({"image", "image_base64", "data_uri"})
