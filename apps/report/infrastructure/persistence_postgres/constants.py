"""Database schema and table constants.

PostgreSQL 스키마 및 테이블 관련 상수들을 정의합니다.
"""

# =============================================================================
# Schema Names
# =============================================================================
REPORT_SCHEMA = "report"

# =============================================================================
# Table Names
# =============================================================================
REPORTS_TABLE = "reports"
USER_LEDGER_TABLE = "user_ledger"
