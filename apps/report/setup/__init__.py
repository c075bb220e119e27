"""Report 서비스 설정 (config, logging, tracing, DI)."""
