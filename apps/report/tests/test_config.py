"""Config Tests - 환경변수 기반 Settings 테스트."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from report.setup.config import Settings


class TestSettingsDefaults:
    """기본값 테스트."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.detector_timeout == 30.0
        assert settings.upload_timeout == 15.0
        assert settings.verdict_cache_ttl == 300
        assert settings.max_image_bytes == 5 * 1024 * 1024
        assert settings.min_submit_confidence == 0.7
        assert settings.detector_model_version == "YOLOv8"
        assert settings.detector_api_key is None
        assert settings.auth_disabled is False


class TestSettingsFromEnv:
    """환경변수 매핑 테스트."""

    def test_unprefixed_provider_keys(self):
        """ULTRALYTICS_API_KEY / CLOUDINARY_* 는 접두사 없이도 인식."""
        env = {
            "ULTRALYTICS_API_KEY": "ultra-key",
            "CLOUDINARY_CLOUD_NAME": "demo",
            "CLOUDINARY_API_KEY": "cloud-key",
            "CLOUDINARY_API_SECRET": "cloud-secret",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.detector_api_key == "ultra-key"
        assert settings.cloudinary_cloud_name == "demo"
        assert settings.cloudinary_api_secret.get_secret_value() == "cloud-secret"

    def test_secrets_are_masked_in_repr(self):
        with patch.dict(os.environ, {"ULTRALYTICS_API_KEY": "ultra-key"}, clear=True):
            settings = Settings(_env_file=None)

        assert "ultra-key" not in repr(settings)

    def test_prefixed_overrides(self):
        env = {
            "REPORT_DETECTOR_TIMEOUT": "10",
            "REPORT_VERDICT_CACHE_TTL": "60",
            "REPORT_MIN_SUBMIT_CONFIDENCE": "0.8",
            "REPORT_AUTH_DISABLED": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.detector_timeout == 10.0
        assert settings.verdict_cache_ttl == 60
        assert settings.min_submit_confidence == 0.8
        assert settings.auth_disabled is True

    def test_empty_api_key_is_none(self):
        with patch.dict(os.environ, {"ULTRALYTICS_API_KEY": ""}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.detector_api_key is None

    def test_cors_origins_parsed(self):
        env = {"REPORT_CORS_ORIGINS_STR": "https://a.example, https://b.example,"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_out_of_range_confidence_rejected(self):
        with patch.dict(os.environ, {"REPORT_MIN_SUBMIT_CONFIDENCE": "1.5"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)
