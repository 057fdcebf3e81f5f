import pytest
from pydantic import ValidationError

from docanalyzer.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_text_extractor(self) -> None:
        s = Settings()
        assert s.text_extractor == "placeholder"

    def test_default_max_upload_size(self) -> None:
        s = Settings()
        assert s.max_upload_size_bytes == 10 * 1024 * 1024

    def test_default_allowed_file_types(self) -> None:
        s = Settings()
        assert s.allowed_file_types == [
            "application/pdf",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "image/jpeg",
            "image/png",
        ]


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_max_upload_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_SIZE_BYTES", "2048")
        s = Settings()
        assert s.max_upload_size_bytes == 2048

    def test_loads_allowed_file_types_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_FILE_TYPES", '["application/pdf"]')
        s = Settings()
        assert s.allowed_file_types == ["application/pdf"]


class TestSettingsValidation:
    def test_invalid_max_upload_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_SIZE_BYTES", "ten megabytes")
        with pytest.raises(ValidationError):
            Settings()
