"""Tests for configuration and upload admission helpers."""

import pytest

from knowledge_server_core.exceptions import ConfigError, UnsupportedFormatError
from knowledge_server_core.utils.config_utils import ENV_OVERRIDES, read_config
from knowledge_server_core.utils.file_utils import (
    UploadRejected,
    detect_content_type,
    validate_file_type,
    validate_upload,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(ENV_OVERRIDES) + ["KNOWLEDGE_SERVER_CONFIG"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "server:\n"
        "  port: 8080\n"
        "ocr:\n"
        "  language: deu\n",
        encoding="utf-8",
    )
    return path


class TestReadConfig:
    def test_file_values_merge_over_defaults(self, config_file):
        config = read_config(config_file)

        assert config["server"]["port"] == 8080
        assert config["server"]["host"] == "0.0.0.0"
        assert config["ocr"]["language"] == "deu"
        assert config["ocr"]["provider"] == "tesseract"
        assert config["database"]["backend"] == "memory"

    def test_environment_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("GOOGLE_API_KEY", "secret")

        config = read_config(config_file)

        assert config["server"]["port"] == 9000
        assert config["llm"]["api_key"] == "secret"

    def test_database_url_selects_postgres(self, config_file, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/knowledge")

        config = read_config(config_file)

        assert config["database"]["backend"] == "postgres"
        assert config["database"]["dsn"] == "postgresql://localhost/knowledge"

    def test_config_path_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("KNOWLEDGE_SERVER_CONFIG", str(config_file))
        assert read_config()["server"]["port"] == 8080

    def test_invalid_port(self, config_file, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ConfigError):
            read_config(config_file)

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ConfigError):
            read_config(tmp_path / "missing.yaml")

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            read_config(path)


class TestUploadAdmission:
    UPLOAD = {"max_size_mb": 1, "allowed_extensions": [".pdf", ".docx"]}

    def test_accepts_and_strips_directories(self):
        assert validate_upload(b"x", "/tmp/uploads/Report.PDF", self.UPLOAD) == "Report.PDF"

    def test_oversized(self):
        with pytest.raises(UploadRejected):
            validate_upload(b"0" * (1024 * 1024 + 1), "big.pdf", self.UPLOAD)

    def test_missing_filename(self):
        with pytest.raises(UploadRejected):
            validate_upload(b"x", "", self.UPLOAD)

    def test_extension_not_allowed(self):
        with pytest.raises(UnsupportedFormatError):
            validate_upload(b"x", "notes.txt", self.UPLOAD)

    def test_empty_allow_list_admits_anything(self):
        assert validate_upload(b"x", "notes.txt", {"max_size_mb": 1}) == "notes.txt"

    def test_validate_file_type(self):
        assert validate_file_type("a.DOCX", [".docx"])
        assert not validate_file_type("a.doc", [".docx"])
        assert not validate_file_type("", [".docx"])

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("a.pdf", "application/pdf"),
            ("a.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
            ("a.bin", "application/octet-stream"),
        ],
    )
    def test_detect_content_type(self, name, expected):
        assert detect_content_type(name) == expected
