import pytest

import config
from core.errors import ConfigurationError
from core.settings import EnvConfiguration, MappingConfiguration, ReaderSettings, SearchQuery


def test_env_configuration_defaults(monkeypatch):
    for name in ("SWARK_FILE_EXTENSIONS", "SWARK_EXCLUDE_PATTERNS", "SWARK_MAX_FILES"):
        monkeypatch.delenv(name, raising=False)

    cfg = EnvConfiguration()

    assert cfg.get("fileExtensions") == config.DEFAULT_FILE_EXTENSIONS
    assert cfg.get("excludePatterns") == config.DEFAULT_EXCLUDE_PATTERNS
    assert cfg.get("maxFiles") == config.DEFAULT_MAX_FILES


def test_env_configuration_reads_variables(monkeypatch):
    monkeypatch.setenv("SWARK_FILE_EXTENSIONS", "py, ts ,,go")
    monkeypatch.setenv("SWARK_EXCLUDE_PATTERNS", "**/vendor/**")
    monkeypatch.setenv("SWARK_MAX_FILES", "25")

    cfg = EnvConfiguration()

    assert cfg.get("fileExtensions") == ["py", "ts", "go"]
    assert cfg.get("excludePatterns") == ["**/vendor/**"]
    assert cfg.get("maxFiles") == 25


def test_env_configuration_empty_variable_is_empty_list(monkeypatch):
    monkeypatch.setenv("SWARK_FILE_EXTENSIONS", "")
    assert EnvConfiguration().get("fileExtensions") == []


def test_env_configuration_bad_int_falls_back(monkeypatch):
    monkeypatch.setenv("SWARK_MAX_FILES", "lots")
    assert EnvConfiguration().get("maxFiles") == config.DEFAULT_MAX_FILES


def test_env_configuration_custom_section(monkeypatch):
    monkeypatch.setenv("REPO_FILE_EXTENSIONS", "rs")
    assert EnvConfiguration("repo").get("fileExtensions") == ["rs"]


def test_reader_settings_snapshot():
    values = {"fileExtensions": ["py"], "maxFiles": 3}
    settings = ReaderSettings.from_configuration(MappingConfiguration(values))

    values["fileExtensions"].append("ts")

    assert settings.file_extensions == ["py"]
    assert settings.exclude_patterns == []
    assert settings.max_files == 3


def test_reader_settings_wraps_single_string():
    settings = ReaderSettings.from_configuration(
        MappingConfiguration({"fileExtensions": "py", "excludePatterns": "**/dist/**"})
    )

    assert settings.file_extensions == ["py"]
    assert settings.exclude_patterns == ["**/dist/**"]
    assert settings.search_query().include == "**/*.{py}"


def test_reader_settings_rejects_non_list():
    with pytest.raises(ConfigurationError):
        ReaderSettings.from_configuration(MappingConfiguration({"fileExtensions": 42}))


def test_search_query():
    settings = ReaderSettings(file_extensions=["py", " "], exclude_patterns=["**/dist/**"], max_files=5)

    assert settings.search_query() == SearchQuery(
        include="**/*.{py}", exclude="{**/dist/**}", max_results=5
    )


def test_search_query_requires_extensions():
    with pytest.raises(ConfigurationError):
        ReaderSettings(file_extensions=[" "]).search_query()
