import pytest

from core.errors import ConfigurationError, NoFilesFoundError, ValidationError
from core.settings import MappingConfiguration
from core.telemetry import LoggingTelemetry
from tools import read_repository as read_repository_tool


async def _char_counter(text: str) -> int:
    return len(text)


def _project(root):
    (root / "src").mkdir()
    (root / "src" / "a.py").write_text("a" * 10, encoding="utf-8")
    (root / "src" / "b.ts").write_text("b" * 500, encoding="utf-8")
    (root / "src" / "c.py").write_text("c" * 10, encoding="utf-8")
    (root / "notes.md").write_text("ignored", encoding="utf-8")


def _register(dummy_mcp, telemetry, **config):
    values = {"fileExtensions": ["py", "ts"], "excludePatterns": [], "maxFiles": 100}
    values.update(config)
    read_repository_tool.register(
        dummy_mcp,
        telemetry=telemetry,
        token_counter=_char_counter,
        configuration=MappingConfiguration(values),
    )
    return dummy_mcp.tools["read_repository"]


@pytest.mark.asyncio
async def test_read_repository_applies_budget(monkeypatch, tmp_path, dummy_mcp):
    _project(tmp_path)
    monkeypatch.setattr(read_repository_tool, "PROJECT_ROOT", tmp_path)
    telemetry = LoggingTelemetry()
    fn = _register(dummy_mcp, telemetry)

    out = await fn(root=".", max_tokens=200)

    assert [f["path"] for f in out["files"]] == ["src/a.py", "src/c.py"]
    assert out["files"][0] == {"path": "src/a.py", "language_id": "python", "content": "a" * 10}
    assert out["total_files"] == 3
    assert out["languages"] == {"python": 2}
    assert out["total_tokens"] <= 200
    assert out["messages"] == ["Processing 2/3 files due to LLM token limit"]
    assert [e.name for e in telemetry.events] == ["filesProcessed"]


@pytest.mark.asyncio
async def test_read_repository_rejects_non_positive_budget(dummy_mcp):
    fn = _register(dummy_mcp, LoggingTelemetry())

    with pytest.raises(ValidationError):
        await fn(root=".", max_tokens=0)


@pytest.mark.asyncio
async def test_read_repository_no_files(monkeypatch, tmp_path, dummy_mcp):
    (tmp_path / "only.md").write_text("x", encoding="utf-8")
    monkeypatch.setattr(read_repository_tool, "PROJECT_ROOT", tmp_path)
    telemetry = LoggingTelemetry()
    fn = _register(dummy_mcp, telemetry)

    with pytest.raises(NoFilesFoundError):
        await fn(root=".", max_tokens=100)

    assert [e.name for e in telemetry.events] == ["noFilesFound"]


@pytest.mark.asyncio
async def test_read_repository_missing_extensions(monkeypatch, tmp_path, dummy_mcp):
    monkeypatch.setattr(read_repository_tool, "PROJECT_ROOT", tmp_path)
    fn = _register(dummy_mcp, LoggingTelemetry(), fileExtensions=[])

    with pytest.raises(ConfigurationError):
        await fn(root=".", max_tokens=100)
