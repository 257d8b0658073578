import base64
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from backend.src.models.map import FileData
from backend.src.services import file_staging
from backend.src.services.config import AppConfig
from backend.src.services.errors import DecodeError, InvalidFileNameError, OpenError
from backend.src.services.file_staging import FileStagingService, open_path
from backend.src.services.paths import AppPaths, resolve_paths


@pytest.fixture
def paths(tmp_path: Path) -> AppPaths:
    return resolve_paths(AppConfig(data_dir=tmp_path / "data", cache_dir=tmp_path / "cache"))


def _file(content: bytes = b"hello world", original_name: str = "notes.txt") -> FileData:
    return FileData(
        id="f1",
        name="notes",
        original_name=original_name,
        size=len(content),
        file_type="text/plain",
        content=base64.b64encode(content).decode("ascii"),
    )


def test_open_file_stages_and_opens(paths: AppPaths) -> None:
    opener = Mock()
    service = FileStagingService(paths, opener=opener)

    target = service.open_file(_file())

    expected = (paths.cache_dir / "andromeda_temp_files" / "notes.txt").resolve()
    assert target == expected
    assert target.read_bytes() == b"hello world"
    opener.assert_called_once_with(expected)


def test_staging_overwrites_existing_file(paths: AppPaths) -> None:
    service = FileStagingService(paths, opener=Mock())

    service.stage_file(_file(b"first"))
    target = service.stage_file(_file(b"second"))

    assert target.read_bytes() == b"second"


def test_malformed_base64_raises_decode_error(paths: AppPaths) -> None:
    opener = Mock()
    service = FileStagingService(paths, opener=opener)
    broken = _file().model_copy(update={"content": "not*base64!"})

    with pytest.raises(DecodeError):
        service.open_file(broken)

    opener.assert_not_called()


@pytest.mark.parametrize("name", ["", "..", "../escape.txt", "nested/file.txt", "/etc/passwd"])
def test_unsafe_names_are_rejected(paths: AppPaths, name: str) -> None:
    service = FileStagingService(paths, opener=Mock())

    with pytest.raises(InvalidFileNameError):
        service.stage_file(_file(original_name=name))


def test_opener_failure_propagates(paths: AppPaths) -> None:
    service = FileStagingService(paths, opener=Mock(side_effect=OpenError("no handler")))

    with pytest.raises(OpenError):
        service.open_file(_file())


def test_get_cache_dir(paths: AppPaths) -> None:
    assert FileStagingService(paths).get_cache_dir() == paths.cache_dir


def test_open_path_uses_xdg_open_on_linux(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(file_staging.sys, "platform", "linux")
    monkeypatch.delenv("TERMUX_VERSION", raising=False)

    with patch.object(file_staging.subprocess, "Popen") as popen:
        open_path(tmp_path / "a.txt")

    popen.assert_called_once_with(["xdg-open", str(tmp_path / "a.txt")])


def test_open_path_uses_open_on_macos(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(file_staging.sys, "platform", "darwin")

    with patch.object(file_staging.subprocess, "Popen") as popen:
        open_path(tmp_path / "a.txt")

    popen.assert_called_once_with(["open", str(tmp_path / "a.txt")])


def test_open_path_wraps_launch_failure(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(file_staging.sys, "platform", "linux")

    with patch.object(file_staging.subprocess, "Popen", side_effect=FileNotFoundError("xdg-open")):
        with pytest.raises(OpenError):
            open_path(tmp_path / "a.txt")
