import os
from pathlib import Path

import pytest

from identicon.writer import display_path, output_path, save_image


def test_output_path_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert output_path("hoyups").resolve() == (tmp_path / "hoyups.png").resolve()


def test_output_path_in_directory(tmp_path: Path) -> None:
    assert output_path("hoyups", tmp_path) == tmp_path / "hoyups.png"


def test_output_path_empty_input(tmp_path: Path) -> None:
    assert output_path("", tmp_path) == tmp_path / ".png"


def test_save_image_writes_bytes(tmp_path: Path) -> None:
    path = save_image(b"abc", "hoyups", tmp_path)
    assert path == tmp_path / "hoyups.png"
    assert path.read_bytes() == b"abc"


def test_save_image_overwrites(tmp_path: Path) -> None:
    save_image(b"first", "hoyups", tmp_path)
    path = save_image(b"second", "hoyups", tmp_path)
    assert path.read_bytes() == b"second"


def test_save_image_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        save_image(b"abc", "hoyups", tmp_path / "missing")


def test_display_path_escapes_undecodable_bytes(tmp_path: Path) -> None:
    path = output_path(os.fsdecode(b"\xff"), tmp_path)
    assert display_path(path) == f"{tmp_path}/\\xff.png"


def test_display_path_plain() -> None:
    assert display_path(Path("out/hoyups.png")) == "out/hoyups.png"
