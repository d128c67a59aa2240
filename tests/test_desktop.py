import os

import pytest

from gameshelf.desktop import (build_descriptor, desktop_escape, prune_stale,
                               render_descriptor, write_descriptor)
from gameshelf.errors import WriteError
from gameshelf.models import PackageRecord
from conftest import touch

GAME = PackageRecord(appid="100", name="Game One", installdir="GameOne")


def test_render_with_icon(tmp_path):
    d = build_descriptor(GAME, tmp_path / "100_icon.png")
    assert d.filename == "steam-100.desktop"
    assert render_descriptor(d) == (
        "[Desktop Entry]\n"
        "Name=Game One\n"
        "Exec=steam steam://rungameid/100\n"
        f"Icon={tmp_path / '100_icon.png'}\n"
        "Terminal=false\n"
        "Type=Application\n"
        "Categories=Game;\n"
    )


def test_render_without_icon_has_no_icon_line():
    text = render_descriptor(build_descriptor(GAME, None))
    assert "Icon=" not in text
    assert text.startswith("[Desktop Entry]\nName=Game One\nExec=steam steam://rungameid/100\nTerminal=false\n")
    assert text.endswith("Categories=Game;\n")


def test_name_is_escaped():
    assert desktop_escape("a\\b\nc\td") == "a\\\\b\\nc\\td"
    text = render_descriptor(build_descriptor(PackageRecord("5", "Two\nLines"), None))
    assert "Name=Two\\nLines\n" in text


def test_write_is_idempotent(tmp_path):
    d = build_descriptor(GAME, None)
    first = write_descriptor(d, tmp_path, dry_run=False)
    content = first.read_bytes()
    second = write_descriptor(d, tmp_path, dry_run=False)
    assert first == second == tmp_path / "steam-100.desktop"
    assert second.read_bytes() == content
    assert os.listdir(tmp_path) == ["steam-100.desktop"]


def test_dry_run_writes_nothing(tmp_path):
    assert write_descriptor(build_descriptor(GAME, None), tmp_path, dry_run=True) is None
    assert os.listdir(tmp_path) == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(WriteError):
        write_descriptor(build_descriptor(GAME, None), tmp_path / "nope", dry_run=False)


def test_unwritable_file_raises(tmp_path, monkeypatch):
    def refuse(*a, **kw):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("gameshelf.desktop.open", refuse, raising=False)
    with pytest.raises(WriteError) as exc:
        write_descriptor(build_descriptor(GAME, None), tmp_path, dry_run=False)
    assert exc.value.reason == "Permission denied"
    assert exc.value.path == tmp_path / "steam-100.desktop"


def test_prune_stale_keeps_current_and_foreign_files(tmp_path):
    touch(tmp_path / "steam-100.desktop")
    old = touch(tmp_path / "steam-999.desktop")
    touch(tmp_path / "firefox.desktop")
    removed = prune_stale(tmp_path, ["steam-100.desktop"])
    assert removed == [old]
    assert sorted(os.listdir(tmp_path)) == ["firefox.desktop", "steam-100.desktop"]


def test_prune_missing_dir(tmp_path):
    assert prune_stale(tmp_path / "nope", []) == []
