from __future__ import annotations
import io
import sys
from pathlib import Path

import pytest

# Ensure project root import when running without an install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def touch(p: Path, data: bytes = b"") -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data or b"stub")
    return p


def image_bytes(w: int, h: int, fmt: str = "JPEG") -> bytes:
    from PIL import Image
    buf = io.BytesIO()
    Image.new("RGB", (w, h), (12, 34, 56)).save(buf, format=fmt)
    return buf.getvalue()


def library_vdf(*paths) -> str:
    body = "".join(
        f'\t"{i}"\n\t{{\n\t\t"path"\t\t"{Path(p).as_posix()}"\n\t\t"label"\t\t""\n\t}}\n'
        for i, p in enumerate(paths)
    )
    return f'"libraryfolders"\n{{\n{body}}}\n'


def manifest(appid=None, name=None, installdir="Game") -> str:
    lines = []
    if appid is not None:
        lines.append(f'\t"appid"\t\t"{appid}"')
    if name is not None:
        lines.append(f'\t"name"\t\t"{name}"')
    lines.append(f'\t"installdir"\t\t"{installdir}"')
    return '"AppState"\n{\n' + "\n".join(lines) + "\n}\n"


def add_manifest(library: Path, filename: str, text: str) -> Path:
    p = library / "steamapps" / filename
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture
def steam(tmp_path):
    """Steam root with an empty libraryfolders.vdf pointing at itself."""
    root = tmp_path / "Steam"
    (root / "steamapps").mkdir(parents=True)
    (root / "steamapps" / "libraryfolders.vdf").write_text(library_vdf(root), encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    # never read the developer's real settings or Steam install
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.delenv("STEAM_ROOT", raising=False)
    monkeypatch.delenv("GAMESHELF_APP_DIR", raising=False)
