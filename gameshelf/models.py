from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

@dataclass(frozen=True)
class LibraryRoot:
    path: Path

    @property
    def metadata_dir(self) -> Path:
        return self.path / "steamapps"

    @property
    def content_dir(self) -> Path:
        return self.path / "steamapps" / "common"

@dataclass(frozen=True)
class PackageRecord:
    appid: str
    name: str
    installdir: str = ""          # relative to LibraryRoot.content_dir
    manifest: Optional[Path] = None

@dataclass(frozen=True)
class LauncherDescriptor:
    appid: str
    name: str
    exec: str
    icon: Optional[str]
    categories: str = "Game;"

    @property
    def filename(self) -> str:
        return f"steam-{self.appid}.desktop"

@dataclass
class ScanReport:
    roots: List[LibraryRoot] = field(default_factory=list)
    created: List[str] = field(default_factory=list)     # appids written
    previewed: List[str] = field(default_factory=list)   # appids found in dry-run
    skipped: List[str] = field(default_factory=list)     # names filtered out
    failed: List[str] = field(default_factory=list)      # appids whose write failed
    malformed: int = 0
    pruned: List[Path] = field(default_factory=list)
    elapsed: float = 0.0
