from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .models import PackageRecord

DEFAULT_SKIP_KEYWORDS: Tuple[str, ...] = (
    "Proton",
    "Steam Linux Runtime",
    "Steamworks",
    "Common Redistributables",
    "SteamVR",
    "Dedicated Server",
    "Soundtrack",
)

# 480 is Spacewar, the Steamworks SDK test app
DEFAULT_SKIP_IDS: Tuple[str, ...] = ("480",)

@dataclass(frozen=True)
class SkipRules:
    keywords: Tuple[str, ...] = DEFAULT_SKIP_KEYWORDS
    app_ids: Tuple[str, ...] = DEFAULT_SKIP_IDS

    @classmethod
    def build(cls, keywords: Optional[Iterable[str]] = None,
              app_ids: Optional[Iterable[str]] = None) -> "SkipRules":
        return cls(
            keywords=DEFAULT_SKIP_KEYWORDS if keywords is None else tuple(keywords),
            app_ids=DEFAULT_SKIP_IDS if app_ids is None else tuple(app_ids),
        )

def parse_csv(text: str) -> Tuple[str, ...]:
    return tuple(s.strip() for s in text.split(",") if s.strip())

def should_skip(record: PackageRecord, keywords: Iterable[str], app_ids: Iterable[str]) -> bool:
    """True for runtimes, tools, soundtracks and other non-game apps.

    Keywords match as case-insensitive substrings anywhere in the name
    ("Proton" also hits "Protonmail Client"); app ids must match exactly.
    """
    if record.appid in set(app_ids):
        return True
    name = record.name.lower()
    return any(k and k.lower() in name for k in keywords)

def is_skipped(record: PackageRecord, rules: SkipRules) -> bool:
    return should_skip(record, rules.keywords, rules.app_ids)
