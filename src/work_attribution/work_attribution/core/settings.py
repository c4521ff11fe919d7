from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import (
    DEFAULT_EMPLOYER_PREFIX,
    DEFAULT_HOUR_RATIO_LIMIT,
    DEFAULT_KNOWN_IMPORT_SOURCES,
    DEFAULT_WORK_WEEK_HOURS,
)


@dataclass(frozen=True)
class EcosystemSettings:
    """Static configuration shared by every tenant-bound service."""

    hide_selector_when_possible: bool = True
    auto_assign_primary: bool = True
    enable_quick_switch: bool = True
    known_import_sources: tuple[str, ...] = DEFAULT_KNOWN_IMPORT_SOURCES
    hour_ratio_limit: float = DEFAULT_HOUR_RATIO_LIMIT
    default_work_week: float = DEFAULT_WORK_WEEK_HOURS
    default_employer_prefix: str = DEFAULT_EMPLOYER_PREFIX

    def is_known_import_source(self, source: str | None) -> bool:
        if not source:
            return False
        return source.strip().lower() in {s.lower() for s in self.known_import_sources}

    @classmethod
    def from_module(cls, settings: Any) -> "EcosystemSettings":
        """Build from a settings module such as ``config.development``."""

        sources = getattr(settings, "KNOWN_IMPORT_SOURCES", DEFAULT_KNOWN_IMPORT_SOURCES)
        if isinstance(sources, str):
            sources = [s for s in sources.split(",")]
        return cls(
            hide_selector_when_possible=bool(getattr(settings, "HIDE_SELECTOR_WHEN_POSSIBLE", True)),
            auto_assign_primary=bool(getattr(settings, "AUTO_ASSIGN_PRIMARY", True)),
            enable_quick_switch=bool(getattr(settings, "ENABLE_QUICK_SWITCH", True)),
            known_import_sources=tuple(s.strip().lower() for s in sources if s and s.strip()),
            hour_ratio_limit=float(getattr(settings, "HOUR_RATIO_LIMIT", DEFAULT_HOUR_RATIO_LIMIT)),
            default_work_week=float(getattr(settings, "DEFAULT_WORK_WEEK", DEFAULT_WORK_WEEK_HOURS)),
            default_employer_prefix=str(getattr(settings, "DEFAULT_EMPLOYER_PREFIX", DEFAULT_EMPLOYER_PREFIX)),
        )
