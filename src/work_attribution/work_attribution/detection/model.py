from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional_text


@dataclass(frozen=True)
class DetectionHints:
    """Optional metadata used to infer which company a record belongs to."""

    company_id: Optional[int] = None
    import_source: Optional[str] = None
    project_code: Optional[str] = None
    client_id: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> "DetectionHints":
        """Hints carried by a time record (``NewTimeRecord`` or ``TimeRecord``)."""
        return cls(
            company_id=getattr(record, "assigned_company_id", None),
            import_source=optional_text(getattr(record, "import_source", None)),
            project_code=optional_text(getattr(record, "project_code", None)),
            client_id=optional_text(getattr(record, "client_id", None)),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "DetectionHints":
        data = data or {}
        company_id = data.get("company_id")
        return cls(
            company_id=int(company_id) if company_id not in (None, "") else None,
            import_source=optional_text(data.get("import_source")),
            project_code=optional_text(data.get("project_code")),
            client_id=optional_text(data.get("client_id")),
        )
