from __future__ import annotations

from enum import Enum


class CompanyType(str, Enum):
    """Kind of legal entity inside a tenant."""

    EMPLOYER = "employer"
    PROJECT = "project"


class AssignmentType(str, Enum):
    PRIMARY = "primary"
    PROJECT = "project"


class TimeRecordStatus(str, Enum):
    """Lifecycle of a time record as stored."""

    DRAFT = "draft"
    APPROVED = "approved"
    PROCESSED = "processed"
