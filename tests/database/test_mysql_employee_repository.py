from __future__ import annotations

from datetime import datetime

import pytest

from work_attribution.core.enums import AssignmentType
from work_attribution.core.exceptions import NotFoundError
from work_attribution.employees.model import EmployeeCompanyAssignment
from work_attribution.employees.mysql_employee_repository import MySQLEmployeeRepository


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self._last = None

    def execute(self, sql, params=None):
        self._conn.statements.append(" ".join(sql.split()))
        self._last = sql

    def executemany(self, sql, rows):
        stmt = " ".join(sql.split())
        if self._conn.fail_on and self._conn.fail_on in stmt:
            raise RuntimeError("insert failed")
        self._conn.statements.append(stmt)

    def fetchone(self):
        if "FOR UPDATE" in (self._last or ""):
            return {"employee_id": 10} if self._conn.employee_exists else None
        return None

    def fetchall(self):
        return []

    def close(self):
        pass


class FakeConnection:
    def __init__(self, *, employee_exists=True, fail_on=None):
        self.employee_exists = employee_exists
        self.fail_on = fail_on
        self.statements: list[str] = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, conn):
        self._conn = conn

    def connect(self, *, with_database=True):
        return self._conn


def _assignment(company_id):
    return EmployeeCompanyAssignment(
        employee_id=10,
        company_id=company_id,
        assignment_type=AssignmentType.PROJECT,
        assigned_by="admin",
        assigned_at=datetime(2026, 3, 2, 9, 0),
    )


def test_replace_runs_in_one_committed_transaction():
    conn = FakeConnection()
    repo = MySQLEmployeeRepository(FakeConnectionFactory(conn))

    repo.replace_project_companies(employee_id=10, company_ids=[2, 3], assignments=[_assignment(2), _assignment(3)])

    assert conn.committed and not conn.rolled_back and conn.closed
    assert conn.statements[0].endswith("FOR UPDATE")
    assert any(s.startswith("DELETE FROM employee_project_companies") for s in conn.statements)
    assert any("INSERT INTO employee_company_assignments" in s for s in conn.statements)


def test_failed_audit_insert_rolls_back_everything():
    conn = FakeConnection(fail_on="employee_company_assignments")
    repo = MySQLEmployeeRepository(FakeConnectionFactory(conn))

    with pytest.raises(RuntimeError):
        repo.replace_project_companies(employee_id=10, company_ids=[2], assignments=[_assignment(2)])

    assert conn.rolled_back and not conn.committed and conn.closed


def test_missing_employee_rolls_back():
    conn = FakeConnection(employee_exists=False)
    repo = MySQLEmployeeRepository(FakeConnectionFactory(conn))

    with pytest.raises(NotFoundError):
        repo.replace_project_companies(employee_id=10, company_ids=[], assignments=[])

    assert conn.rolled_back and not conn.committed
