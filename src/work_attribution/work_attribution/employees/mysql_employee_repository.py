from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, in_clause
from .model import Employee, EmployeeCompanyAssignment
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _project_ids(cur, employee_ids: Sequence[int]) -> dict[int, tuple[int, ...]]:
        if not employee_ids:
            return {}
        cur.execute(
            f"""
            SELECT employee_id, company_id
            FROM employee_project_companies
            WHERE employee_id IN ({in_clause(employee_ids)})
            ORDER BY employee_id, position
            """,
            tuple(employee_ids),
        )
        out: dict[int, list[int]] = {}
        for r in fetchall(cur):
            out.setdefault(int(r["employee_id"]), []).append(int(r["company_id"]))
        return {k: tuple(v) for k, v in out.items()}

    @staticmethod
    def _to_employee(r: Dict[str, Any], project_ids: tuple[int, ...]) -> Employee:
        return Employee(
            employee_id=int(r["employee_id"]),
            tenant_id=str(r["tenant_id"]),
            full_name=r["full_name"],
            primary_company_id=int(r["primary_company_id"]),
            project_company_ids=project_ids,
            contract_hours_per_week=as_float(r.get("contract_hours_per_week")),
            created_at=r.get("created_at"),
        )

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, tenant_id, full_name, primary_company_id, contract_hours_per_week, created_at
                FROM employees
                WHERE employee_id=%s
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            project_ids = self._project_ids(cur, [int(r["employee_id"])])
            return self._to_employee(r, project_ids.get(int(r["employee_id"]), ()))

    def list_for_tenant(self, tenant_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, tenant_id, full_name, primary_company_id, contract_hours_per_week, created_at
                FROM employees
                WHERE tenant_id=%s
                ORDER BY created_at ASC, employee_id ASC
                """,
                (tenant_id,),
            )
            rows = fetchall(cur)
            project_ids = self._project_ids(cur, [int(r["employee_id"]) for r in rows])
            return [self._to_employee(r, project_ids.get(int(r["employee_id"]), ())) for r in rows]

    def create_employee(
        self,
        *,
        tenant_id: str,
        full_name: str,
        primary_company_id: int,
        contract_hours_per_week: float,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(tenant_id, full_name, primary_company_id, contract_hours_per_week)
                VALUES(%s,%s,%s,%s)
                """,
                (tenant_id, full_name, int(primary_company_id), float(contract_hours_per_week)),
            )
            return int(cur.lastrowid)

    def replace_project_companies(
        self,
        *,
        employee_id: int,
        company_ids: Sequence[int],
        assignments: Sequence[EmployeeCompanyAssignment],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            # Lock the employee row for the read-modify-write.
            cur.execute("SELECT employee_id FROM employees WHERE employee_id=%s FOR UPDATE", (int(employee_id),))
            if not fetchone(cur):
                raise NotFoundError(f"Employee {employee_id} not found")

            cur.execute("DELETE FROM employee_project_companies WHERE employee_id=%s", (int(employee_id),))
            if company_ids:
                cur.executemany(
                    """
                    INSERT INTO employee_project_companies(employee_id, company_id, position)
                    VALUES(%s,%s,%s)
                    """,
                    [(int(employee_id), int(cid), pos) for pos, cid in enumerate(company_ids)],
                )
            cur.execute("UPDATE employees SET updated_at=CURRENT_TIMESTAMP WHERE employee_id=%s", (int(employee_id),))

            if assignments:
                cur.executemany(
                    """
                    INSERT INTO employee_company_assignments(
                        employee_id, company_id, assignment_type, assigned_by, assigned_at,
                        can_log_hours, can_access_reports, can_view_payslips,
                        default_hour_type, auto_select_company
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (
                            int(a.employee_id),
                            int(a.company_id),
                            a.assignment_type.value,
                            a.assigned_by,
                            a.assigned_at,
                            int(a.can_log_hours),
                            int(a.can_access_reports),
                            int(a.can_view_payslips),
                            a.default_hour_type,
                            int(a.auto_select_company),
                        )
                        for a in assignments
                    ],
                )
