"""
HR Service - Employees and Salaries
"""
from typing import List
from sqlalchemy import select, insert, update, delete

from mktrading.core.database import Store, row_to_dict
from mktrading.core.exceptions import ValidationError, NotFoundError
from mktrading.models import Employee, Salary
from mktrading.schemas import EmployeeCreate, EmployeeUpdate, SalaryCreate, SalaryUpdate

employees = Employee.__table__
salaries = Salary.__table__


class EmployeeService:
    def __init__(self, store: Store):
        self.store = store

    def _values(self, employee_data) -> dict:
        if not employee_data.name or not employee_data.name.strip():
            raise ValidationError("Employee name required")
        return {
            "name": employee_data.name.strip(),
            "contact": employee_data.contact or None,
            "role": employee_data.role or None,
            "joining_date": employee_data.joining_date,
        }

    def list(self) -> List[dict]:
        return self.store.execute(
            select(employees).order_by(employees.c.name, employees.c.id)
        )

    def get(self, employee_id: int) -> dict:
        employee = self.store.first(select(employees).where(employees.c.id == employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, employee_data: EmployeeCreate) -> dict:
        values = self._values(employee_data)
        row = self.store.first(insert(employees).values(**values).returning(employees.c.id))
        return row_to_dict({"id": row["id"], **values})

    def update(self, employee_id: int, employee_data: EmployeeUpdate) -> dict:
        values = self._values(employee_data)
        row = self.store.first(
            update(employees).where(employees.c.id == employee_id).values(**values).returning(employees.c.id)
        )
        if not row:
            raise NotFoundError("Employee not found")
        return row_to_dict({"id": employee_id, **values})

    def delete(self, employee_id: int) -> None:
        """Delete an employee; their salary rows go with them"""
        self.store.execute(delete(employees).where(employees.c.id == employee_id))


class SalaryService:
    def __init__(self, store: Store):
        self.store = store

    def _values(self, salary_data) -> dict:
        # A zero salary is still a salary
        if not salary_data.employee_id or salary_data.amount is None:
            raise ValidationError("employee_id and amount required")
        return {
            "employee_id": salary_data.employee_id,
            "month": salary_data.month,
            "year": salary_data.year,
            "amount": salary_data.amount,
            "paid_date": salary_data.paid_date,
            "notes": salary_data.notes or None,
        }

    def _with_employee(self):
        return select(
            salaries,
            employees.c.name.label("employee_name"),
        ).select_from(
            salaries.outerjoin(employees, employees.c.id == salaries.c.employee_id)
        )

    def list(self) -> List[dict]:
        return self.store.execute(
            self._with_employee().order_by(
                salaries.c.year.desc(), salaries.c.month.desc(), salaries.c.id.desc()
            )
        )

    def get(self, salary_id: int) -> dict:
        salary = self.store.first(self._with_employee().where(salaries.c.id == salary_id))
        if not salary:
            raise NotFoundError("Salary not found")
        return salary

    def create(self, salary_data: SalaryCreate) -> dict:
        values = self._values(salary_data)
        row = self.store.first(insert(salaries).values(**values).returning(salaries.c.id))
        return row_to_dict({"id": row["id"], **values})

    def update(self, salary_id: int, salary_data: SalaryUpdate) -> dict:
        values = self._values(salary_data)
        row = self.store.first(
            update(salaries).where(salaries.c.id == salary_id).values(**values).returning(salaries.c.id)
        )
        if not row:
            raise NotFoundError("Salary not found")
        return row_to_dict({"id": salary_id, **values})

    def delete(self, salary_id: int) -> None:
        self.store.execute(delete(salaries).where(salaries.c.id == salary_id))
