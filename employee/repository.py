from typing import List, Optional
from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from core.database import get_db
from .models import Employee


class EmployeeRepository:
    """Store accessor for employees, one per request session.

    Every mutating call commits on its own; nothing here spans
    several calls in one transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def find_by_email(self, email: str) -> Optional[Employee]:
        stmt = select(Employee).where(Employee.email == email)
        return self.db.scalars(stmt).first()

    def find_all(self) -> List[Employee]:
        return list(self.db.scalars(select(Employee)))

    def exists_by_id(self, employee_id: int) -> bool:
        stmt = select(Employee.id).where(Employee.id == employee_id)
        return self.db.scalars(stmt).first() is not None

    def save(self, employee: Employee) -> Employee:
        # no id -> insert, id -> overwrite every column of that row
        if employee.id is None:
            self.db.add(employee)
        else:
            employee = self.db.merge(employee)
        self.db.commit()
        self.db.refresh(employee)
        return employee

    def delete_by_id(self, employee_id: int) -> None:
        db_employee = self.db.get(Employee, employee_id)
        if db_employee:
            self.db.delete(db_employee)
            self.db.commit()

    def delete_all(self) -> None:
        self.db.execute(delete(Employee))
        self.db.commit()


def get_employee_repository(db: Session = Depends(get_db)) -> EmployeeRepository:
    return EmployeeRepository(db)
