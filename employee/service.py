import logging
from typing import List

from core.errors import EmailAlreadyExists, EmployeeNotFound
from .models import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def create_employee(repo: EmployeeRepository, employee: Employee) -> Employee:
    if repo.find_by_email(employee.email) is not None:
        logger.warning("Employee with email %s already exists", employee.email, extra={"email": employee.email})
        raise EmailAlreadyExists(employee.email)

    # the store assigns the id
    employee.id = None
    saved = repo.save(employee)
    logger.info("Employee saved successfully: %r", saved, extra={"employee_id": saved.id})
    return saved


def get_employee(repo: EmployeeRepository, employee_id: int) -> Employee:
    employee = repo.find_by_id(employee_id)
    if employee is None:
        logger.error("No employee found with ID %s", employee_id, extra={"employee_id": employee_id})
        raise EmployeeNotFound(employee_id)
    logger.info("Employee found with ID %s: %r", employee_id, employee)
    return employee


def get_employees(repo: EmployeeRepository) -> List[Employee]:
    employees = repo.find_all()
    logger.info("Retrieved all employees: %d rows", len(employees))
    return employees


def update_employee(repo: EmployeeRepository, employee: Employee) -> Employee:
    # email uniqueness is not re-checked here
    if not repo.exists_by_id(employee.id):
        logger.error("Cannot update - No employee found with ID %s", employee.id, extra={"employee_id": employee.id})
        raise EmployeeNotFound(employee.id, f"Cannot update - Employee not found with ID: {employee.id}")
    updated = repo.save(employee)
    logger.info("Employee data updated successfully: %r", updated, extra={"employee_id": updated.id})
    return updated


def delete_employee(repo: EmployeeRepository, employee_id: int) -> Employee:
    employee = repo.find_by_id(employee_id)
    if employee is None:
        logger.error("Cannot delete - No employee found with ID %s", employee_id, extra={"employee_id": employee_id})
        raise EmployeeNotFound(employee_id, f"Cannot delete - Employee not found with ID: {employee_id}")
    repo.delete_by_id(employee_id)
    logger.info("Employee deleted successfully with ID: %s", employee_id, extra={"employee_id": employee_id})
    return employee


def delete_employees(repo: EmployeeRepository) -> List[Employee]:
    # read then delete, two separate store calls
    employees = repo.find_all()
    repo.delete_all()
    logger.info("All employees deleted successfully (%d rows)", len(employees))
    return employees
