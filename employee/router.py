from typing import Annotated, List
from fastapi import APIRouter, Depends, Path, status

from response.schema import SuccessResponse, success
from .models import Employee
from .repository import EmployeeRepository, get_employee_repository
from .schema import EmployeeSchema, EmployeeCreatePayload, EmployeeUpdatePayload
from . import service

employee_router = APIRouter(prefix="/employees", tags=["Employees"])

# ids are 32-bit integers in the store
EmployeeId = Annotated[int, Path(ge=-2**31, le=2**31 - 1)]

# Create employee
@employee_router.post("", response_model=SuccessResponse[EmployeeSchema], status_code=status.HTTP_201_CREATED)
def employee_post(payload: EmployeeCreatePayload, repo: EmployeeRepository = Depends(get_employee_repository)):
    employee = Employee(**payload.model_dump(exclude={"id"}))
    saved = service.create_employee(repo, employee)
    return success("Employee added successfully", status.HTTP_201_CREATED, saved)

# Get employee by id
@employee_router.get("/{employee_id}", response_model=SuccessResponse[EmployeeSchema])
def employee_detail(employee_id: EmployeeId, repo: EmployeeRepository = Depends(get_employee_repository)):
    employee = service.get_employee(repo, employee_id)
    return success("Employee retrieved successfully", status.HTTP_200_OK, employee)

# List all employees
@employee_router.get("", response_model=SuccessResponse[List[EmployeeSchema]])
def list_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    employees = service.get_employees(repo)
    return success("All employees retrieved successfully", status.HTTP_200_OK, employees)

# Update employee, full replace
@employee_router.put("/{employee_id}", response_model=SuccessResponse[EmployeeSchema])
def employee_put(employee_id: EmployeeId, payload: EmployeeUpdatePayload, repo: EmployeeRepository = Depends(get_employee_repository)):
    data = payload.model_dump()
    data["id"] = employee_id
    updated = service.update_employee(repo, Employee(**data))
    return success("Employee updated successfully", status.HTTP_200_OK, updated)

# Delete employee
@employee_router.delete("/{employee_id}", response_model=SuccessResponse[EmployeeSchema])
def employee_delete(employee_id: EmployeeId, repo: EmployeeRepository = Depends(get_employee_repository)):
    deleted = service.delete_employee(repo, employee_id)
    return success("Employee deleted successfully", status.HTTP_200_OK, deleted)

# Delete all employees
@employee_router.delete("", response_model=SuccessResponse[List[EmployeeSchema]])
def employees_delete(repo: EmployeeRepository = Depends(get_employee_repository)):
    deleted = service.delete_employees(repo)
    return success("All employees deleted successfully", status.HTTP_200_OK, deleted)
