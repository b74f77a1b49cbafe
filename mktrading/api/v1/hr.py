"""
HR API Routes - Employees and Salaries
"""
from fastapi import APIRouter, Depends, status
from typing import List

from mktrading.core.database import Store, get_store
from mktrading.core.security import get_current_user
from mktrading.schemas import (
    EmployeeCreate, EmployeeUpdate, EmployeeResponse,
    SalaryCreate, SalaryUpdate, SalaryResponse, OkResponse
)
from mktrading.services.hr_service import EmployeeService, SalaryService

router = APIRouter(tags=["HR"], dependencies=[Depends(get_current_user)])


# ==================== EMPLOYEES ====================

@router.get("/employees", response_model=List[EmployeeResponse])
async def list_employees(store: Store = Depends(get_store)):
    """List all employees by name"""
    return EmployeeService(store).list()


@router.post("/employees", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(employee_data: EmployeeCreate, store: Store = Depends(get_store)):
    """Create a new employee"""
    return EmployeeService(store).create(employee_data)


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: int, store: Store = Depends(get_store)):
    return EmployeeService(store).get(employee_id)


@router.put("/employees/{employee_id}", response_model=OkResponse)
async def update_employee(employee_id: int, employee_data: EmployeeUpdate, store: Store = Depends(get_store)):
    EmployeeService(store).update(employee_id, employee_data)
    return {"ok": True}


@router.delete("/employees/{employee_id}", response_model=OkResponse)
async def delete_employee(employee_id: int, store: Store = Depends(get_store)):
    EmployeeService(store).delete(employee_id)
    return {"ok": True}


# ==================== SALARIES ====================

@router.get("/salaries", response_model=List[SalaryResponse])
async def list_salaries(store: Store = Depends(get_store)):
    """List salaries, latest month first"""
    return SalaryService(store).list()


@router.post("/salaries", response_model=SalaryResponse, status_code=status.HTTP_201_CREATED)
async def create_salary(salary_data: SalaryCreate, store: Store = Depends(get_store)):
    """Record a salary payment"""
    return SalaryService(store).create(salary_data)


@router.get("/salaries/{salary_id}", response_model=SalaryResponse)
async def get_salary(salary_id: int, store: Store = Depends(get_store)):
    return SalaryService(store).get(salary_id)


@router.put("/salaries/{salary_id}", response_model=OkResponse)
async def update_salary(salary_id: int, salary_data: SalaryUpdate, store: Store = Depends(get_store)):
    SalaryService(store).update(salary_id, salary_data)
    return {"ok": True}


@router.delete("/salaries/{salary_id}", response_model=OkResponse)
async def delete_salary(salary_id: int, store: Store = Depends(get_store)):
    SalaryService(store).delete(salary_id)
    return {"ok": True}
