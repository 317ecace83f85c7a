"""
Employee endpoints for API v1.

The routes mirror the operation names (``create``, ``getAll``,
``getById/{id}``, ``update/{id}``, ``delete/{id}``) rather than plain
resource paths, so existing clients of the service keep working.

A missing employee is answered with 404: an empty body for the
lookups, the submitted payload for ``update``.  Duplicate emails on
create are raised by the service as ``DuplicateEmailError`` and turned
into a 409 by the application's exception handler.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()


def get_employee_service() -> EmployeeService:
    """Build the service for one request.  Overridden in tests."""
    return EmployeeService(EmployeeRepository())


@router.post("/create", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Create an employee.  Any ``id`` in the body is ignored."""
    employee = Employee(**employee_in.model_dump())
    return await service.save_employee(employee)


@router.get("/getAll", response_model=List[Employee])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[Employee]:
    return await service.get_all_employees()


@router.get(
    "/getById/{employee_id}",
    response_model=Employee,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Employee not found (empty body)"}},
)
async def get_employee_by_id(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get_employee_by_id(employee_id)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return employee


@router.get(
    "/getByName",
    response_model=Employee,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Employee not found (empty body)"}},
)
async def get_employee_by_name(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
    service: EmployeeService = Depends(get_employee_service),
):
    """Look up an employee by first and last name."""
    employee = await service.get_employee_by_name(first_name, last_name)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return employee


@router.put(
    "/update/{employee_id}",
    response_model=Employee,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Employee not found (payload echoed)"}},
)
async def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Change first name, last name and/or email of an existing employee.

    Only the fields present in the body are replaced; the id never
    changes.  If the employee does not exist the submitted payload is
    returned unchanged with status 404.
    """
    existing = await service.get_employee_by_id(employee_id)
    if existing is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=employee_in.model_dump(by_alias=True, exclude_unset=True),
        )
    updated = existing.model_copy(update=employee_in.model_dump(exclude_unset=True))
    return await service.update_employee(updated)


@router.delete("/delete/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    """Delete an employee.  Deleting an unknown id also succeeds."""
    await service.delete_employee(employee_id)
    return f"Object with id {employee_id} deleted successfully!"
