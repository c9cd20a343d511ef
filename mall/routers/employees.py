from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Query, Request, Response

from mall.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/employees", tags=["employees"])


def _get_employee_service(request: Request) -> EmployeeService:
    svc = getattr(getattr(request.app, "state", None), "employee_service", None)
    if not svc:
        raise RuntimeError("EmployeeService not configured")
    return svc


@router.get("")
def list_employees(request: Request, shop_id: Optional[str] = Query(None, alias="shopId")):
    return _get_employee_service(request).list_employees(shop_id)


@router.get("/{employee_id}")
def get_employee(employee_id: str, request: Request):
    return _get_employee_service(request).get_employee(employee_id)


@router.post("", status_code=201)
def create_employee(request: Request, payload: Optional[dict] = Body(None)):
    return _get_employee_service(request).create_employee(payload or {})


@router.put("/{employee_id}")
def update_employee(employee_id: str, request: Request, payload: Optional[dict] = Body(None)):
    return _get_employee_service(request).update_employee(employee_id, payload or {})


@router.delete("/{employee_id}", status_code=204)
def delete_employee(employee_id: str, request: Request):
    _get_employee_service(request).delete_employee(employee_id)
    return Response(status_code=204)
