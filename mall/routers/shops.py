from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request, Response

from mall.services.shop_service import ShopService

router = APIRouter(prefix="/api/shops", tags=["shops"])


def _get_shop_service(request: Request) -> ShopService:
    svc = getattr(getattr(request.app, "state", None), "shop_service", None)
    if not svc:
        raise RuntimeError("ShopService not configured")
    return svc


@router.get("")
def list_shops(request: Request, q: Optional[str] = None):
    return _get_shop_service(request).list_shops(q)


@router.get("/{shop_id}")
def get_shop(shop_id: str, request: Request):
    return _get_shop_service(request).get_shop(shop_id)


@router.post("", status_code=201)
def create_shop(request: Request, payload: Optional[dict] = Body(None)):
    return _get_shop_service(request).create_shop(payload or {})


@router.put("/{shop_id}")
def update_shop(shop_id: str, request: Request, payload: Optional[dict] = Body(None)):
    return _get_shop_service(request).update_shop(shop_id, payload or {})


@router.delete("/{shop_id}", status_code=204)
def delete_shop(shop_id: str, request: Request):
    _get_shop_service(request).delete_shop(shop_id)
    return Response(status_code=204)


@router.get("/{shop_id}/employees")
def list_shop_employees(shop_id: str, request: Request):
    return _get_shop_service(request).list_shop_employees(shop_id)
