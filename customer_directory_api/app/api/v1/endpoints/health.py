"""
Health endpoint for API v1.

Reports whether the service is up and the store answers a trivial
query.  Intended for load balancer and container health checks.
"""

from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, status

from customer_directory_api.app.core.db import StoreClient, StoreError, get_store

router = APIRouter()


@router.get("", response_model=Dict[str, str])
def health(store: StoreClient = Depends(get_store)) -> Dict[str, str]:
    try:
        store.ping()
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from e
    return {"status": "ok", "database": "ok"}
