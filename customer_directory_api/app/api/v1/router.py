"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (customers, addresses,
health).  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import addresses, customers, health

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(addresses.router, prefix="/addresses", tags=["addresses"])
router.include_router(health.router, prefix="/health", tags=["health"])
