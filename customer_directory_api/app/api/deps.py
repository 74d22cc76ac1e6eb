"""
FastAPI dependencies shared by the versioned routers.

Services are built per request around the application's store client,
which ``create_app`` places on ``app.state``.
"""

from fastapi import Depends

from customer_directory_api.app.core.db import StoreClient, get_store
from customer_directory_api.app.services.address_service import AddressService
from customer_directory_api.app.services.customer_service import CustomerService


def get_customer_service(store: StoreClient = Depends(get_store)) -> CustomerService:
    return CustomerService(store)


def get_address_service(store: StoreClient = Depends(get_store)) -> AddressService:
    return AddressService(store)
