"""
Clients API routes.
"""
from typing import List

from fastapi import APIRouter, Depends

from centriq_backend.api.deps import get_client_service
from centriq_backend.config import settings
from centriq_backend.models.client import Client
from centriq_backend.schemas.common import ERROR_RESPONSES
from centriq_backend.schemas.client import ClientCreate
from centriq_backend.services.client_service import ClientService

router = APIRouter(prefix=f"{settings.API_PREFIX}/clients", tags=["clients"], responses=ERROR_RESPONSES)


@router.get("/", response_model=List[Client])
async def list_clients(client_service: ClientService = Depends(get_client_service)):
    return await client_service.list()


@router.post("/", response_model=Client, status_code=201)
async def create_client(
    client_data: ClientCreate,
    client_service: ClientService = Depends(get_client_service)
):
    """Create a new client."""
    return await client_service.create(client_data)
