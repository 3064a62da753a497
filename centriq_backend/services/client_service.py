"""
Client service - client management.
"""
from typing import List

from centriq_backend.models.activity import Actions
from centriq_backend.models.client import Client
from centriq_backend.repositories.client_repo import ClientRepository
from centriq_backend.schemas.client import ClientCreate
from centriq_backend.services.activity_service import ActivityService, activity_service


class ClientService:
    """Service for client operations."""

    def __init__(self, client_repo: ClientRepository, activity: ActivityService = activity_service):
        self.client_repo = client_repo
        self.activity = activity

    async def list(self) -> List[Client]:
        return await self.client_repo.list()

    async def create(self, client_data: ClientCreate) -> Client:
        """Create a new client."""
        client = await self.client_repo.create(client_data)

        self.activity.log(
            action=Actions.CLIENT_CREATED,
            entity_type="client",
            entity_id=client.id,
            description=f"Client '{client.name}' created"
        )

        return client
