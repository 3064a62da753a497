"""
Client repository.
"""
from typing import List

from centriq_backend.config import settings
from centriq_backend.core.cache import make_key
from centriq_backend.models.client import Client
from centriq_backend.repositories.base import BaseRepository
from centriq_backend.schemas.client import ClientCreate

CLIENTS = "clients"


class ClientRepository(BaseRepository):
    """Repository for client operations."""
    service = "Client API"

    async def list(self) -> List[Client]:
        async def fetch() -> List[Client]:
            data = await self.get("clients")
            return self.parse_list(Client, data)

        return await self.cache.get_or_fetch(make_key(CLIENTS), fetch, settings.CLIENTS_CACHE_TTL)

    async def create(self, client_data: ClientCreate) -> Client:
        data = await self.post("clients", json=client_data.model_dump(by_alias=True, mode="json", exclude_none=True))
        client = self.parse(Client, data)
        self.cache.invalidate(CLIENTS)
        return client
