"""請求先リポジトリのREST実装"""
import logging
from typing import List

from src.domain.entities.client import Client
from src.domain.exceptions import DataStoreError
from src.domain.repositories.client_repository import IClientRepository
from src.infrastructure.datastore.mappers import client_from_row, client_to_row
from src.infrastructure.datastore.rest_client import DataStoreRestClient, eq

logger = logging.getLogger(__name__)


class RestClientRepository(IClientRepository):
    """clients テーブルを操作するリポジトリ"""

    def __init__(self, client: DataStoreRestClient):
        self.client = client

    async def list(self) -> List[Client]:
        rows = self.client.select("clients", columns="*,company:companies(*)", order="name.asc")
        return [client_from_row(row) for row in rows]

    async def create(self, client: Client) -> Client:
        rows = self.client.insert("clients", [client_to_row(client)])
        if not rows:
            raise DataStoreError(f"請求先の登録結果が空です: {client.name}")
        logger.info(f"請求先を登録しました: {client.name}")
        return client_from_row(rows[0])

    async def update(self, client_id: str, changes: dict) -> None:
        self.client.update("clients", changes, filters={"id": eq(client_id)})

    async def delete(self, client_id: str) -> None:
        self.client.delete("clients", filters={"id": eq(client_id)})
        logger.info(f"請求先を削除しました: {client_id}")
