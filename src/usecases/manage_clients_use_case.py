"""請求先を管理するユースケース"""
import logging
from typing import List

from src.domain.entities.client import Client
from src.domain.repositories.client_repository import IClientRepository

logger = logging.getLogger(__name__)


class ManageClientsUseCase:
    """請求先の一覧・登録・更新・削除"""

    def __init__(self, client_repository: IClientRepository):
        self.client_repository = client_repository

    async def list(self) -> List[Client]:
        clients = await self.client_repository.list()
        logger.info(f"{len(clients)} 件の請求先を取得しました")
        return clients

    async def create(self, client: Client) -> Client:
        try:
            return await self.client_repository.create(client)
        except Exception as e:
            logger.error(f"請求先の登録中にエラーが発生しました: {e}")
            raise

    async def update(self, client_id: str, changes: dict) -> None:
        try:
            await self.client_repository.update(client_id, changes)
        except Exception as e:
            logger.error(f"請求先の更新中にエラーが発生しました: {e}")
            raise

    async def delete(self, client_id: str) -> None:
        try:
            await self.client_repository.delete(client_id)
        except Exception as e:
            logger.error(f"請求先の削除中にエラーが発生しました: {e}")
            raise
