"""請求先リポジトリのインターフェース"""
from abc import ABC, abstractmethod
from typing import List

from src.domain.entities.client import Client


class IClientRepository(ABC):
    """請求先リポジトリのインターフェース"""

    @abstractmethod
    async def list(self) -> List[Client]:
        """請求先を名前順に取得する（所属会社を含む）"""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """請求先を登録する"""
        pass

    @abstractmethod
    async def update(self, client_id: str, changes: dict) -> None:
        """請求先を更新する"""
        pass

    @abstractmethod
    async def delete(self, client_id: str) -> None:
        """請求先を削除する"""
        pass
