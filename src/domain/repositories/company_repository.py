"""会社リポジトリのインターフェース"""
from abc import ABC, abstractmethod
from typing import List

from src.domain.entities.company import Company


class ICompanyRepository(ABC):
    """会社リポジトリのインターフェース"""

    @abstractmethod
    async def list(self) -> List[Company]:
        """削除されていない会社を名前順に取得する"""
        pass

    @abstractmethod
    async def create(self, company: Company) -> Company:
        """会社を登録する"""
        pass

    @abstractmethod
    async def update(self, company_id: str, changes: dict) -> None:
        """会社を更新する"""
        pass

    @abstractmethod
    async def delete(self, company_id: str) -> None:
        """会社を削除する"""
        pass
