"""会社リポジトリのREST実装"""
import logging
from typing import List

from src.domain.entities.company import Company
from src.domain.exceptions import DataStoreError
from src.domain.repositories.company_repository import ICompanyRepository
from src.infrastructure.datastore.mappers import company_from_row, company_to_row
from src.infrastructure.datastore.rest_client import DataStoreRestClient, eq

logger = logging.getLogger(__name__)


class RestCompanyRepository(ICompanyRepository):
    """companies テーブルを操作するリポジトリ"""

    def __init__(self, client: DataStoreRestClient):
        self.client = client

    async def list(self) -> List[Company]:
        """削除されていない会社を名前順に取得する

        取得に失敗した場合はエラーをログに残して空のリストを返す。
        """
        try:
            rows = self.client.select(
                "companies",
                filters={"deleted_at": "is.null"},
                order="name.asc",
            )
        except DataStoreError as e:
            logger.error(f"会社一覧の取得に失敗しました: {e}")
            return []
        return [company_from_row(row) for row in rows]

    async def create(self, company: Company) -> Company:
        rows = self.client.insert("companies", [company_to_row(company)])
        if not rows:
            raise DataStoreError(f"会社の登録結果が空です: {company.name}")
        logger.info(f"会社を登録しました: {company.name}")
        return company_from_row(rows[0])

    async def update(self, company_id: str, changes: dict) -> None:
        self.client.update("companies", changes, filters={"id": eq(company_id)})

    async def delete(self, company_id: str) -> None:
        self.client.delete("companies", filters={"id": eq(company_id)})
        logger.info(f"会社を削除しました: {company_id}")
