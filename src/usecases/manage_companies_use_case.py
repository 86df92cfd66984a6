"""会社を管理するユースケース"""
import logging
from typing import List

from src.domain.entities.company import Company
from src.domain.repositories.company_repository import ICompanyRepository

logger = logging.getLogger(__name__)


class ManageCompaniesUseCase:
    """会社の一覧・登録・更新・削除"""

    def __init__(self, company_repository: ICompanyRepository):
        self.company_repository = company_repository

    async def list(self) -> List[Company]:
        companies = await self.company_repository.list()
        logger.info(f"{len(companies)} 件の会社を取得しました")
        return companies

    async def create(self, company: Company) -> Company:
        try:
            return await self.company_repository.create(company)
        except Exception as e:
            logger.error(f"会社の登録中にエラーが発生しました: {e}")
            raise

    async def update(self, company_id: str, changes: dict) -> None:
        try:
            await self.company_repository.update(company_id, changes)
        except Exception as e:
            logger.error(f"会社の更新中にエラーが発生しました: {e}")
            raise

    async def delete(self, company_id: str) -> None:
        try:
            await self.company_repository.delete(company_id)
        except Exception as e:
            logger.error(f"会社の削除中にエラーが発生しました: {e}")
            raise
