"""請求先エンティティ"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from src.domain.entities.company import Company


@dataclass(frozen=True)
class Client:
    """請求先（顧客）を表すエンティティ"""

    id: str
    name: str
    company_id: str
    email: str = ""
    phone: str = ""
    pin_number: Optional[str] = None
    vat_registered: bool = False
    total_billed: Decimal = Decimal(0)
    active_projects: int = 0
    avatar: Optional[str] = None
    company: Optional[Company] = None
    created_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        """バリデーション"""
        if not self.name:
            raise ValueError("請求先名が空です")
