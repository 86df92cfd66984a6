"""会社エンティティ"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Company:
    """請求元となる会社を表すエンティティ"""

    id: str
    name: str
    email: str = ""
    phone: str = ""
    website: str = ""
    address: str = ""
    pin_number: str = ""
    vat_registered: bool = False
    employee_count: int = 0
    total_billed: Decimal = Decimal(0)
    logo: Optional[str] = None
    created_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        """バリデーション"""
        if not self.name:
            raise ValueError("会社名が空です")

    @property
    def details(self) -> str:
        """請求書に印字する会社情報"""
        lines = [self.address, self.phone, self.email]
        if self.pin_number:
            lines.append(f"PIN: {self.pin_number}")
        return "\n".join(line for line in lines if line)
