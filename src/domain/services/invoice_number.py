"""請求書番号の採番"""
import re
from typing import Iterable


def next_invoice_number(prefix: str, year: int, existing_numbers: Iterable[str]) -> str:
    """``{prefix}-{year}-{連番3桁}`` 形式の次の番号を返す

    同じ接頭辞・年の既存番号のうち最大の連番に1を足す。該当が無ければ001から。
    """
    pattern = re.compile(rf"^{re.escape(prefix)}-{year}-(\d+)$")
    sequences = [
        int(match.group(1))
        for match in (pattern.match(number) for number in existing_numbers)
        if match
    ]
    return f"{prefix}-{year}-{max(sequences, default=0) + 1:03d}"
