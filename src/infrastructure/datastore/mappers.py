"""データストアの行とエンティティの相互変換"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from src.domain.entities.client import Client
from src.domain.entities.company import Company
from src.domain.entities.invoice import Invoice, InvoiceLineItem
from src.domain.value_objects.money import to_decimal


def _decimal(value: Any) -> Decimal:
    return to_decimal(value) if value is not None else Decimal(0)


def _date(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value[:10]) if value else None


def _datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _money(value: Decimal) -> float:
    # JSONの数値列として送る
    return float(value)


def company_from_row(row: Dict[str, Any]) -> Company:
    return Company(
        id=row["id"],
        name=row["name"],
        email=row.get("email") or "",
        phone=row.get("phone") or "",
        website=row.get("website") or "",
        address=row.get("address") or "",
        pin_number=row.get("pin_number") or "",
        vat_registered=bool(row.get("vat_registered")),
        employee_count=row.get("employee_count") or 0,
        total_billed=_decimal(row.get("total_billed")),
        logo=row.get("logo"),
        created_at=_datetime(row.get("created_at")),
        deleted_at=_datetime(row.get("deleted_at")),
    )


def company_to_row(company: Company) -> Dict[str, Any]:
    """登録用の行（id・作成日時・請求累計はデータストア側で決まる）"""
    return {
        "name": company.name,
        "email": company.email,
        "phone": company.phone,
        "website": company.website,
        "address": company.address,
        "logo": company.logo,
        "pin_number": company.pin_number,
        "vat_registered": company.vat_registered,
        "employee_count": company.employee_count,
    }


def client_from_row(row: Dict[str, Any]) -> Client:
    company_row = row.get("company")
    return Client(
        id=row["id"],
        name=row["name"],
        company_id=row.get("company_id") or "",
        email=row.get("email") or "",
        phone=row.get("phone") or "",
        pin_number=row.get("pin_number"),
        vat_registered=bool(row.get("vat_registered")),
        total_billed=_decimal(row.get("total_billed")),
        active_projects=row.get("active_projects") or 0,
        avatar=row.get("avatar"),
        company=company_from_row(company_row) if company_row else None,
        created_at=_datetime(row.get("created_at")),
        deleted_at=_datetime(row.get("deleted_at")),
    )


def client_to_row(client: Client) -> Dict[str, Any]:
    return {
        "name": client.name,
        "email": client.email,
        "phone": client.phone,
        "avatar": client.avatar,
        "pin_number": client.pin_number,
        "vat_registered": client.vat_registered,
        "company_id": client.company_id,
    }


def line_item_from_row(row: Dict[str, Any]) -> InvoiceLineItem:
    return InvoiceLineItem(
        id=row.get("id"),
        invoice_id=row.get("invoice_id"),
        description=row.get("description") or "",
        quantity=_decimal(row.get("quantity")),
        rate=_decimal(row.get("rate")),
        amount=_decimal(row.get("amount")),
        discount_type=row.get("discount_type"),
        discount_value=_decimal(row.get("discount_value")),
        discount_amount=_decimal(row.get("discount_amount")),
        vat_applicable=bool(row.get("vat_applicable")),
        withholding_tax_applicable=bool(row.get("withholding_tax_applicable")),
    )


def line_item_to_row(item: InvoiceLineItem, invoice_id: str) -> Dict[str, Any]:
    return {
        "invoice_id": invoice_id,
        "description": item.description,
        "quantity": _money(item.quantity),
        "rate": _money(item.rate),
        "amount": _money(item.amount),
        "discount_type": item.discount_type,
        "discount_value": _money(item.discount_value),
        "discount_amount": _money(item.discount_amount),
        "vat_applicable": item.vat_applicable,
        "withholding_tax_applicable": item.withholding_tax_applicable,
    }


def invoice_from_row(row: Dict[str, Any]) -> Invoice:
    client_row = row.get("client")
    company_row = row.get("company")
    return Invoice(
        id=row.get("id"),
        invoice_number=row["invoice_number"],
        client_id=row.get("client_id") or "",
        company_id=row.get("company_id") or "",
        payment_terms_id=row.get("payment_terms_id"),
        issue_date=_date(row["issue_date"]),
        due_date=_date(row["due_date"]),
        payment_date=_date(row.get("payment_date")),
        currency=row.get("currency") or "KES",
        notes=row.get("notes") or "",
        status=row.get("status") or "draft",
        subtotal=_decimal(row.get("subtotal")),
        discount_type=row.get("discount_type"),
        discount_value=_decimal(row.get("discount_value")),
        discount_amount=_decimal(row.get("discount_amount")),
        total_before_tax=_decimal(row.get("total_before_tax")),
        vat_amount=_decimal(row.get("vat_amount")),
        withholding_tax_amount=_decimal(row.get("withholding_tax_amount")),
        total=_decimal(row.get("total")),
        line_items=[line_item_from_row(item) for item in row.get("line_items") or []],
        client=client_from_row(client_row) if client_row else None,
        company=company_from_row(company_row) if company_row else None,
        created_at=_datetime(row.get("created_at")),
    )


def invoice_to_row(invoice: Invoice) -> Dict[str, Any]:
    """登録用の行（明細・埋め込み関連は含めない）"""
    return {
        "invoice_number": invoice.invoice_number,
        "client_id": invoice.client_id,
        "company_id": invoice.company_id,
        "payment_terms_id": invoice.payment_terms_id,
        "issue_date": invoice.issue_date.isoformat(),
        "due_date": invoice.due_date.isoformat(),
        "currency": invoice.currency,
        "notes": invoice.notes,
        "status": invoice.status,
        "subtotal": _money(invoice.subtotal),
        "discount_type": invoice.discount_type,
        "discount_value": _money(invoice.discount_value),
        "discount_amount": _money(invoice.discount_amount),
        "total_before_tax": _money(invoice.total_before_tax),
        "vat_amount": _money(invoice.vat_amount),
        "withholding_tax_amount": _money(invoice.withholding_tax_amount),
        "total": _money(invoice.total),
    }
