"""値オブジェクト"""
from src.domain.value_objects.credentials import DataStoreCredentials
from src.domain.value_objects.discount import Discount, DiscountKind
from src.domain.value_objects.invoice_draft import InvoiceDraft, InvoiceStatus
from src.domain.value_objects.line_item import LineItem

__all__ = [
    "DataStoreCredentials",
    "Discount",
    "DiscountKind",
    "InvoiceDraft",
    "InvoiceStatus",
    "LineItem",
]
