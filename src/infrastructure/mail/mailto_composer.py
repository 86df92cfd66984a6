"""請求書送付用のmailtoリンクを組み立てる"""
from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class EmailDraft:
    """メール下書き"""

    recipient: str
    subject: str
    body: str

    @property
    def mailto_url(self) -> str:
        return f"mailto:{self.recipient}?subject={quote(self.subject, safe='')}&body={quote(self.body, safe='')}"


def compose_invoice_email(
    invoice_number: str,
    client_name: str,
    client_email: str,
    company_name: str,
) -> EmailDraft:
    """請求書送付メールの件名と本文を組み立てる"""
    subject = f"Invoice {invoice_number} from {company_name}"
    body = (
        f"Dear {client_name},\n\n"
        f"Please find attached invoice {invoice_number}.\n\n"
        f"Best regards,\n{company_name}"
    )
    return EmailDraft(recipient=client_email, subject=subject, body=body)
