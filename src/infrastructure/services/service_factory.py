"""サービスの初期化を行うファクトリ"""
import logging
from pathlib import Path

from src.domain.value_objects.application_config import ApplicationConfig
from src.domain.value_objects.credentials import DataStoreCredentials
from src.infrastructure.datastore.client_repository import RestClientRepository
from src.infrastructure.datastore.company_repository import RestCompanyRepository
from src.infrastructure.datastore.invoice_repository import RestInvoiceRepository
from src.infrastructure.datastore.rest_client import DataStoreRestClient
from src.infrastructure.playwright.pdf_renderer import PlaywrightPdfRenderer
from src.infrastructure.templates.template_renderer import InvoiceTemplateRenderer
from src.usecases.compose_invoice_email_use_case import ComposeInvoiceEmailUseCase
from src.usecases.create_invoice_use_case import CreateInvoiceUseCase
from src.usecases.dashboard_summary_use_case import DashboardSummaryUseCase
from src.usecases.delete_invoice_use_case import DeleteInvoiceUseCase
from src.usecases.duplicate_invoice_use_case import DuplicateInvoiceUseCase
from src.usecases.export_invoice_pdf_use_case import ExportInvoicePdfUseCase
from src.usecases.list_invoices_use_case import ListInvoicesUseCase
from src.usecases.manage_clients_use_case import ManageClientsUseCase
from src.usecases.manage_companies_use_case import ManageCompaniesUseCase
from src.usecases.render_invoice_use_case import RenderInvoiceUseCase


class ServiceFactory:
    """リポジトリとユースケースを組み立てるファクトリ"""

    def __init__(
        self,
        config: ApplicationConfig,
        credentials: DataStoreCredentials,
        logger: logging.Logger,
    ) -> None:
        """初期化

        Args:
            config: アプリケーション設定
            credentials: データストア接続情報
            logger: ロガー
        """
        self.config = config
        self.logger = logger
        self.rest_client = DataStoreRestClient(credentials)
        self.invoice_repository = RestInvoiceRepository(self.rest_client)
        self.client_repository = RestClientRepository(self.rest_client)
        self.company_repository = RestCompanyRepository(self.rest_client)
        self.renderer = InvoiceTemplateRenderer()
        self.logger.info(f"データストアに接続します: {self.rest_client.base_url}")

    def create_invoice(self) -> CreateInvoiceUseCase:
        return CreateInvoiceUseCase(self.invoice_repository, self.config)

    def list_invoices(self) -> ListInvoicesUseCase:
        return ListInvoicesUseCase(self.invoice_repository)

    def delete_invoice(self) -> DeleteInvoiceUseCase:
        return DeleteInvoiceUseCase(self.invoice_repository)

    def duplicate_invoice(self) -> DuplicateInvoiceUseCase:
        return DuplicateInvoiceUseCase(self.invoice_repository, self.config.invoice_prefix)

    def render_invoice(self) -> RenderInvoiceUseCase:
        return RenderInvoiceUseCase(
            self.invoice_repository,
            self.renderer,
            default_template=self.config.template,
            print_copies=self.config.print_copies,
        )

    def export_invoice_pdf(self) -> ExportInvoicePdfUseCase:
        return ExportInvoicePdfUseCase(
            self.render_invoice(),
            PlaywrightPdfRenderer(),
            Path(self.config.pdf_output_dir),
        )

    def compose_invoice_email(self) -> ComposeInvoiceEmailUseCase:
        return ComposeInvoiceEmailUseCase(self.invoice_repository)

    def manage_clients(self) -> ManageClientsUseCase:
        return ManageClientsUseCase(self.client_repository)

    def manage_companies(self) -> ManageCompaniesUseCase:
        return ManageCompaniesUseCase(self.company_repository)

    def dashboard_summary(self) -> DashboardSummaryUseCase:
        return DashboardSummaryUseCase(self.invoice_repository)
