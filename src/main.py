"""メインエントリーポイント"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.domain.value_objects.invoice_form import InvoiceForm
from src.infrastructure.config.config_loader import ConfigLoader
from src.infrastructure.logging.logging_setup import LoggingSetup
from src.infrastructure.services.service_factory import ServiceFactory
from src.usecases.render_invoice_use_case import draft_view


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="invoicing", description="請求書管理ツール")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create-invoice", help="JSONのフォーム入力から請求書を作成する")
    create.add_argument("file", type=Path)

    preview = subparsers.add_parser("preview", help="保存せずに下書きをHTMLで表示する")
    preview.add_argument("file", type=Path)
    preview.add_argument("--template")

    subparsers.add_parser("list-invoices", help="請求書を一覧する")

    for name, help_text in (
        ("duplicate-invoice", "請求書を複製する"),
        ("delete-invoice", "請求書を削除する"),
        ("email-invoice", "送付メールのmailtoリンクを表示する"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("invoice_id")

    render = subparsers.add_parser("render-invoice", help="請求書をHTMLに描画する")
    render.add_argument("invoice_id")
    render.add_argument("--template")
    render.add_argument("--print", dest="for_print", action="store_true")

    export = subparsers.add_parser("export-pdf", help="請求書をPDFに出力する")
    export.add_argument("invoice_id")
    export.add_argument("--template")

    subparsers.add_parser("list-clients", help="請求先を一覧する")
    subparsers.add_parser("list-companies", help="会社を一覧する")
    subparsers.add_parser("dashboard", help="ダッシュボードの集計を表示する")
    return parser


def _load_json(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


async def run(args: argparse.Namespace, factory: ServiceFactory) -> None:
    """サブコマンドを実行する"""
    if args.command == "create-invoice":
        invoice = await factory.create_invoice().execute(_load_json(args.file))
        print(f"{invoice.id}\t{invoice.invoice_number}\t{invoice.currency} {invoice.total:,.2f}")

    elif args.command == "preview":
        form = InvoiceForm.model_validate(_load_json(args.file))
        clients = {c.id: c for c in await factory.manage_clients().list()}
        companies = {c.id: c for c in await factory.manage_companies().list()}
        view = draft_view(form.to_draft(), clients.get(form.client_id), companies.get(form.company_id))
        print(factory.render_invoice().render(view, args.template))

    elif args.command == "list-invoices":
        for row in await factory.list_invoices().execute():
            print(
                f"{row.id}\t{row.invoice_number}\t{row.client_name}\t"
                f"{row.currency} {row.amount:,.2f}\t{row.due_date}\t{row.status}"
            )

    elif args.command == "duplicate-invoice":
        invoice = await factory.duplicate_invoice().execute(args.invoice_id)
        print(f"{invoice.id}\t{invoice.invoice_number}")

    elif args.command == "delete-invoice":
        await factory.delete_invoice().execute(args.invoice_id)

    elif args.command == "render-invoice":
        print(await factory.render_invoice().execute(args.invoice_id, args.template, args.for_print))

    elif args.command == "export-pdf":
        print(await factory.export_invoice_pdf().execute(args.invoice_id, args.template))

    elif args.command == "email-invoice":
        email = await factory.compose_invoice_email().execute(args.invoice_id)
        print(email.mailto_url)

    elif args.command == "list-clients":
        for client in await factory.manage_clients().list():
            company = client.company.name if client.company else ""
            print(f"{client.id}\t{client.name}\t{client.email}\t{company}")

    elif args.command == "list-companies":
        for company in await factory.manage_companies().list():
            print(f"{company.id}\t{company.name}\t{company.email}\t{company.pin_number}")

    elif args.command == "dashboard":
        summary = await factory.dashboard_summary().execute()
        print(f"billed\t{summary.total_billed:,.2f}")
        print(f"paid\t{summary.total_paid:,.2f}")
        print(f"outstanding\t{summary.total_outstanding:,.2f}")
        for status, count in summary.count_by_status.items():
            print(f"{status}\t{count}")
        for month, series in summary.monthly.items():
            print(month + "\t" + "\t".join(f"{name}={amount:,.2f}" for name, amount in series.items()))


async def main(argv: Optional[List[str]] = None):
    """メイン処理"""
    args = build_parser().parse_args(argv)
    try:
        config_loader = ConfigLoader(project_root)
        config = config_loader.load_config()
        LoggingSetup.setup(config.log_level, project_root)
        logger = logging.getLogger(__name__)

        logger.info(f"=== 請求書管理ツール 開始: {args.command} ===")

        credentials = config_loader.load_credentials()
        factory = ServiceFactory(config, credentials, logger)

        await run(args, factory)

        logger.info(f"=== 処理完了: {args.command} ===")

    except Exception as e:
        logger = logging.getLogger(__name__)
        logger.error(f"=== エラー: {str(e)} ===", exc_info=True)
        sys.exit(1)


def cli():
    """コンソールスクリプトのエントリーポイント"""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
