"""Catalog admin command line.

Host environment for the catalog controller: fetches the catalog from
the product store and exposes search, facets, export and delete as
subcommands.

Usage:
    catalog-admin --token "$TOKEN" list --query coil --page 2
    catalog-admin --token "$TOKEN" categories
    catalog-admin --token "$TOKEN" export --query coil --out exports
    catalog-admin --token "$TOKEN" delete 65f0c0ffee --yes
    catalog-admin --token "$TOKEN" catalogue
"""

import argparse
import asyncio
import os
import sys

import structlog

from catalog_admin.application.catalog_controller import CatalogController, CatalogView
from catalog_admin.application.notices import Notice, NoticeLevel
from catalog_admin.application.session import Session, require_session
from catalog_admin.catalog.export import CsvExporter
from catalog_admin.catalog.pagination import Paginator
from catalog_admin.domain.exceptions import CatalogError, SessionRequiredError
from catalog_admin.infrastructure.config import Settings, get_settings
from catalog_admin.infrastructure.export_sink import FileExportSink
from catalog_admin.infrastructure.logging_config import configure_logging
from catalog_admin.infrastructure.store_client import ProductStoreClient

logger = structlog.get_logger()

DEFAULT_CLI_USER = "cli"


class ConsoleNotifier:
    """Prints notices; errors go to stderr."""

    def __init__(self) -> None:
        self.errors = 0

    def notify(self, notice: Notice) -> None:
        if notice.level == NoticeLevel.ERROR:
            self.errors += 1
            print(f"✗ {notice.message}", file=sys.stderr)
        elif notice.level == NoticeLevel.SUCCESS:
            print(f"✓ {notice.message}")
        else:
            print(notice.message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="catalog-admin",
        description="Search, export and delete products in the catalog",
    )
    parser.add_argument(
        "--user",
        default=os.environ.get("CATALOG_ADMIN_USER"),
        help="User name recorded in logs (default: $CATALOG_ADMIN_USER)",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("CATALOG_ADMIN_SESSION_TOKEN"),
        help="Session bearer token (default: $CATALOG_ADMIN_SESSION_TOKEN)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Show one page of products")
    list_parser.add_argument("--query", default="", help="Search string")
    list_parser.add_argument("--page", type=int, default=1, help="Page number (1-based)")

    subparsers.add_parser("categories", help="Show category facets")

    export_parser = subparsers.add_parser("export", help="Export products to CSV")
    export_parser.add_argument("--query", default="", help="Search string")
    export_parser.add_argument("--out", default=None, help="Output directory")

    delete_parser = subparsers.add_parser("delete", help="Delete a product")
    delete_parser.add_argument("product_id", help="Product ID")
    delete_parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    subparsers.add_parser("catalogue", help="Show the catalogue document location")

    return parser


def render_view(view: CatalogView) -> None:
    """Print a catalog view as a plain table."""
    summary = f"Total Products: {view.total_products}"
    if view.filtered_count is not None:
        summary += f"  |  {view.filtered_count} products found"
    print(summary)
    if view.empty_message:
        print(view.empty_message)
        return
    for row in view.rows:
        product = row.product
        tags = ", ".join(product.categories or ())
        print(f"{row.serial:>4}  {product.sku or 'N/A':<14} {product.name:<40} {tags}")
    if view.show_pagination:
        print(f"Page {view.page} of {view.total_pages}")


def confirm_prompt(question: str) -> bool:
    answer = input(f"{question} [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


def session_from_args(args: argparse.Namespace) -> Session | None:
    """Build the session from the command line; the token signs the user in."""
    if not args.token:
        return None
    return Session(user_id=args.user or DEFAULT_CLI_USER, token=args.token)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Run one subcommand against the product store.

    Returns:
        Process exit code.
    """
    try:
        session = require_session(
            session_from_args(args),
            redirect_to=settings.login_redirect,
        )
    except SessionRequiredError as e:
        print(f"✗ {e.message}; redirecting to {e.redirect_to}", file=sys.stderr)
        return 2

    notifier = ConsoleNotifier()
    store = ProductStoreClient(
        base_url=settings.store_base_url,
        api_key=session.token or settings.store_api_key,
        timeout=settings.request_timeout,
    )
    async with store:
        controller = CatalogController(
            session=session,
            store=store,
            notifier=notifier,
            sink=FileExportSink(getattr(args, "out", None) or settings.export_dir),
            paginator=Paginator(settings.page_size),
            exporter=CsvExporter(
                currency_symbol=settings.currency_symbol,
                date_format=settings.export_date_format,
            ),
            placeholder_image=settings.placeholder_image,
            catalogue_document=settings.catalogue_document,
        )

        if args.command == "catalogue":
            print(controller.catalogue_document())
            return 0

        if not await controller.load():
            return 1

        if args.command == "list":
            controller.set_query(args.query)
            controller.go_to_page(args.page)
            render_view(controller.view())
        elif args.command == "categories":
            for category in controller.categories():
                print(category)
        elif args.command == "export":
            controller.set_query(args.query)
            if controller.export() is None:
                return 1
        elif args.command == "delete":
            record = next((p for p in controller.catalog if p.id == args.product_id), None)
            if record is None:
                print(f"✗ Product {args.product_id} not found", file=sys.stderr)
                return 1
            controller.request_delete(record)
            prompt = controller.view().delete_prompt or ""
            if not args.yes and not confirm_prompt(prompt):
                controller.cancel_delete()
                print("Delete cancelled")
                return 0
            outcome = await controller.confirm_delete()
            if not outcome.success:
                return 1
            print(f"Products remaining: {len(controller.catalog)}")

    return 1 if notifier.errors else 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``catalog-admin`` command."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    try:
        return asyncio.run(run(args, settings))
    except CatalogError as e:
        logger.error("Command failed", command=args.command, error=e.message)
        print(f"✗ {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
