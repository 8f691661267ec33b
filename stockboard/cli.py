"""Command-line interface for the inventory dashboard."""

import sys
from contextlib import contextmanager
from typing import Optional

import click

from .api.inventory_client import InventoryClient
from .models.product import FILTER_ALL, ProductStatus, product_status
from .services.dashboard import DashboardService
from .services.explorer import ASC, DESC, SORTABLE_FIELDS, ProductTableView
from .services.kpi_generator import RANGE_DAYS
from .services.metrics import format_number, format_percentage, product_fill_rate
from .services.product_actions import ProductActions, destination_choices
from .services.product_query import ProductFilters
from .utils.config import get_config
from .utils.exceptions import BaseAppException

STATUS_CHOICES = [FILTER_ALL] + [s.value for s in ProductStatus]
STATUS_LABELS = {
    "healthy": ("Healthy", "green"),
    "low": ("Low", "yellow"),
    "critical": ("Critical", "red"),
}
CARD_COLORS = {"blue": "blue", "purple": "magenta", "green": "green", "yellow": "yellow", "red": "red"}


@contextmanager
def _open_client(ctx):
    injected = ctx.obj.get("client")
    if injected is not None:
        yield injected
        return
    with InventoryClient(base_url=ctx.obj["api_url"]) as client:
        yield client


def _fail(message: str):
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)
    sys.exit(1)


def _status_label(stock: int, demand: int) -> str:
    label, color = STATUS_LABELS[product_status(stock, demand).value]
    return click.style(f"{label:<8}", fg=color)


def _find_product(client: InventoryClient, product_id: str):
    for product in client.list_products(search=product_id):
        if product.id == product_id:
            return product
    return None


@click.group()
@click.version_option(version="1.0.0")
@click.option("--api-url", default=None, help="Inventory API base URL")
@click.pass_context
def cli(ctx, api_url: Optional[str]):
    """
    Stockboard inventory monitoring dashboard.

    Serve the mock inventory API, browse products and KPIs, and update
    demand or move stock between warehouses.
    """
    ctx.ensure_object(dict)
    ctx.obj.setdefault("api_url", api_url or get_config().env.api_url)


@cli.command()
@click.option("--host", default=None, help="Bind address")
@click.option("--port", default=None, type=int, help="Port")
@click.option("--reload/--no-reload", default=None, help="Auto-reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: Optional[bool]):
    """Run the inventory GraphQL API server."""
    from .api.server import run

    run(host=host, port=port, reload=reload)


@cli.command()
@click.option("--search", default="", help="Match name, SKU or id")
@click.option("--warehouse", default=FILTER_ALL, help="Warehouse code")
@click.option("--status", type=click.Choice(STATUS_CHOICES), default=FILTER_ALL)
@click.option("--sort", "sort_field", type=click.Choice(SORTABLE_FIELDS), default="name")
@click.option("--desc", is_flag=True, help="Sort descending")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--page-size", default=None, type=int, help="Rows per page")
@click.pass_context
def products(ctx, search: str, warehouse: str, status: str, sort_field: str, desc: bool,
             page: int, page_size: Optional[int]):
    """List products with filters, sorting and pagination."""
    config = get_config()
    try:
        with _open_client(ctx) as client:
            rows = client.list_products()
    except BaseAppException as e:
        _fail(f"Failed to load products: {e.message}")

    view = ProductTableView(products=rows, page_size=page_size or config.dashboard.explorer_page_size)
    view.set_filters(search=search, warehouse=warehouse, status=status)
    view.sort_by(sort_field, DESC if desc else ASC)
    view.go_to(page)
    current = view.current_page()

    click.echo(f"{'ID':<8} {'Name':<26} {'SKU':<13} {'WH':<6} {'Stock':>6} {'Demand':>7} {'Fill':>7}  Status")
    click.echo("─" * 88)
    for p in current.items:
        click.echo(
            f"{p.id:<8} {p.name[:26]:<26} {p.sku:<13} {p.warehouse:<6} "
            f"{format_number(p.stock):>6} {format_number(p.demand):>7} "
            f"{format_percentage(product_fill_rate(p)):>7}  {_status_label(p.stock, p.demand)}"
        )
    click.echo("─" * 88)
    click.echo(f"{current.summary()}  (page {current.page}/{current.total_pages})")


@cli.command()
@click.pass_context
def warehouses(ctx):
    """List warehouses."""
    try:
        with _open_client(ctx) as client:
            rows = client.list_warehouses()
    except BaseAppException as e:
        _fail(f"Failed to load warehouses: {e.message}")

    for w in rows:
        click.echo(f"{w.code:<6} {w.name:<18} {w.city}, {w.country}")


@cli.command()
@click.option("--range", "range_token", type=click.Choice(list(RANGE_DAYS)), default=None)
@click.pass_context
def kpis(ctx, range_token: Optional[str]):
    """Show the daily KPI series."""
    range_token = range_token or get_config().dashboard.default_range
    try:
        with _open_client(ctx) as client:
            points = client.get_kpis(range_token)
    except BaseAppException as e:
        _fail(f"Failed to load KPIs: {e.message}")

    click.echo(f"{'Date':<12} {'Stock':>8} {'Demand':>8}")
    for point in points:
        click.echo(f"{point.date:<12} {format_number(point.stock):>8} {format_number(point.demand):>8}")


@cli.command()
@click.option("--range", "range_token", type=click.Choice(list(RANGE_DAYS)), default=None)
@click.option("--search", default="", help="Match name, SKU or id")
@click.option("--warehouse", default=FILTER_ALL, help="Warehouse code")
@click.option("--status", type=click.Choice(STATUS_CHOICES), default=FILTER_ALL)
@click.pass_context
def dashboard(ctx, range_token: Optional[str], search: str, warehouse: str, status: str):
    """Show KPI cards and stock health for the selected products."""
    with _open_client(ctx) as client:
        service = DashboardService(client, range_token=range_token)
        service.filters = ProductFilters(search=search, warehouse=warehouse, status=status)
        snapshot = service.load()

    if not snapshot.ok:
        click.echo(click.style("Something went wrong", fg="red", bold=True))
        click.echo(snapshot.error)
        click.echo("Run the command again to retry.")
        sys.exit(1)

    click.echo(f"Inventory dashboard ({snapshot.range_token})")
    if snapshot.filters.is_active:
        active = []
        if snapshot.filters.search:
            active.append(f'Search: "{snapshot.filters.search}"')
        if snapshot.filters.warehouse != FILTER_ALL:
            active.append(f"Warehouse: {snapshot.warehouse_name(snapshot.filters.warehouse)}")
        if snapshot.filters.status != FILTER_ALL:
            active.append(f"Status: {STATUS_LABELS[snapshot.filters.status][0]}")
        click.echo("Active filters: " + ", ".join(active))
    click.echo("=" * 60)

    for card in snapshot.cards:
        trend = f"{card.trend:+.1f}%"
        click.echo(
            f"{card.title:<14} "
            + click.style(f"{card.value:>10}", fg=CARD_COLORS.get(card.color), bold=True)
            + f"  {trend:>7}  {card.description}"
        )

    click.echo()
    counts = snapshot.status_counts
    click.echo(
        f"Healthy: {counts.get('healthy', 0)}   "
        f"Low: {counts.get('low', 0)}   "
        f"Critical: {counts.get('critical', 0)}   "
        f"Products: {len(snapshot.products)}"
    )


@cli.command("update-demand")
@click.argument("product_id")
@click.argument("demand")
@click.pass_context
def update_demand(ctx, product_id: str, demand: str):
    """
    Set the demand of a product.

    PRODUCT_ID: Product id, e.g. P-1002
    DEMAND: New demand (non-negative integer)
    """
    try:
        with _open_client(ctx) as client:
            product = _find_product(client, product_id)
            if product is None:
                _fail(f"Product not found: {product_id}")
            notification = ProductActions(client).update_demand(product, demand)
    except BaseAppException as e:
        _fail(e.message)

    _echo_notification(notification)


@cli.command()
@click.argument("product_id")
@click.argument("qty")
@click.option("--to", "destination", default="", help="Destination warehouse code (any warehouse but the current one)")
@click.pass_context
def transfer(ctx, product_id: str, qty: str, destination: str):
    """
    Move stock of a product to another warehouse.

    PRODUCT_ID: Product id, e.g. P-1004
    QTY: Quantity to transfer
    """
    try:
        with _open_client(ctx) as client:
            product = _find_product(client, product_id)
            if product is None:
                _fail(f"Product not found: {product_id}")
            choices = [w.code for w in destination_choices(product, client.list_warehouses())]
            if destination and destination not in choices:
                _fail(f"Destination must be one of: {', '.join(choices)}")
            notification = ProductActions(client).transfer_stock(product, qty, destination)
    except BaseAppException as e:
        _fail(e.message)

    _echo_notification(notification)


def _echo_notification(notification):
    if notification.ok:
        click.echo(click.style(f"✓ {notification.message}", fg="green", bold=True))
        product = (notification.details or {}).get("product")
        if product:
            click.echo(
                f"{product['id']}: warehouse {product['warehouse']}, "
                f"stock {product['stock']}, demand {product['demand']}"
            )
        sys.exit(0)
    click.echo(click.style(f"✗ {notification.message}", fg="red"), err=True)
    sys.exit(1)


@cli.command("config-info")
def config_info():
    """Display current configuration settings."""
    try:
        config = get_config()

        click.echo("Configuration Settings:")
        click.echo("=" * 60)
        click.echo()

        click.echo("Environment:")
        click.echo(f"  Environment:     {config.env.environment}")
        click.echo(f"  Log level:       {config.logging.level}")
        click.echo()

        click.echo("Server:")
        click.echo(f"  Bind:            {config.env.host}:{config.env.port}")
        click.echo(f"  GraphQL path:    {config.server.graphql_path}")
        click.echo(f"  CORS origins:    {', '.join(config.server.cors_origins)}")
        click.echo()

        click.echo("Client:")
        click.echo(f"  API URL:         {config.env.api_url}")
        click.echo(f"  Timeout:         {config.api.timeout}s")
        click.echo(f"  Max retries:     {config.api.max_retries}")
        click.echo()

        click.echo("Dashboard:")
        click.echo(f"  Default range:   {config.dashboard.default_range}")
        click.echo(f"  Page sizes:      table {config.dashboard.table_page_size}, "
                   f"explorer {config.dashboard.explorer_page_size}")
        click.echo()

    except Exception as e:
        click.echo(click.style(f"✗ Error loading config: {str(e)}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
