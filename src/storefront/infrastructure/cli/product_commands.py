"""CLI commands for the Product aggregate."""

from __future__ import annotations

import asyncio

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.set_stock import SetStockHandler
from storefront.application.show_product import ShowProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work_factory
from storefront.infrastructure.config import AppConfig


def _parse_options(raw: str) -> list[dict]:
    """Parse 'Blue:3,Green:0:1499' into option payloads (color:qty[:price])."""
    options: list[dict] = []
    for part in raw.split(","):
        part = part.strip()
        fields = part.split(":")
        if len(fields) not in (2, 3):
            raise click.BadParameter(
                f"Invalid option format '{part}'. Expected 'Color:Quantity[:Price]'."
            )
        option: dict = {"color": fields[0].strip(), "quantity": fields[1].strip()}
        if len(fields) == 3:
            option["price"] = fields[2].strip()
        options.append(option)
    return options


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  {dto.name}  ({dto.price})")
    click.echo()
    click.echo(f"  {'Variant':<20} {'Stock':>7} {'Price':>12}")
    click.echo(f"  {'-'*41}")
    click.echo(f"  {(dto.base_color or 'default') + ' *':<20} {dto.base_quantity:>7} {dto.price:>12}")
    for option in dto.options:
        click.echo(f"  {option.color:<20} {option.quantity:>7} {option.price or dto.price:>12}")
    click.echo(f"  {'-'*41}")
    click.echo("  * primary variant")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Base price, e.g. 1499.00.")
@click.option("--quantity", required=True, type=int, help="Stock of the primary variant.")
@click.option("--color", default="", help="Color of the primary variant.")
@click.option("--options", "options_str", default=None, help="Variants as 'Color:Qty[:Price],...'.")
@click.pass_obj
def product_add(
    config: AppConfig,
    name: str,
    price: str,
    quantity: int,
    color: str,
    options_str: str | None,
) -> None:
    """Add a product to the catalog."""
    payload = {
        "name": name,
        "price": price,
        "baseQuantity": quantity,
        "baseColor": color,
        "options": _parse_options(options_str) if options_str else [],
    }
    handler = AddProductHandler(unit_of_work_factory(config))

    try:
        dto = asyncio.run(handler.handle(payload))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} created.")
    _display_product(dto)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID to display.")
@click.pass_obj
def product_show(config: AppConfig, product_id: str) -> None:
    """Show a product and its stock per variant."""
    handler = ShowProductHandler(unit_of_work_factory(config))

    try:
        dto = asyncio.run(handler.handle(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--variant", default="", help="Variant color (empty for the primary variant).")
@click.option("--quantity", required=True, type=int, help="New stock level.")
@click.pass_obj
def product_stock(config: AppConfig, product_id: str, variant: str, quantity: int) -> None:
    """Set the stock level of one variant."""
    handler = SetStockHandler(unit_of_work_factory(config))

    try:
        asyncio.run(handler.handle(product_id, {"variant": variant, "quantity": quantity}))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{variant or 'primary variant'}' set to {quantity}")
