import click

from storefront.infrastructure.cli.inquiry_commands import (
    inquiry_delete,
    inquiry_list,
    inquiry_show,
    inquiry_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_show,
    product_stock,
)
from storefront.infrastructure.cli.serve_command import serve
from storefront.infrastructure.config import AppConfig
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront — products, stock and customer inquiries"""
    config = AppConfig.from_env()
    configure_logging(config)
    ctx.obj = config


@cli.group()
def inquiry() -> None:
    """Manage customer inquiries."""


@cli.group()
def product() -> None:
    """Manage products and stock."""


# Register subcommands
cli.add_command(serve)
inquiry.add_command(inquiry_delete)
inquiry.add_command(inquiry_list)
inquiry.add_command(inquiry_show)
inquiry.add_command(inquiry_status)
product.add_command(product_add)
product.add_command(product_show)
product.add_command(product_stock)
