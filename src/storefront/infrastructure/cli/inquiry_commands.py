"""CLI commands for the Inquiry aggregate."""

from __future__ import annotations

import asyncio

import click

from storefront.application.delete_inquiry import DeleteInquiryHandler
from storefront.application.dto import InquiryDTO
from storefront.application.list_inquiries import ListInquiriesHandler
from storefront.application.show_inquiry import ShowInquiryHandler
from storefront.application.update_inquiry import UpdateInquiryHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.inquiry import InquiryStatus
from storefront.infrastructure.bootstrap import unit_of_work_factory
from storefront.infrastructure.config import AppConfig

STATUS_CHOICES = click.Choice([s.value for s in InquiryStatus])


def _display_inquiry(dto: InquiryDTO) -> None:
    click.echo(f"Inquiry {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.user_name} <{dto.user_email}>  {dto.whatsapp_number}")
    click.echo(f"Product:  {dto.product_name}  variant={dto.variant or '-'}  qty={dto.quantity}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.message:
        click.echo(f"Message:  {dto.message}")
    if dto.admin_notes:
        click.echo(f"Notes:    {dto.admin_notes}")


@click.command("list")
@click.option("--status", type=STATUS_CHOICES, default=None, help="Only this status.")
@click.option("--product", "product_id", default=None, help="Only this product ID.")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=10, type=int, show_default=True)
@click.pass_obj
def inquiry_list(
    config: AppConfig,
    status: str | None,
    product_id: str | None,
    page: int,
    limit: int,
) -> None:
    """List inquiries, newest first."""
    handler = ListInquiriesHandler(unit_of_work_factory(config))

    try:
        result = asyncio.run(
            handler.handle(status=status, product_id=product_id, page=page, limit=limit)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No inquiries found.")
        return

    click.echo(f"{'ID':<34} {'Status':<10} {'Product':<20} {'Variant':<10} {'Qty':>5}")
    click.echo("-" * 83)
    for item in result.items:
        click.echo(
            f"{item.id:<34} {item.status:<10} {item.product_name[:20]:<20} "
            f"{item.variant or '-':<10} {item.quantity:>5}"
        )
    p = result.pagination
    click.echo(f"Page {p.page} of {p.pages} ({p.total} total)")


@click.command("show")
@click.option("--id", "inquiry_id", required=True, help="Inquiry ID to display.")
@click.pass_obj
def inquiry_show(config: AppConfig, inquiry_id: str) -> None:
    """Show details of an inquiry."""
    handler = ShowInquiryHandler(unit_of_work_factory(config))

    try:
        dto = asyncio.run(handler.handle(inquiry_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_inquiry(dto)


@click.command("status")
@click.option("--id", "inquiry_id", required=True, help="Inquiry ID to update.")
@click.option("--set", "new_status", required=True, type=STATUS_CHOICES, help="New status.")
@click.option("--notes", default=None, help="Admin notes to store with the change.")
@click.pass_obj
def inquiry_status(
    config: AppConfig,
    inquiry_id: str,
    new_status: str,
    notes: str | None,
) -> None:
    """Change an inquiry's status (Completed deducts stock)."""
    payload = {"status": new_status}
    if notes is not None:
        payload["adminNotes"] = notes
    handler = UpdateInquiryHandler(unit_of_work_factory(config))

    try:
        dto = asyncio.run(handler.handle(inquiry_id, payload))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inquiry {dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "inquiry_id", required=True, help="Inquiry ID to delete.")
@click.pass_obj
def inquiry_delete(config: AppConfig, inquiry_id: str) -> None:
    """Delete an inquiry (stock is not restored)."""
    handler = DeleteInquiryHandler(unit_of_work_factory(config))

    try:
        asyncio.run(handler.handle(inquiry_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inquiry {inquiry_id} deleted.")
