"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.application.add_product import AddProductHandler
from storefront.application.create_inquiry import CreateInquiryHandler
from storefront.application.delete_inquiry import DeleteInquiryHandler
from storefront.application.list_inquiries import ListInquiriesHandler
from storefront.application.notifier import InquiryNotifier
from storefront.application.set_stock import SetStockHandler
from storefront.application.show_inquiry import ShowInquiryHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_inquiry import UpdateInquiryHandler
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.infrastructure.config import AppConfig, NotificationConfig
from storefront.infrastructure.notifications.whatsapp import (
    LoggingNotifier,
    WhatsAppNotifier,
)
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

logger = logging.getLogger(__name__)


@dataclass
class Handlers:
    """One instance of every use case, sharing the same dependencies."""

    create_inquiry: CreateInquiryHandler
    list_inquiries: ListInquiriesHandler
    show_inquiry: ShowInquiryHandler
    update_inquiry: UpdateInquiryHandler
    delete_inquiry: DeleteInquiryHandler
    add_product: AddProductHandler
    show_product: ShowProductHandler
    set_stock: SetStockHandler
    notifier: InquiryNotifier

    @staticmethod
    def build(uow_factory: UnitOfWorkFactory, notifier: InquiryNotifier) -> Handlers:
        return Handlers(
            create_inquiry=CreateInquiryHandler(uow_factory, notifier),
            list_inquiries=ListInquiriesHandler(uow_factory),
            show_inquiry=ShowInquiryHandler(uow_factory),
            update_inquiry=UpdateInquiryHandler(uow_factory),
            delete_inquiry=DeleteInquiryHandler(uow_factory),
            add_product=AddProductHandler(uow_factory),
            show_product=ShowProductHandler(uow_factory),
            set_stock=SetStockHandler(uow_factory),
            notifier=notifier,
        )


def unit_of_work_factory(config: AppConfig) -> UnitOfWorkFactory:
    store = JsonDocumentStore(config.data_file)
    return lambda: JsonUnitOfWork(store)


def notifier(config: NotificationConfig) -> InquiryNotifier:
    if not config.enabled:
        logger.warning("MSG91 auth key is not configured. WhatsApp messages will not be sent.")
        return LoggingNotifier()
    return WhatsAppNotifier(config)


def handlers(config: AppConfig) -> Handlers:
    return Handlers.build(unit_of_work_factory(config), notifier(config.notification))
