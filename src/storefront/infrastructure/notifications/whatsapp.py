"""
WhatsApp notifications through the MSG91 outbound template API.

Sends the "thank you for your inquiry" template to the customer's
WhatsApp number once an inquiry has been stored.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

import httpx

from storefront.application.notifier import InquiryNotifier
from storefront.domain.model.inquiry import Inquiry
from storefront.domain.model.product import Product
from storefront.infrastructure.config import NotificationConfig

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "https://via.placeholder.com/800x600"


class NotificationError(Exception):
    """The notification could not be delivered."""


def format_phone_number(phone_number: str) -> str:
    """Normalise to the digits-only, country-prefixed form MSG91 expects.

    10-digit local numbers get the Indian ``91`` prefix; anything else is
    assumed to already carry a country code.
    """
    cleaned = re.sub(r"\D", "", phone_number)
    if len(cleaned) == 10:
        return f"91{cleaned}"
    return cleaned


class WhatsAppNotifier(InquiryNotifier):
    """MSG91 WhatsApp client"""

    def __init__(
        self,
        config: NotificationConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.client = client or httpx.AsyncClient(timeout=config.timeout)
        if not config.integrated_number:
            logger.warning("MSG91 integrated number is not configured")

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =============================================================================
    # Messages
    # =============================================================================

    async def send_inquiry_thank_you(self, inquiry: Inquiry, product: Product) -> None:
        if not self.config.auth_key:
            raise NotificationError("MSG91 auth key is not configured")

        phone = format_phone_number(inquiry.whatsapp_number)
        payload = {
            "integrated_number": self.config.integrated_number,
            "content_type": "template",
            "payload": {
                "messaging_product": "whatsapp",
                "type": "template",
                "template": {
                    "name": self.config.template_name,
                    "language": {"code": "en", "policy": "deterministic"},
                    "namespace": self.config.namespace,
                    "to_and_components": [
                        {
                            "to": [phone],
                            "components": self.build_components(inquiry, product),
                        }
                    ],
                },
            },
        }

        await self._post(payload)
        logger.info(f"WhatsApp message sent for inquiry {inquiry.id} to {phone}")

    def build_components(self, inquiry: Inquiry, product: Product) -> Dict[str, Any]:
        """Template variables: product image, customer, product, price, UPI id."""
        return {
            "header_1": {
                "type": "image",
                "value": inquiry.product_image or PLACEHOLDER_IMAGE,
            },
            "body_1": {"type": "text", "value": inquiry.user_name or "Valued Customer"},
            "body_2": {"type": "text", "value": product.name or "Product"},
            "body_3": {"type": "text", "value": str(product.price_for(inquiry.variant))},
            "body_4": {"type": "text", "value": self.config.upi_id},
        }

    async def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json", "authkey": self.config.auth_key}
        try:
            response = await self.client.post(self.config.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise NotificationError(f"Unable to connect to MSG91 API: {e}") from e

        if response.status_code >= 400:
            raise NotificationError(
                f"MSG91 API error: {response.status_code} - {response.text}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise NotificationError(
                f"MSG91 API returned a non-JSON response: {response.text[:200]}"
            ) from e
        if not isinstance(result, dict):
            raise NotificationError(f"MSG91 API returned an unexpected response: {result!r}")
        if result.get("type") == "error":
            raise NotificationError(f"MSG91 API error: {result.get('message', 'Unknown error')}")
        return result


class LoggingNotifier(InquiryNotifier):
    """Stand-in used when WhatsApp delivery is not configured."""

    async def send_inquiry_thank_you(self, inquiry: Inquiry, product: Product) -> None:
        logger.info(
            f"Notifications disabled; skipping thank-you for inquiry {inquiry.id} "
            f"({product.name})"
        )
