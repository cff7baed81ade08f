"""Port for customer notifications sent after an inquiry is created."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.inquiry import Inquiry
from storefront.domain.model.product import Product


class InquiryNotifier(ABC):

    @abstractmethod
    async def send_inquiry_thank_you(self, inquiry: Inquiry, product: Product) -> None:
        """Tell the customer their inquiry was received.

        Implementations raise on delivery failure; callers decide
        whether that matters.
        """
