"""Application configuration.

Resolved once from the environment at process start and handed to the
composition root; nothing below it reads ``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

MSG91_BULK_URL = "https://api.msg91.com/api/v5/whatsapp/whatsapp-outbound-message/bulk/"


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class NotificationConfig:
    """MSG91 WhatsApp settings"""

    auth_key: str = ""
    integrated_number: str = ""
    template_name: str = "product_enquiry_thankyou"
    namespace: str = ""
    api_url: str = MSG91_BULK_URL
    upi_id: str = ""
    timeout: float = 30.0

    @property
    def enabled(self) -> bool:
        return bool(self.auth_key)

    @classmethod
    def from_env(cls) -> NotificationConfig:
        return cls(
            auth_key=os.getenv("MSG91_AUTH_KEY") or os.getenv("AuthKey", ""),
            integrated_number=os.getenv("MSG91_INTEGRATED_NUMBER", ""),
            template_name=os.getenv("MSG91_TEMPLATE_NAME", "product_enquiry_thankyou"),
            namespace=os.getenv("MSG91_NAMESPACE", ""),
            api_url=os.getenv("MSG91_API_URL", MSG91_BULK_URL),
            upi_id=os.getenv("UPI_ID", ""),
            timeout=_float(os.getenv("NOTIFICATION_TIMEOUT", ""), 30.0),
        )


@dataclass
class AppConfig:
    data_file: Path = Path("data/storefront.json")
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    notification: NotificationConfig = field(default_factory=NotificationConfig)

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables"""
        return cls(
            data_file=Path(os.getenv("STOREFRONT_DATA_FILE", "data/storefront.json")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int(os.getenv("PORT", ""), 5000),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv(
                "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            notification=NotificationConfig.from_env(),
        )
