"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CURRENCY_PREFIX = "R.s"


@dataclass(frozen=True)
class LedgerApiSettings:
    """Settings for reaching the document data service.

    Attributes:
        api_url: Base URL of the REST API, without trailing slash.
        timeout: Request timeout in seconds.
        currency_prefix: Prefix used when formatting amounts for display.
    """

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    currency_prefix: str = DEFAULT_CURRENCY_PREFIX

    @classmethod
    def from_env(cls) -> "LedgerApiSettings":
        """Build settings from environment variables.

        Returns:
            LedgerApiSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        api_url = os.getenv("LEDGER_API_URL", DEFAULT_API_URL).strip()
        timeout = cls._parse_timeout(
            os.getenv("LEDGER_API_TIMEOUT"),
            logger=logger,
        )
        currency_prefix = os.getenv(
            "LEDGER_CURRENCY_PREFIX",
            DEFAULT_CURRENCY_PREFIX,
        )
        return cls(
            api_url=(api_url or DEFAULT_API_URL).rstrip("/"),
            timeout=timeout,
            currency_prefix=currency_prefix,
        )

    @staticmethod
    def _parse_timeout(raw_timeout: str | None, logger) -> float:
        """Parse the request timeout, falling back to the default.

        Args:
            raw_timeout: Raw timeout string from the environment.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_timeout:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_API_TIMEOUT '{raw_timeout}'. "
                f"Using {DEFAULT_TIMEOUT_SECONDS}s."
            )
            return DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            logger.warning(
                f"LEDGER_API_TIMEOUT must be positive, got {timeout}. "
                f"Using {DEFAULT_TIMEOUT_SECONDS}s."
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


__all__ = ["LedgerApiSettings"]
