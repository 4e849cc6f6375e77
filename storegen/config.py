"""
Configuration module for the generation commands.

Reads environment variables (optionally from a local .env file) and exposes
the backend import path, progress display preference and the documented
command defaults.
"""

import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

"""
Injects environment variables from a .env file in the working directory.

Variables already present in the environment are never overwritten, so shell
exports always win over the file.
"""
env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=False)


def _env_flag(name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.

    Args:
        name: Environment variable name.
        default: Value used when the variable is unset or blank.

    Returns:
        bool: True for 1/true/yes/on (case-insensitive), False otherwise.
    """
    value = os.getenv(name, "").strip().lower()
    if not value:
        return default
    return value in ("1", "true", "yes", "on")


class Config:
    """
    Configuration class that reads environment variables for the generate commands.
    """

    # Backend Configuration
    BACKEND: str = os.getenv("STOREGEN_BACKEND", "")

    # Output Configuration
    SHOW_PROGRESS: bool = _env_flag("STOREGEN_SHOW_PROGRESS", True)

    # Command defaults
    DEFAULT_PRODUCTS: int = 100
    DEFAULT_ORDERS: int = 100
    DEFAULT_CUSTOMERS: int = 100
    DEFAULT_COUPONS: int = 10
    DEFAULT_TERMS: int = 10

    COUPON_MIN: int = 5
    COUPON_MAX: int = 100

    TAXONOMIES: Tuple[str, ...] = ("product_cat", "product_tag")
    MAX_DEPTH_CHOICES: Tuple[int, ...] = (1, 2, 3, 4, 5)
    TERM_MAX_DEPTH: int = 1
    TERM_PARENT: int = 0

    # Image pool pre-seeding bounds for product generation
    IMAGE_POOL_MIN: int = 20
    IMAGE_POOL_MAX: int = 100

    @classmethod
    def validate(cls) -> None:
        """
        Validate that required configuration values are present.

        Raises:
            ValueError: If any required configuration is missing.
        """
        required_vars = [
            ("STOREGEN_BACKEND", cls.BACKEND),
        ]

        missing = [name for name, value in required_vars if not value]
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

    @classmethod
    def image_pool_size(cls, amount: int) -> int:
        """
        Size of the shared image pool to pre-generate before creating products.

        Args:
            amount: Number of products about to be generated.

        Returns:
            int: amount + 19, capped at IMAGE_POOL_MAX.
        """
        return min(amount + cls.IMAGE_POOL_MIN - 1, cls.IMAGE_POOL_MAX)
