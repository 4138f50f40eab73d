import os
from decimal import Decimal

from pydantic import BaseModel, Field


class Settings(BaseModel):
    # SQLAlchemy URL of the bookstore database
    DATABASE_URL: str = Field(
        default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///data/bookstore.db")
    )
    SQL_ECHO: bool = Field(
        default_factory=lambda: os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
    )

    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # Flat per-cart surcharge applied when the CLI builds a cart
    CART_SURCHARGE: Decimal = Field(
        default_factory=lambda: Decimal(os.getenv("CART_SURCHARGE", "5.00"))
    )


def get_settings() -> Settings:
    # re-reads the environment on every call so tests can override it
    return Settings()
