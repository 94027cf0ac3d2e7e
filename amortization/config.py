import logging
from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "AMORTIZATION_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Fraction of the original principal allowed to remain unpaid after the
    # last month. Cent rounding of each interest charge leaves a residue.
    residual_tolerance: Decimal = Field(Decimal("0.01"), gt=0, lt=1)

    # App
    log_level: str = "WARNING"


settings = Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Apply settings.log_level (or an explicit level) to the package logger.

    The library never installs handlers itself; applications call this when
    they want the engine's debug output.
    """
    logger = logging.getLogger("amortization")
    logger.setLevel((level or settings.log_level).upper())
    return logger
