"""Runtime configuration read from the environment."""

import logging
import math
import os
from typing import Optional

from ecomcalc.domain.errors import ConfigurationError, invalid_vat_rate
from ecomcalc.domain.metrics import DEFAULT_VAT_RATE

VAT_RATE_ENV = "ECOMCALC_VAT_RATE"
LOG_LEVEL_ENV = "ECOMCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_vat_rate(vat_rate: Optional[float | str] = None) -> float:
    """Resolve the VAT rate.

    Args:
        vat_rate: Explicit rate. If None, checks ECOMCALC_VAT_RATE
            environment variable, then defaults to 0.21

    Returns:
        VAT rate as a fraction

    Raises:
        ConfigurationError: If the rate is not a number in [0, 1)
    """
    if vat_rate is None:
        vat_rate = os.environ.get(VAT_RATE_ENV)

    if vat_rate is None or vat_rate == "":
        return DEFAULT_VAT_RATE

    try:
        rate = float(vat_rate)
    except (TypeError, ValueError):
        raise ConfigurationError(invalid_vat_rate(vat_rate))

    if not math.isfinite(rate) or not 0 <= rate < 1:
        raise ConfigurationError(invalid_vat_rate(vat_rate))
    return rate


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command line use.

    Args:
        level: Level name. If None, checks ECOMCALC_LOG_LEVEL environment
            variable, then defaults to WARNING

    Raises:
        ConfigurationError: If the level name is unknown
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level '{level}'")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
