"""Dashboard configuration with environment-variable overrides.

Every value has a default; an unparsable override is logged and ignored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from src.calculations.balances import DEFAULT_INVESTED_TYPES
from src.calculations.projection import DEFAULT_PROJECTION_YEARS
from src.calculations.scale import DEFAULT_HEIGHT, DEFAULT_PADDING, DEFAULT_WIDTH
from src.models.ledger import ACCOUNT_TYPES
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

ENV_PREFIX = 'FINTRACK_'
APP_VERSION = '0.1.0'


@dataclass(frozen=True)
class DashboardSettings:
    projection_years: int = DEFAULT_PROJECTION_YEARS
    annual_contribution: float = 0.0
    invested_account_types: tuple[str, ...] = field(default=DEFAULT_INVESTED_TYPES)
    currency: str = 'USD'
    chart_width: float = DEFAULT_WIDTH
    chart_height: float = DEFAULT_HEIGHT
    chart_padding: float = DEFAULT_PADDING
    log_level: str = 'INFO'


def _env(name: str) -> str | None:
    raw = os.getenv(f'{ENV_PREFIX}{name}')
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_number(name: str, default: float, *, cast=float, minimum: float | None = None):
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except ValueError:
        LOGGER.warning('Ignoring %s%s=%r: not a number.', ENV_PREFIX, name, raw)
        return default
    if minimum is not None and value < minimum:
        LOGGER.warning('Ignoring %s%s=%r: below minimum %s.', ENV_PREFIX, name, raw, minimum)
        return default
    return value


def _env_account_types(default: tuple[str, ...]) -> tuple[str, ...]:
    raw = _env('INVESTED_ACCOUNT_TYPES')
    if raw is None:
        return default
    kinds = tuple(k.strip() for k in raw.split(',') if k.strip() in ACCOUNT_TYPES)
    if not kinds:
        LOGGER.warning('Ignoring %sINVESTED_ACCOUNT_TYPES=%r: no known account types.', ENV_PREFIX, raw)
        return default
    return kinds


def load_settings() -> DashboardSettings:
    """Build settings from defaults and `FINTRACK_*` environment variables."""
    base = DashboardSettings()
    return DashboardSettings(
        projection_years=_env_number('PROJECTION_YEARS', base.projection_years, cast=int, minimum=0),
        annual_contribution=_env_number('ANNUAL_CONTRIBUTION', base.annual_contribution),
        invested_account_types=_env_account_types(base.invested_account_types),
        currency=(_env('CURRENCY') or base.currency).upper(),
        chart_width=_env_number('CHART_WIDTH', base.chart_width, minimum=1.0),
        chart_height=_env_number('CHART_HEIGHT', base.chart_height, minimum=1.0),
        chart_padding=_env_number('CHART_PADDING', base.chart_padding, minimum=0.0),
        log_level=(_env('LOG_LEVEL') or base.log_level).upper(),
    )
