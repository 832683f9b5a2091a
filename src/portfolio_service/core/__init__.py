"""Core utilities and shared functionality."""

from portfolio_service.core.timezone import (
    now_utc,
    to_utc,
    utc_start_of_day,
    parse_datetime_utc,
    UTC_TZ,
)
from portfolio_service.core.exceptions import (
    AppError,
    InvalidQuantityError,
    SymbolNotFoundError,
    DateNotFoundError,
    NoSuchHoldingError,
    BucketAlreadyExistsError,
    BucketNotFoundError,
    EmptyBucketSetError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "utc_start_of_day",
    "parse_datetime_utc",
    "UTC_TZ",
    "AppError",
    "InvalidQuantityError",
    "SymbolNotFoundError",
    "DateNotFoundError",
    "NoSuchHoldingError",
    "BucketAlreadyExistsError",
    "BucketNotFoundError",
    "EmptyBucketSetError",
]
