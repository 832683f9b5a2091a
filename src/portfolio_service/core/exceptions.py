"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(self, message: str, code: str = "APP_ERROR", status_code: Optional[int] = None):
        self.message = message
        self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidQuantityError(AppError):
    """Raised when an order quantity is not a positive integer."""

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(
            f"Quantity must be positive: {quantity}",
            code="Order:InvalidQuantity",
            status_code=400,
        )


class SymbolNotFoundError(AppError):
    """Raised when no market data exists for a symbol, even after a refresh."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(
            f"No market data exists for the specified symbol: {symbol}",
            code="Data:SymbolNotFound",
            status_code=404,
        )


class DateNotFoundError(AppError):
    """Raised when a symbol has market data, but not for the requested date."""

    def __init__(self, symbol: str, date: str):
        self.symbol = symbol
        self.date = date
        super().__init__(
            f"No price for {symbol} on {date}",
            code="Date:DateNotFound",
            status_code=404,
        )


class NoSuchHoldingError(AppError):
    """Raised when an operation references a symbol with no open position."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(
            f"User does not hold specified symbol: {symbol}",
            code="Holding:NoSuchHolding",
            status_code=404,
        )


class BucketAlreadyExistsError(AppError):
    """Raised when creating a bucket whose name is taken."""

    def __init__(self, bucket: str):
        self.bucket = bucket
        super().__init__(
            f"Bucket with the given name already exists: {bucket}",
            code="Bucket:BucketCreationFailed",
            status_code=409,
        )


class BucketNotFoundError(AppError):
    """Raised when a bucket was never created (or has been deleted)."""

    def __init__(self, bucket: str):
        self.bucket = bucket
        super().__init__(
            f"Bucket not found: {bucket}",
            code="Bucket:BucketNotFound",
            status_code=404,
        )


class EmptyBucketSetError(AppError):
    """Raised when a bucket update request carries no buckets."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(
            f"The bucket set must be non-empty (symbol {symbol})",
            code="Bucket:BucketSetEmpty",
            status_code=400,
        )
