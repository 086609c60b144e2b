"""API error types for the order-book endpoints."""

from dataclasses import dataclass


class ApiError(Exception):
    """Base exception for API errors."""

    status = 500


class BadRequestError(ApiError):
    """Invalid request (400)."""

    status = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Bad request: {message}")


class InvalidParameterError(ApiError):
    """Invalid parameter provided."""

    status = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid parameter: {message}")


class DeserializeError(ApiError):
    """JSON deserialization error."""

    status = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Deserialization error: {message}")


class InsufficientBalanceError(ApiError):
    """The transactor cannot cover an order's selling amount."""

    status = 400

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        self.message = "Insufficient balance to open order"
        super().__init__(
            f"{self.message}: required={required}, available={available}"
        )


class ViewError(ApiError):
    """The blockchain view failed to answer a query."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"View error: {message}")


@dataclass
class ErrorResponse:
    """Error body returned by the endpoints."""

    error: str

    def to_dict(self) -> dict:
        return {"error": self.error}
