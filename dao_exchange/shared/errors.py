"""Custom exceptions for the exchange arithmetic."""


class ExchangeArithmeticError(Exception):
    """Base exception for all exchange arithmetic errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidDecimalFormatError(ExchangeArithmeticError):
    """Raised when a value is not a plain decimal numeral."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid decimal format: {value!r}")


class ScaledValueOverflowError(ExchangeArithmeticError):
    """Raised when a scaled value does not fit in 256 bits."""

    def __init__(self, value, operation: str):
        self.value = value
        self.operation = operation
        super().__init__(f"Overflow when {operation} {value}")


class ScaledValueUnderflowError(ExchangeArithmeticError):
    """Raised when a nonzero quantity or rate rounds down to zero."""

    def __init__(self, value, operation: str):
        self.value = value
        self.operation = operation
        super().__init__(f"{value} is too small when {operation}")


class UnknownEnumValueError(ExchangeArithmeticError):
    """Raised when an operation type or fill type is not recognized."""

    def __init__(self, enum_name: str, value):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Unknown {enum_name} {value!r}")


class InvalidCoinPairError(ExchangeArithmeticError):
    """Raised when both sides of a pair are the native coin."""

    def __init__(self):
        super().__init__("A coin pair cannot have $DESO on both sides")
