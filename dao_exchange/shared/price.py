"""Price formatting utilities used by the API layer.

Scaled values are rendered from Python ints, so nothing here loses precision
except where float64 output is explicitly requested.
"""

import math

from .constants import FLOAT64_SUPPORTED_PRECISION_DIGITS
from .errors import InvalidDecimalFormatError


def count_decimal_digits(value: int) -> int:
    """Count the decimal digits of a non-negative integer.

    Zero has no digits, so count_decimal_digits(0) == 0. Callers that pad
    based on the digit count must special-case zero.
    """
    quotient = abs(value)
    num_digits = 0
    while quotient != 0:
        num_digits += 1
        quotient //= 10
    return num_digits


def format_scaled_as_decimal_string(value: int, scaling_factor: int) -> str:
    """Print a value scaled by scaling_factor as a decimal string.

    Ex: value=12345, scaling_factor=100 -> "123.45"

    The decimal part is left-padded with zeros so a remainder of 5 at 1e38
    prints as 37 zeros followed by "5". A zero remainder prints as "0".

    Raises:
        ValueError: If scaling_factor is not positive
    """
    if scaling_factor <= 0:
        raise ValueError(f"Scaling factor must be positive, got {scaling_factor}")

    whole_number, decimal_part = divmod(value, scaling_factor)

    scaling_factor_digits = count_decimal_digits(scaling_factor)
    decimal_part_as_string = str(decimal_part)
    if decimal_part != 0 and len(decimal_part_as_string) != scaling_factor_digits:
        leading_zeros = "0" * (scaling_factor_digits - len(decimal_part_as_string) - 1)
        decimal_part_as_string = leading_zeros + decimal_part_as_string
    return f"{whole_number}.{decimal_part_as_string}"


def format_float_as_decimal_string(value: float) -> str:
    """Format a float with no more digits than float64 can be trusted for.

    If the whole number part has at most 15 digits, the value is printed with
    (15 - whole digits) places after the decimal point. Larger values keep
    their 15 most significant digits, the rest are zeroed and ".0" appended,
    since anything past that is float64 noise.

    Raises:
        InvalidDecimalFormatError: If value is NaN or infinite
    """
    if math.isnan(value) or math.isinf(value):
        raise InvalidDecimalFormatError(value)

    whole_number = int(value)
    num_whole_number_digits = count_decimal_digits(whole_number)
    if num_whole_number_digits <= FLOAT64_SUPPORTED_PRECISION_DIGITS:
        precision = FLOAT64_SUPPORTED_PRECISION_DIGITS - num_whole_number_digits
        return f"{value:.{precision}f}"

    divisor_to_drop_digits = 10 ** (
        num_whole_number_digits - FLOAT64_SUPPORTED_PRECISION_DIGITS
    )
    truncated = abs(whole_number) // divisor_to_drop_digits * divisor_to_drop_digits
    sign = "-" if whole_number < 0 else ""
    return f"{sign}{truncated}.0"


def scaled_value_to_float(value: int, scaling_factor: int) -> float:
    """Convert a scaled value to the nearest float64."""
    return float(format_scaled_as_decimal_string(value, scaling_factor))
