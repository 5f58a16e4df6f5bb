"""
Dig & Bust - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""


def validate_probability(value: float, name: str = "Probability") -> float:
    """
    Validate a probability value.

    Args:
        value: Probability to validate
        name: Field name used in the error message

    Returns:
        Validated probability as a float

    Raises:
        ValueError: If value is not a number in [0, 1]
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {type(value).__name__}.")

    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be between 0 and 1, got {value}.")

    return float(value)


def validate_non_negative(value: int, name: str = "Value") -> int:
    """
    Validate a non-negative integer.

    Args:
        value: Integer to validate
        name: Field name used in the error message

    Returns:
        Validated integer

    Raises:
        ValueError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}.")

    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}.")

    return value


def validate_attempts(attempts: int) -> int:
    """Validate an attempt count (non-negative integer)."""
    return validate_non_negative(attempts, "Attempt count")


def validate_score(score: int) -> int:
    """Validate a score value (non-negative integer)."""
    return validate_non_negative(score, "Score")
