"""Field validation helpers shared by record types.

Text bounds are measured in UTF-8 encoded bytes, the unit the binary format
stores, so every value accepted here also fits its on-disk length bound.
"""

from .errors import ValidationError


def encoded_length(text: str) -> int:
    """Return the number of bytes ``text`` occupies on disk."""
    return len(text.encode("utf-8"))


def validate_bounded_text(
    value: str, field_name: str, max_length: int, allow_empty: bool = False
) -> str:
    """Validate that text is present (unless allowed empty) and within bounds."""
    if not isinstance(value, str):
        raise ValidationError(field_name, "must be a string")
    if not value and not allow_empty:
        raise ValidationError(field_name, "cannot be empty")
    try:
        length = encoded_length(value)
    except UnicodeEncodeError:
        raise ValidationError(field_name, "is not valid UTF-8 text") from None
    if length > max_length:
        raise ValidationError(field_name, f"cannot exceed {max_length} characters")
    return value


def validate_number_range(
    value: int, field_name: str, minimum: int, maximum: int
) -> int:
    """Validate that an integer lies within ``[minimum, maximum]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field_name, "must be an integer")
    if value < minimum:
        raise ValidationError(field_name, f"cannot be less than {minimum}")
    if value > maximum:
        raise ValidationError(field_name, f"cannot exceed {maximum}")
    return value
