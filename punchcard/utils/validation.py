from punchcard.exceptions import MissingFieldsError


def is_missing(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(data, required_fields):
    """Raise MissingFieldsError listing every required field that is absent or blank."""
    data = data or {}
    missing = [field for field in required_fields if is_missing(data.get(field))]
    if missing:
        raise MissingFieldsError(missing)


def parse_whole_number(value):
    """Return ``value`` as an int, or None when it is not a whole number.

    Numeric strings are accepted. Booleans and floats with a fractional
    part are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
