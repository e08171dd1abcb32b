# edgeblog/utils/identifiers.py
from edgeblog.errors import ValidationError


def parse_id(value, label="ID"):
    """Convierte un identificador de la URL o del body en int, o lanza ValidationError."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}.")
    if isinstance(value, int):
        if value > 0:
            return value
        raise ValidationError(f"Invalid {label}.")

    text = str(value or "").strip()
    if not text.isascii() or not text.isdigit() or int(text) == 0:
        raise ValidationError(f"Invalid {label}.")
    return int(text)

