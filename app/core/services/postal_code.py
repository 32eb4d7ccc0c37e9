import re

POSTAL_CODE_PATTERN = re.compile(r"^[0-9]{5}-?[0-9]{3}$")
_NON_DIGITS = re.compile(r"[^0-9]")


def is_valid_postal_code(value: str) -> bool:
    """Check a CEP against the `NNNNN-NNN` / `NNNNNNNN` syntax, ignoring surrounding whitespace."""
    if not isinstance(value, str):
        return False
    return POSTAL_CODE_PATTERN.fullmatch(value.strip()) is not None


def normalize_postal_code(value: str) -> str:
    """Strip every non-digit character. Validate with `is_valid_postal_code` first."""
    return _NON_DIGITS.sub("", value)
