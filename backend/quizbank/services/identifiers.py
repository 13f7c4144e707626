"""
Matiere id format: literal INF followed by exactly three ASCII digits (e.g. INF111).
"""
import re

MATIERE_ID_PATTERN = re.compile(r"INF[0-9]{3}")


def is_valid_matiere_id(value) -> bool:
    """True only for a str that is INF + 3 digits and nothing else."""
    if not isinstance(value, str):
        return False
    return MATIERE_ID_PATTERN.fullmatch(value) is not None
