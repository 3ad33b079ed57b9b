"""
Court-name parsing and ordering.

Court names are free text; a leading "H" marks a hard court ("H1", "h2"),
anything else is grass. Works on plain strings only so the models can
import it.
"""
import re
from typing import List, Optional, Sequence, Union


def parse_court_names(court_names: Optional[Union[str, List[str]]]) -> List[str]:
    """
    Normalize court_names to a list of non-empty strings.

    - None or "" -> []
    - String (e.g. "1,H2,3") -> split on commas, strip whitespace, drop empties
    - List -> coerce each to str(x).strip(), drop empties
    """
    if court_names is None:
        return []
    if isinstance(court_names, str):
        return [x.strip() for x in court_names.split(",") if x.strip()]
    return [str(x).strip() for x in court_names if str(x).strip()]


def is_hard_court(court_name: str) -> bool:
    return court_name.strip().upper().startswith("H")


def _court_number(court_name: str) -> int:
    digits = re.sub(r"[^0-9]", "", court_name)
    return int(digits) if digits else 0


def sort_courts(court_names: Sequence[str]) -> List[str]:
    """Grass courts first, then hard; numeric order within each surface."""
    return sorted(court_names, key=lambda name: (is_hard_court(name), _court_number(name)))
