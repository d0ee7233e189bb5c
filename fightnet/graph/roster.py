"""Default fighter roster and bouts.

Reach and height are recorded in inches by the source records and
stored in centimetres.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .builder import build_graph
from .store import Graph


def inches_to_cm(inches: int) -> int:
    return round(inches * 2.54)


def fighter(
    name: str,
    reach_in: Optional[int] = None,
    height_in: Optional[int] = None,
    weight_class: str = "unknown",
    organization: str = "UFC",
) -> Dict[str, Any]:
    """Node spec for a fighter, suitable for ``build_graph``."""
    return {
        "name": name,
        "reach_cm": inches_to_cm(reach_in) if reach_in is not None else None,
        "height_cm": inches_to_cm(height_in) if height_in is not None else None,
        "weight_class": weight_class,
        "organization": organization,
    }


FIGHTERS: List[Dict[str, Any]] = [
    fighter("Dustin Poirier", 72, 70, "Lightweight"),
    fighter("Khabib Nurmagomedov", 70, 70, "Lightweight"),
    fighter("Jose Aldo", 70, 67, "Featherweight"),
    fighter("Conor McGregor", 74, 69, "Lightweight"),
    fighter("Nate Diaz", 76, 72, "Welterweight"),
]

BOUTS: List[Tuple[str, str]] = [
    ("Dustin Poirier", "Khabib Nurmagomedov"),
    ("Khabib Nurmagomedov", "Conor McGregor"),
    ("Conor McGregor", "Dustin Poirier"),
    ("Conor McGregor", "Jose Aldo"),
    ("Conor McGregor", "Nate Diaz"),
    ("Nate Diaz", "Dustin Poirier"),
    ("Jose Aldo", "Nate Diaz"),
]

# Mutations applied on top of the roster by the default session.
DEFAULT_MUTATIONS: List[str] = [
    "add edge Khabib Nurmagomedov:Conor McGregor",
    "add edge Jose Aldo:Jose Aldo",
    "add node Max Holloway",
    "add edge Max Holloway:Conor McGregor",
    "remove edge Conor McGregor:Dustin Poirier",
    "remove node Jose Aldo",
]


def default_roster(default_weight: float = 1.0) -> Graph:
    """Build the five-fighter network with one unit-weight edge per bout."""
    return build_graph(FIGHTERS, BOUTS, default_weight=default_weight)
