"""
House listing rules.
"""

from typing import Any, Dict, Mapping

# Fields an owner may replace on an existing listing.
EDITABLE_HOUSE_FIELDS = (
    "houseName",
    "bedroomNumber",
    "livingroomNumber",
    "dineNumber",
    "kitchenNumber",
    "bathroomNumber",
    "floorNumber",
    "rentPrice",
)


def editable_fields(submitted: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the replacement set for a listing edit.

    Every editable field is replaced, taking None when the submission omits
    it; anything outside the editable fields is dropped.
    """
    return {name: submitted.get(name) for name in EDITABLE_HOUSE_FIELDS}
