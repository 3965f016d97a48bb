"""
Typed records for the JSON genealogy input.

The JSON tree is mapped once into these dataclasses; the GEDCOM builder only
ever reads them. Optional JSON fields become ``None`` (or empty lists), so the
builder is plain conditional field access.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from json2ged.core.exceptions import MissingIdentifierError
from json2ged.logging import get_logger

log = get_logger(__name__)


# -----------------------------
# Scalar helpers
# -----------------------------

def as_text(value: Any) -> str:
    """
    Render a JSON scalar as GEDCOM text.

    Strings pass through; booleans become ``true``/``false``; JSON ``null``
    becomes ``null``; containers have no text form and render as "".
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return float_text(value)
    if isinstance(value, int):
        return str(value)
    return ""


def float_text(value: float) -> str:
    """
    Render a float the way a JVM double prints.

    Plain notation for 1e-3 <= |x| < 1e7 (``1234.5``, ``1000000.0``), otherwise
    one leading digit and an ``E`` exponent (``1.0E16``, ``1.5E-5``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)

    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    scale = len(digits) + exponent - 1
    significant = "".join(map(str, digits)).rstrip("0")
    mantissa = significant[0] + "." + (significant[1:] or "0")
    return f"{'-' if sign else ''}{mantissa}E{scale}"


def raw_json(value: Any) -> str:
    """Compact JSON rendering of a raw record, for diagnostics."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _optional_text(record: Dict[str, Any], key: str) -> Optional[str]:
    # Present-with-null still counts as present.
    if key not in record:
        return None
    return as_text(record[key])


def _text_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [as_text(v) for v in value]


def _object(value: Any) -> Optional[Dict[str, Any]]:
    return value if isinstance(value, dict) else None


# -----------------------------
# Records
# -----------------------------

@dataclass(slots=True)
class EventRecord:
    """Dated, placed event (BIRT / DEAT / MARR)."""
    date: Optional[str] = None
    place: Optional[str] = None

    @classmethod
    def from_json(cls, value: Any) -> Optional["EventRecord"]:
        obj = _object(value)
        if obj is None:
            return None
        return cls(
            date=_optional_text(obj, "date"),
            place=_optional_text(obj, "place"),
        )


@dataclass(slots=True)
class IndividualRecord:
    id: str
    name: Optional[str] = None
    sex: Optional[str] = None
    birth: Optional[EventRecord] = None
    death: Optional[EventRecord] = None
    families_as_spouse: List[str] = field(default_factory=list)
    families_as_child: List[str] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, value: Any) -> Optional["IndividualRecord"]:
        """
        Build an individual, or return None when the entry has no 'id'.

        Non-object entries have no 'id' either and are treated the same way.
        """
        obj = _object(value)
        if obj is None or "id" not in obj:
            return None

        events = _object(obj.get("events")) or {}
        return cls(
            id=as_text(obj["id"]),
            name=_optional_text(obj, "name"),
            sex=_optional_text(obj, "sex"),
            birth=EventRecord.from_json(events.get("birth")),
            death=EventRecord.from_json(events.get("death")),
            families_as_spouse=_text_list(obj.get("families_as_spouse")),
            families_as_child=_text_list(obj.get("families_as_child")),
            raw=obj,
        )


@dataclass(slots=True)
class FamilyRecord:
    id: str
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marriage: Optional[EventRecord] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, key: str, value: Any) -> "FamilyRecord":
        """Build a family. A missing 'id' is fatal."""
        obj = _object(value)
        if obj is None or "id" not in obj:
            raise MissingIdentifierError(key, value)

        events = _object(obj.get("events")) or {}
        return cls(
            id=as_text(obj["id"]),
            husband=_optional_text(obj, "husband"),
            wife=_optional_text(obj, "wife"),
            children=_text_list(obj.get("children")),
            marriage=EventRecord.from_json(events.get("marriage")),
            raw=obj,
        )


@dataclass(slots=True)
class Dataset:
    """
    One conversion's worth of records, in source mapping order.

    ``skipped`` keeps the raw individual entries that were dropped for
    lacking an 'id'.
    """
    individuals: List[IndividualRecord] = field(default_factory=list)
    families: List[FamilyRecord] = field(default_factory=list)
    skipped: List[Any] = field(default_factory=list)

    @classmethod
    def from_json(cls, root: Any) -> "Dataset":
        dataset = cls()
        root = _object(root) or {}

        for key, value in (_object(root.get("individuals")) or {}).items():
            indi = IndividualRecord.from_json(value)
            if indi is None:
                log.warning(
                    "Missing attribute 'id' for individual, skipping '%s'.",
                    raw_json(value),
                )
                dataset.skipped.append(value)
                continue
            dataset.individuals.append(indi)

        for key, value in (_object(root.get("families")) or {}).items():
            dataset.families.append(FamilyRecord.from_json(key, value))

        log.debug(
            "Dataset mapped (INDI=%d, FAM=%d, skipped=%d)",
            len(dataset.individuals),
            len(dataset.families),
            len(dataset.skipped),
        )
        return dataset
