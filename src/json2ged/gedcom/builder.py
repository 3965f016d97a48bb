"""
builder.py
Maps a Dataset onto GEDCOM 5.5.1 lines.

PURE:
  - no filesystem access
  - no cross-record validation (dangling @id@ pointers are emitted as-is)

Lines are ``<level> <tag> [value]`` without terminators; ``render`` joins them.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from json2ged.gedcom.names import format_name
from json2ged.logging import get_logger
from json2ged.models import Dataset, EventRecord, FamilyRecord, IndividualRecord

log = get_logger(__name__)

HEADER_LINES = (
    "0 HEAD",
    "1 SOUR JSON2GED",
    "1 GEDC",
    "2 VERS 5.5.1",
    "2 FORM LINEAGE-LINKED",
    "1 CHAR UTF-8",
)
TRAILER_LINE = "0 TRLR"
LINE_TERMINATOR = "\n"


def pointer(xref: str) -> str:
    return f"@{xref}@"


def line(level: int, tag: str, value: Optional[str] = None) -> str:
    if value is None:
        return f"{level} {tag}"
    return f"{level} {tag} {value}"


def _event_lines(tag: str, event: Optional[EventRecord]) -> Iterator[str]:
    if event is None:
        return
    yield line(1, tag)
    if event.date is not None:
        yield line(2, "DATE", event.date)
    if event.place is not None:
        yield line(2, "PLAC", event.place)


def individual_lines(indi: IndividualRecord) -> Iterator[str]:
    """INDI record: NAME, SEX, BIRT, DEAT, FAMS*, FAMC*."""
    yield f"0 {pointer(indi.id)} INDI"

    if indi.name is not None:
        yield line(1, "NAME", format_name(indi.name))
    if indi.sex is not None:
        yield line(1, "SEX", indi.sex)

    yield from _event_lines("BIRT", indi.birth)
    yield from _event_lines("DEAT", indi.death)

    for fam_id in indi.families_as_spouse:
        yield line(1, "FAMS", pointer(fam_id))
    for fam_id in indi.families_as_child:
        yield line(1, "FAMC", pointer(fam_id))


def family_lines(fam: FamilyRecord) -> Iterator[str]:
    """FAM record: HUSB, WIFE, CHIL*, MARR."""
    yield f"0 {pointer(fam.id)} FAM"

    if fam.husband is not None:
        yield line(1, "HUSB", pointer(fam.husband))
    if fam.wife is not None:
        yield line(1, "WIFE", pointer(fam.wife))

    for child_id in fam.children:
        yield line(1, "CHIL", pointer(child_id))

    yield from _event_lines("MARR", fam.marriage)


def build_lines(dataset: Dataset) -> List[str]:
    """Full GEDCOM line sequence: header, individuals, families, trailer."""
    lines: List[str] = list(HEADER_LINES)

    for indi in dataset.individuals:
        lines.extend(individual_lines(indi))
    for fam in dataset.families:
        lines.extend(family_lines(fam))

    lines.append(TRAILER_LINE)

    log.debug(
        "Built %d GEDCOM lines (INDI=%d, FAM=%d)",
        len(lines),
        len(dataset.individuals),
        len(dataset.families),
    )
    return lines


def render(lines: List[str]) -> str:
    """Join lines into the final text; the trailer line is terminated too."""
    return LINE_TERMINATOR.join(lines) + LINE_TERMINATOR
