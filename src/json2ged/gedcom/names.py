from __future__ import annotations

from typing import Tuple

# Characters removed by a trim: everything at or below U+0020.
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a free-text name into (given, surname).

    The last space-separated field is the surname; the given part is what
    precedes it, trimmed. Trailing empty fields are discarded before picking
    the surname, but the given part is still cut by the surname's length from
    the end of the original string.

        "Anna Maria Müller" -> ("Anna Maria", "Müller")
        "Cher"              -> ("", "Cher")
    """
    parts = name.split(" ")
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()

    surname = parts[-1]
    given = name[: len(name) - len(surname)].strip(_TRIM_CHARS)
    return given, surname


def format_name(name: str) -> str:
    """
    Render a name as a GEDCOM NAME value: ``<given> /<surname>/``.

    An empty given part drops the separating space: ``/Cher/``.
    """
    given, surname = split_name(name)
    if not given:
        return f"/{surname}/"
    return f"{given} /{surname}/"
