from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable

WILDCARD_MARKER = "*."


def normalize_cert_names(names: Iterable[str]) -> list[str]:
    """Strip every ``*.`` marker from certificate names and drop duplicates.

    First-seen order is kept so rendered output is stable between runs.
    """
    unique: OrderedDict[str, None] = OrderedDict()
    for value in names:
        unique[value.replace(WILDCARD_MARKER, "")] = None
    return list(unique.keys())
