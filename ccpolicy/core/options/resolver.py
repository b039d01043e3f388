from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Sequence, Union

from .catalog import DEFAULT_OPTION_CATALOG, PEDANTIC_MARKER

log = logging.getLogger("ccpolicy.options")


class StrictnessMode(str, Enum):
    PEDANTIC = "pedantic"
    NON_PEDANTIC = "non_pedantic"

    @property
    def pedantic(self) -> bool:
        return self is StrictnessMode.PEDANTIC


def compute_effective_options(
    catalog: Sequence[str],
    exclusions: Iterable[str],
    pedantic: Union[bool, StrictnessMode, str],
) -> List[str]:
    """
    Effective option list for one target.

    Catalog entries that exactly match an exclusion are dropped and the rest
    keep their catalog order. When pedantic, the pedantic marker is appended
    as the final entry.

    Exclusions that match nothing in the catalog are ignored, so the catalog
    can shrink without breaking targets that still exclude an old flag.

    `pedantic` is a bool, a StrictnessMode or its value ("pedantic" /
    "non_pedantic"); an unknown string raises ValueError.
    """
    if isinstance(pedantic, str):
        pedantic = StrictnessMode(pedantic).pedantic
    elif not isinstance(pedantic, bool):
        raise TypeError(f"pedantic must be a bool or StrictnessMode, not {type(pedantic).__name__}")

    excluded = frozenset(exclusions)
    options = [opt for opt in catalog if opt not in excluded]

    if pedantic:
        options.append(PEDANTIC_MARKER)

    return options


def unmatched_exclusions(catalog: Sequence[str], exclusions: Iterable[str]) -> List[str]:
    """Exclusion entries with no counterpart in the catalog (sorted, unique)."""
    known = frozenset(catalog)
    return sorted({e for e in exclusions if e not in known})


def resolve_options(
    exclusions: Iterable[str] = (),
    mode: StrictnessMode = StrictnessMode.PEDANTIC,
    *,
    catalog: Sequence[str] = DEFAULT_OPTION_CATALOG,
) -> List[str]:
    exclusions = list(exclusions)

    unmatched = unmatched_exclusions(catalog, exclusions)
    if unmatched:
        log.debug("%s", {"event": "options.unmatched_exclusions", "exclusions": unmatched})

    return compute_effective_options(catalog, exclusions, mode)
