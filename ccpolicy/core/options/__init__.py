from .catalog import DEFAULT_OPTION_CATALOG, PEDANTIC_MARKER
from .resolver import StrictnessMode, compute_effective_options, resolve_options, unmatched_exclusions

__all__ = [
    "DEFAULT_OPTION_CATALOG",
    "PEDANTIC_MARKER",
    "StrictnessMode",
    "compute_effective_options",
    "resolve_options",
    "unmatched_exclusions",
]
