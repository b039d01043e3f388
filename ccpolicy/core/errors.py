from __future__ import annotations

from typing import Any, Iterable, Optional


class CCPolicyError(Exception):
    pass


class ConfigurationError(CCPolicyError, ValueError):
    """
    A build description the policy layer refuses to accept.

    Raised before anything is forwarded to the rule sink; it is meant to
    abort evaluation of the enclosing build file, not to be recovered from.
    """

    def __init__(self, message: str, *, target: Optional[str] = None, value: Any = None):
        self.target = target
        self.value = value
        super().__init__(message)


def invalid_category(target: str, value: Any, allowed: Iterable[str]) -> ConfigurationError:
    choices = ", ".join(repr(a) for a in allowed)
    return ConfigurationError(
        f"The 'category' attribute of {target!r} must be one of {choices}; got {value!r}",
        target=target,
        value=value,
    )
