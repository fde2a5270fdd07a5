#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/options/base.py
"""Base classes for diff parsing options.

This module defines the foundation shared by every options dataclass used
throughout the diffview pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from diffview.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        """Build an instance from a plain mapping such as a config file section.

        Keys may use either ``snake_case`` or ``kebab-case`` field names.

        Parameters
        ----------
        values : dict
            Mapping of option names to values

        Returns
        -------
        Self
            New options instance

        Raises
        ------
        ValidationError
            If the mapping contains names that are not option fields

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ValidationError(
                    f"Unknown option '{key}' for {cls.__name__}",
                    parameter_name=key,
                    parameter_value=value,
                )
            kwargs[name] = value
        return cls(**kwargs)


def require_ratio(name: str, value: float | None, allow_none: bool = False) -> None:
    """Validate that a ratio option lies within ``[0, 1]``."""
    if value is None and allow_none:
        return
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number in [0, 1], got {value!r}", name, value)
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be in range [0, 1], got {value}", name, value)


def require_int(name: str, value: int, minimum: int) -> None:
    """Validate that an integer option is at least ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}", name, value)
    if value < minimum:
        raise ValidationError(f"{name} must be >= {minimum}, got {value}", name, value)
