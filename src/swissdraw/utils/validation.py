"""Validation utilities for SwissDraw.

This module provides reusable validation functions with consistent error handling.
"""

# SwissDraw
# Copyright (C) 2025  SwissDraw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Any, Optional

from swissdraw.exceptions import (
    CompetitorNotFoundException,
    InvalidCompetitorDataException,
    InvalidMarginException,
)
from swissdraw.type_hints import Pool


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Margin Validation ==========


def validate_margin(margin: Any) -> ValidationResult:
    """Validate a score margin.

    Args:
        margin: Maximum allowed score difference

    Returns:
        ValidationResult with validation status

    Example:
        >>> result = validate_margin(1)
        >>> if result:
        ...     print(f"Valid margin: {result.sanitized_value}")
    """
    # bool is an int subclass, but True is not a meaningful margin
    if isinstance(margin, bool) or not isinstance(margin, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Margin must be an integer, got {margin!r}",
        )

    if margin < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Margin must be non-negative, got {margin}",
        )

    return ValidationResult(is_valid=True, sanitized_value=margin)


def validate_margin_strict(margin: Any) -> int:
    """Validate a margin and raise exception if invalid.

    Args:
        margin: Maximum allowed score difference

    Returns:
        The validated margin

    Raises:
        InvalidMarginException: If margin is negative or not an integer
    """
    result = validate_margin(margin)
    if not result.is_valid:
        raise InvalidMarginException(result.error_message)
    return result.sanitized_value


# ========== Competitor Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a competitor name (non-empty after stripping)."""
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Competitor name is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_name_strict(name: Optional[str]) -> str:
    """Validate a competitor name and raise exception if invalid.

    Raises:
        InvalidCompetitorDataException: If the name is empty
    """
    result = validate_name(name)
    if not result.is_valid:
        raise InvalidCompetitorDataException(result.error_message)
    return result.sanitized_value


def require_in_pool(competitor_id: str, pool: Pool) -> None:
    """Fail fast when a single-competitor query names someone outside the pool.

    Raises:
        CompetitorNotFoundException: If no competitor in ``pool`` has the id
    """
    if not any(c.id == competitor_id for c in pool):
        raise CompetitorNotFoundException(
            f"Competitor {competitor_id!r} is not in the supplied pool"
        )
