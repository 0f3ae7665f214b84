"""Validation utilities for TopCut.

This module provides reusable validation functions with consistent error handling.
"""

# TopCut
# Copyright (C) 2025  TopCut developers
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

import re
from typing import Optional

from topcut.constants import MAX_PLAYER_NAME_LENGTH
from topcut.exceptions import PlayerNameValidationException


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
        sanitized_value: Optional[str] = None,
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


# ========== Player Name Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a display name entered at registration.

    Surrounding whitespace is stripped and inner runs of whitespace are
    collapsed to a single space.

    Args:
        name: Name as typed

    Returns:
        ValidationResult with validation status and the cleaned name

    Example:
        >>> result = validate_player_name("  Alice   Smith ")
        >>> result.sanitized_value
        'Alice Smith'
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Player name is required",
        )

    name = re.sub(r"\s+", " ", name.strip())

    if len(name) > MAX_PLAYER_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Player name is too long ({len(name)} characters, "
                f"maximum {MAX_PLAYER_NAME_LENGTH})"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


def validate_player_name_strict(name: Optional[str]) -> str:
    """Validate a player name and raise exception if invalid.

    Args:
        name: Name to validate

    Returns:
        The cleaned name

    Raises:
        PlayerNameValidationException: If the name is invalid
    """
    result = validate_player_name(name)
    if not result.is_valid:
        raise PlayerNameValidationException(result.error_message)
    return result.sanitized_value
