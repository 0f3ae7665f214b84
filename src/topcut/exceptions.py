"""Exceptions for use in TopCut"""

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


# ========== Base Application Exception ==========


class TopCutException(Exception):
    """Base exception for all TopCut errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TopCutException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when a stored tournament document cannot be turned into a state."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(TopCutException):
    """Base exception for validation errors."""

    pass


class PlayerNameValidationException(ValidationException):
    """Raised when a player name is empty or too long."""

    pass


# ========== Store Exceptions ==========


class StoreException(TopCutException):
    """Base exception for errors talking to the tournament store."""

    pass


class StoreReadException(StoreException):
    """Raised when the stored tournament document cannot be read."""

    pass


class StoreWriteException(StoreException):
    """Raised when the tournament document cannot be written."""

    pass


class DocumentNotFoundException(StoreWriteException):
    """Raised when a partial update targets a document that does not exist."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TopCutException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
