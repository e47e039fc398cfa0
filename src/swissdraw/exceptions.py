"""Exceptions for use in SwissDraw"""

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


# ========== Base Application Exception ==========


class SwissDrawException(Exception):
    """Base exception for all SwissDraw errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every SwissDraw-specific error with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissDrawException):
    """Base exception for pairing-related errors."""

    pass


class InvalidMarginException(PairingException):
    """Raised when a score margin is negative or not an integer."""

    pass


class RepeatPairingException(PairingException):
    """Raised when two competitors have exhausted their head-to-head allowance."""

    pass


# ========== Competitor Exceptions ==========


class CompetitorException(SwissDrawException):
    """Base exception for competitor-related errors."""

    pass


class CompetitorNotFoundException(CompetitorException):
    """Raised when a competitor id is not present in the supplied pool."""

    pass


class InvalidCompetitorDataException(CompetitorException):
    """Raised when competitor data is invalid or incomplete."""

    pass


# ========== Match Exceptions ==========


class MatchException(SwissDrawException):
    """Base exception for match record errors."""

    pass


class InvalidMatchRecordException(MatchException):
    """Raised when a match record's winner/loser do not match its players."""

    pass


class MatchNotFoundException(MatchException):
    """Raised when a requested match record cannot be found."""

    pass


# ========== Round Exceptions ==========


class RoundException(SwissDrawException):
    """Base exception for round management errors."""

    pass


class RoundInProgressException(RoundException):
    """Raised when a new round is requested while another is still open."""

    pass


class RoundNotFoundException(RoundException):
    """Raised when a requested round does not exist."""

    pass


class InvalidResultException(RoundException):
    """Raised when a result does not belong to the round's pairings."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SwissDrawException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissDrawException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
