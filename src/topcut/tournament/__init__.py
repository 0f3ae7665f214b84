"""Tournament facade for TopCut.

This package binds the tournament state machine to a store and exposes the
user actions of a running tournament.
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

from topcut.tournament.tournament import Tournament
from topcut.tournament.tournament_phase import TournamentPhase, TournamentPhaseInfo

__all__ = [
    "Tournament",
    "TournamentPhase",
    "TournamentPhaseInfo",
]
