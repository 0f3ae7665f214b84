"""Standings order and top-cut selection."""

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

from typing import Iterable, List

from topcut.constants import TOP_CUT_SIZE
from topcut.models.match import Contestant
from topcut.models.player import Player


def compute_standings(
    players: Iterable[Player], include_dropped: bool = False
) -> List[Player]:
    """Players by points, best first.

    Equal points keep registration order. There are no further tie-breaks.

    Args:
        players: Players in registration order
        include_dropped: Keep dropped players, for historical display

    Returns:
        Sorted list of players
    """
    ranked = sorted(players, key=lambda p: -p.points)
    if include_dropped:
        return ranked
    return [p for p in ranked if p.is_active]


def select_top_cut(players: Iterable[Player], size: int = TOP_CUT_SIZE) -> List[Contestant]:
    """The best ``size`` active players in seed order.

    Fewer are returned when fewer players are still active.
    """
    return [p.as_contestant() for p in compute_standings(players)[:size]]
