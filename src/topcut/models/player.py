"""A registered player in a Swiss tournament."""

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

from dataclasses import dataclass, field
from typing import Any, Dict

from topcut.models.match import Contestant
from topcut.type_hints import MatchHistory


@dataclass
class Player:
    """
    A tournament player and everything the pairing engine needs to know
    about them.

    Attributes
    ----------
    id : str
        Opaque unique identifier.
    name : str
        Display name.
    points : int
        Accumulated points. Every win, including a bye, is worth 3.
    match_history : list of str
        Ids of opponents already faced, in the order they were faced.
    has_bye : bool
        Whether the player has received the tournament's one bye.
    is_dropped : bool
        Whether the player withdrew. Dropped players are skipped by pairing
        and bracket seeding but keep their points and history.
    """

    id: str
    name: str
    points: int = 0
    match_history: MatchHistory = field(default_factory=list)
    has_bye: bool = False
    is_dropped: bool = False

    @property
    def is_active(self) -> bool:
        """Still taking part in pairings."""
        return not self.is_dropped

    def has_played(self, opponent_id: str) -> bool:
        """Check if this player has already faced ``opponent_id``."""
        return opponent_id in self.match_history

    def as_contestant(self) -> Contestant:
        """The ``(id, name)`` reference stored inside matches."""
        return Contestant(id=self.id, name=self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "points": self.points,
            "match_history": list(self.match_history),
            "has_bye": self.has_bye,
            "is_dropped": self.is_dropped,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            points=int(data.get("points", 0)),
            match_history=[str(o) for o in data.get("match_history", [])],
            has_bye=bool(data.get("has_bye", False)),
            is_dropped=bool(data.get("is_dropped", False)),
        )
