"""Match data classes for the Swiss rounds and the elimination bracket."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Contestant:
    """Reference to a player by id and display name."""

    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contestant":
        return cls(id=str(data["id"]), name=data.get("name", ""))


def _contestant_or_none(data: Optional[Dict[str, Any]]) -> Optional[Contestant]:
    return Contestant.from_dict(data) if data else None


@dataclass
class SwissMatch:
    """A single Swiss round match.

    Attributes
    ----------
    id : str
        Unique match id.
    player1 : Contestant
        Always present. The bye recipient for a bye match.
    player2 : Contestant or None
        Opponent, or None when the match is a bye.
    winner_id : str or None
        Id of the recorded winner; None while unresolved. A bye is created
        with its winner already set to ``player1``.
    """

    id: str
    player1: Contestant
    player2: Optional[Contestant] = None
    winner_id: Optional[str] = None

    @property
    def is_bye(self) -> bool:
        return self.player2 is None

    @property
    def is_resolved(self) -> bool:
        return self.winner_id is not None

    def involves(self, player_id: str) -> bool:
        """Check if ``player_id`` plays in this match."""
        if self.player1.id == player_id:
            return True
        return self.player2 is not None and self.player2.id == player_id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict() if self.player2 else None,
            "winner_id": self.winner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SwissMatch":
        """Deserialize match from dictionary."""
        return cls(
            id=str(data["id"]),
            player1=Contestant.from_dict(data["player1"]),
            player2=_contestant_or_none(data.get("player2")),
            winner_id=data.get("winner_id"),
        )


@dataclass
class BracketMatch:
    """A quarterfinal, semifinal or final match of the top cut.

    Attributes
    ----------
    id : str
        Bracket slot id (``qf1``..``qf4``, ``sf1``, ``sf2``, ``final``).
    player1, player2 : Contestant
        The two contestants.
    seed1, seed2 : int or None
        Standing positions; only set for quarterfinals.
    winner : Contestant or None
        One of the two contestants once decided.
    """

    id: str
    player1: Contestant
    player2: Contestant
    seed1: Optional[int] = None
    seed2: Optional[int] = None
    winner: Optional[Contestant] = None

    def has_contestant(self, contestant_id: str) -> bool:
        return contestant_id in (self.player1.id, self.player2.id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bracket match to dictionary."""
        return {
            "id": self.id,
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict(),
            "seed1": self.seed1,
            "seed2": self.seed2,
            "winner": self.winner.to_dict() if self.winner else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BracketMatch":
        """Deserialize bracket match from dictionary."""
        return cls(
            id=str(data["id"]),
            player1=Contestant.from_dict(data["player1"]),
            player2=Contestant.from_dict(data["player2"]),
            seed1=data.get("seed1"),
            seed2=data.get("seed2"),
            winner=_contestant_or_none(data.get("winner")),
        )
