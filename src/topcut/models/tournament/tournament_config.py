"""TournamentConfig data class."""

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

from topcut.constants import (
    BYE_POINTS,
    DEFAULT_DOCUMENT_ID,
    DEFAULT_TOURNAMENT_NAME,
    WIN_POINTS,
)
from topcut.exceptions import InvalidConfigurationException


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    document_id : str
        Key of the tournament document in the store.
    win_points : int
        Points for a Swiss win. Also fixes the undefeated score after each
        round (``round * win_points``).
    bye_points : int
        Points for the one bye a player may receive.
    seed : int or None
        Seed for the pairing tie-break shuffle. None draws from system
        randomness.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    document_id: str = DEFAULT_DOCUMENT_ID
    win_points: int = WIN_POINTS
    bye_points: int = BYE_POINTS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.document_id:
            raise InvalidConfigurationException("document_id must not be empty")
        if self.win_points <= 0:
            raise InvalidConfigurationException(
                f"win_points must be positive, got {self.win_points}"
            )
        if self.bye_points < 0:
            raise InvalidConfigurationException(
                f"bye_points must not be negative, got {self.bye_points}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "document_id": self.document_id,
            "win_points": self.win_points,
            "bye_points": self.bye_points,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            document_id=data.get("document_id", DEFAULT_DOCUMENT_ID),
            win_points=int(data.get("win_points", WIN_POINTS)),
            bye_points=int(data.get("bye_points", BYE_POINTS)),
            seed=data.get("seed"),
        )
