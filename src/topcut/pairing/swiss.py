"""Swiss pairing by points with greedy rematch avoidance."""

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

import random
from typing import Iterable, List, Optional, Set

from topcut.models.match import SwissMatch
from topcut.models.player import Player
from topcut.type_hints import IdFactory
from topcut.utils import new_id, setup_logger

logger = setup_logger(__name__)


def _sort_players_for_pairing(
    players: List[Player], rng: random.Random
) -> List[Player]:
    """Points descending; equal points end up in random order."""
    shuffled = list(players)
    rng.shuffle(shuffled)
    # sort is stable, so the shuffle decides the order inside a score group
    return sorted(shuffled, key=lambda p: -p.points)


def _select_bye_player(sorted_players: List[Player]) -> Player:
    """Lowest-ranked player without a bye, else the lowest-ranked player."""
    for player in reversed(sorted_players):
        if not player.has_bye:
            return player

    selected = sorted_players[-1]
    logger.warning(
        f"All {len(sorted_players)} players already had a bye. "
        f"Assigning a second bye to: {selected.name}"
    )
    return selected


def _find_opponent(
    player: Player, candidates: List[Player], paired_ids: Set[str]
) -> Optional[Player]:
    """First unpaired candidate not yet faced, else the first unpaired one."""
    unpaired = [c for c in candidates if c.id not in paired_ids]
    for candidate in unpaired:
        if not player.has_played(candidate.id):
            return candidate

    if unpaired:
        logger.warning(
            f"No new opponent left for {player.name}; "
            f"allowing rematch with {unpaired[0].name}"
        )
        return unpaired[0]
    return None


def create_swiss_pairings(
    players: Iterable[Player],
    rng: Optional[random.Random] = None,
    id_factory: Optional[IdFactory] = None,
) -> List[SwissMatch]:
    """Create the matches of one Swiss round.

    Players are ranked by points with ties shuffled. With an odd number of
    active players the lowest-ranked player who has not had a bye sits out
    with a bye. The rest are paired top-down, each player taking the highest
    remaining player they have not met, or the highest remaining player if
    they have met everyone left.

    The function only reads the players; awarding bye points and recording
    opponent history is up to the caller.

    Args:
        players: Tournament players; dropped players are ignored
        rng: Source of the tie-break shuffle, for reproducible pairings
        id_factory: Produces match ids, defaults to random UUIDs

    Returns:
        Matches in creation order: the bye first if there is one, then the
        pairs from the top of the standings down. A single remaining active
        player gets no match at all.
    """
    if rng is None:
        rng = random.Random()
    if id_factory is None:
        id_factory = new_id

    active_players = [p for p in players if p.is_active]
    sorted_players = _sort_players_for_pairing(active_players, rng)

    matches: List[SwissMatch] = []
    paired_ids: Set[str] = set()

    if len(sorted_players) % 2 == 1 and len(sorted_players) > 1:
        bye_player = _select_bye_player(sorted_players)
        sorted_players.remove(bye_player)
        matches.append(
            SwissMatch(
                id=id_factory(),
                player1=bye_player.as_contestant(),
                player2=None,
                winner_id=bye_player.id,
            )
        )
        paired_ids.add(bye_player.id)
        logger.debug(f"Bye: {bye_player.name} ({bye_player.points} pts)")

    for i, player in enumerate(sorted_players):
        if player.id in paired_ids:
            continue

        opponent = _find_opponent(player, sorted_players[i + 1 :], paired_ids)
        if opponent is None:
            logger.debug(f"{player.name} left unpaired")
            continue

        matches.append(
            SwissMatch(
                id=id_factory(),
                player1=player.as_contestant(),
                player2=opponent.as_contestant(),
            )
        )
        paired_ids.add(player.id)
        paired_ids.add(opponent.id)
        logger.debug(
            f"Paired {player.name} ({player.points}) vs "
            f"{opponent.name} ({opponent.points})"
        )

    return matches
