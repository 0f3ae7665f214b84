"""Player controller for registration and drops."""

from typing import Optional

from topcut.models.player import Player
from topcut.models.tournament import TournamentState
from topcut.type_hints import IdFactory
from topcut.utils import new_id, setup_logger
from topcut.utils.validation import validate_player_name

logger = setup_logger(__name__)


def add_player(
    state: TournamentState, name: str, id_factory: Optional[IdFactory] = None
) -> TournamentState:
    """Register a new player with no points and no history.

    Registration stays open after the tournament starts; a late player joins
    the next pairing. An empty name leaves the state unchanged.
    """
    result = validate_player_name(name)
    if not result:
        logger.debug(f"Player not added: {result.error_message}")
        return state

    player = Player(id=(id_factory or new_id)(), name=result.sanitized_value)
    new_state = state.copy()
    new_state.players.append(player)
    logger.info(f"Added player: {player.name} ({player.id})")
    return new_state


def toggle_player_drop(state: TournamentState, player_id: str) -> TournamentState:
    """Drop a player, or bring a dropped player back.

    Unknown ids leave the state unchanged.
    """
    if state.get_player(player_id) is None:
        logger.warning(f"Cannot toggle drop: no player {player_id}")
        return state

    new_state = state.copy()
    player = new_state.get_player(player_id)
    player.is_dropped = not player.is_dropped
    logger.info(f"Set {player.name} dropped status to: {player.is_dropped}")
    return new_state
