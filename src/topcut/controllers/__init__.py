from topcut.controllers.player import add_player, toggle_player_drop

__all__ = ["add_player", "toggle_player_drop"]
