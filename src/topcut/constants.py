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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Match outcome points
WIN_POINTS = 3
BYE_POINTS = WIN_POINTS

# Single-elimination cut
TOP_CUT_SIZE = 8

# Quarterfinal seed pairs, in bracket order. Semifinals pair adjacent winners,
# so seeds 1 and 2 can only meet in the final.
QUARTERFINAL_SEEDS = ((1, 8), (4, 5), (3, 6), (2, 7))

# Bracket match ids
QUARTERFINAL_IDS = ("qf1", "qf2", "qf3", "qf4")
SEMIFINAL_IDS = ("sf1", "sf2")
FINAL_ID = "final"

# Store document defaults
DEFAULT_DOCUMENT_ID = "current_tournament"
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# Player name limits
MAX_PLAYER_NAME_LENGTH = 64

# Log format used by setup_logger
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
