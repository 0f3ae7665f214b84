"""Shared helpers for TopCut."""

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

import logging
import uuid

from topcut.constants import LOG_FORMAT

_ROOT_LOGGER_NAME = "topcut"


def setup_logger(name: str) -> logging.Logger:
    """Get a logger that reports through the shared ``topcut`` handler.

    The handler is attached once to the package root logger; module loggers
    propagate to it, so applications may reconfigure logging in one place.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logging.getLogger(name)


def new_id() -> str:
    """Return a fresh random id for a player or Swiss match."""
    return str(uuid.uuid4())
