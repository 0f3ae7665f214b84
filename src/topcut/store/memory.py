"""In-process tournament store."""

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

from typing import Dict, Optional

from topcut.store.base import TournamentStore
from topcut.type_hints import Document, MaybeDocument


class InMemoryStore(TournamentStore):
    """Keeps documents in a dict.

    Several :class:`~topcut.tournament.Tournament` clients can share one
    instance to see each other's changes.
    """

    def __init__(self, documents: Optional[Dict[str, Document]] = None):
        super().__init__()
        self._documents: Dict[str, Document] = dict(documents or {})

    def _read(self, document_id: str) -> MaybeDocument:
        return self._documents.get(document_id)

    def _write(self, document_id: str, document: Document) -> None:
        self._documents[document_id] = document
