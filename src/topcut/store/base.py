"""Document store interface shared by all tournament stores."""

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

import copy

from PyQt6.QtCore import QObject, pyqtSignal

from topcut.exceptions import DocumentNotFoundException
from topcut.type_hints import Document, MaybeDocument
from topcut.utils import setup_logger

logger = setup_logger(__name__)


class TournamentStore(QObject):
    """
    Key-value store of tournament documents.

    Every successful write emits :attr:`document_changed` with the full
    document, so every client watching the store sees every change,
    including its own. Listeners receive copies and cannot alter what is
    stored.

    Subclasses provide :meth:`_read` and :meth:`_write`; they raise
    :class:`~topcut.exceptions.StoreReadException` or
    :class:`~topcut.exceptions.StoreWriteException` on failure.

    Signals
    -------
    document_changed(str, object)
        Document id and the full document, or None if it does not exist.
    """

    document_changed = pyqtSignal(str, object)

    def _read(self, document_id: str) -> MaybeDocument:
        raise NotImplementedError

    def _write(self, document_id: str, document: Document) -> None:
        raise NotImplementedError

    def load(self, document_id: str) -> MaybeDocument:
        """Return a copy of the stored document, or None if there is none."""
        document = self._read(document_id)
        return copy.deepcopy(document) if document is not None else None

    def watch(self, document_id: str) -> None:
        """Emit the current document once, as the first change notification."""
        self._notify(document_id, self._read(document_id))

    def set(self, document_id: str, document: Document) -> None:
        """Create or overwrite a whole document."""
        stored = copy.deepcopy(document)
        self._write(document_id, stored)
        logger.debug(f"Wrote document {document_id}")
        self._notify(document_id, stored)

    def update(self, document_id: str, fields: Document) -> None:
        """Overwrite some top-level fields of an existing document.

        Raises:
            DocumentNotFoundException: If the document does not exist
        """
        current = self._read(document_id)
        if current is None:
            raise DocumentNotFoundException(f"No document {document_id} to update")

        updated = copy.deepcopy(current)
        updated.update(copy.deepcopy(fields))
        self._write(document_id, updated)
        logger.debug(f"Updated {sorted(fields)} of document {document_id}")
        self._notify(document_id, updated)

    def _notify(self, document_id: str, document: MaybeDocument) -> None:
        self.document_changed.emit(
            document_id, copy.deepcopy(document) if document is not None else None
        )
