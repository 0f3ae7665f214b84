"""Tournament store backed by a JSON file."""

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

import json
from pathlib import Path
from typing import Dict, Union

from topcut.constants import SAVE_FILE_EXTENSION
from topcut.exceptions import StoreReadException, StoreWriteException
from topcut.store.base import TournamentStore
from topcut.type_hints import Document, MaybeDocument


class JsonFileStore(TournamentStore):
    """Keeps all documents in one JSON file, keyed by document id.

    A missing file reads as an empty store; it is created on the first
    write.

    Parameters
    ----------
    path : str or Path
        File to use. ``.json`` is appended when there is no suffix.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(SAVE_FILE_EXTENSION)
        self.path = path

    def _read_all(self) -> Dict[str, Document]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreReadException(f"Could not read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreReadException(f"{self.path} does not hold a document map")
        return data

    def _read(self, document_id: str) -> MaybeDocument:
        return self._read_all().get(document_id)

    def _write(self, document_id: str, document: Document) -> None:
        try:
            documents = self._read_all()
        except StoreReadException as e:
            raise StoreWriteException(str(e)) from e

        documents[document_id] = document
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(documents, f, indent=4)
        except OSError as e:
            raise StoreWriteException(f"Could not save {self.path}: {e}") from e
