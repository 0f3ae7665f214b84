"""Stores the tournament state is persisted to and synchronized through."""

from topcut.store.base import TournamentStore
from topcut.store.json_file import JsonFileStore
from topcut.store.memory import InMemoryStore

__all__ = ["InMemoryStore", "JsonFileStore", "TournamentStore"]
