import itertools
import random

import pytest

from topcut.models import Player, TournamentState


def make_player(name, points=0, **kwargs):
    """Player whose id is its lower-cased name."""
    return Player(id=name.lower(), name=name, points=points, **kwargs)


def make_state(players, **kwargs):
    return TournamentState(players=list(players), **kwargs)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"m{next(counter)}"


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def eight_players():
    """Eight players with distinct points, best first."""
    names = ["Ann", "Bob", "Cat", "Dan", "Eve", "Fay", "Gus", "Hal"]
    return [make_player(n, points=(8 - i) * 3) for i, n in enumerate(names)]
