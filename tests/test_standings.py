from topcut.controllers.tournament import compute_standings, select_top_cut
from topcut.models import Contestant

from conftest import make_player


def test_standings_sort_by_points_keeping_registration_order_on_ties():
    players = [
        make_player("Ann", points=3),
        make_player("Bob", points=6),
        make_player("Cat", points=3),
        make_player("Dan", points=0),
    ]

    assert [p.name for p in compute_standings(players)] == ["Bob", "Ann", "Cat", "Dan"]


def test_standings_hide_dropped_players_unless_asked():
    players = [make_player("Ann", points=9, is_dropped=True), make_player("Bob")]

    assert [p.name for p in compute_standings(players)] == ["Bob"]
    assert [p.name for p in compute_standings(players, include_dropped=True)] == [
        "Ann",
        "Bob",
    ]


def test_top_cut_takes_best_active_players_in_seed_order(eight_players):
    players = eight_players + [make_player("Ivy", points=30, is_dropped=True)]

    top = select_top_cut(players)

    assert top[0] == Contestant("ann", "Ann")
    assert [c.id for c in top] == [p.id for p in eight_players]


def test_top_cut_is_short_when_few_players_remain():
    assert len(select_top_cut([make_player("Ann"), make_player("Bob")])) == 2
