import random

import pytest

from topcut.pairing import create_swiss_pairings

from conftest import make_player


def _appearances(matches):
    ids = []
    for match in matches:
        ids.append(match.player1.id)
        if match.player2 is not None:
            ids.append(match.player2.id)
    return ids


@pytest.mark.parametrize("num_players", range(2, 14))
def test_every_active_player_paired_exactly_once(num_players):
    players = [
        make_player(f"P{i}", points=random.Random(i).choice([0, 3, 6]))
        for i in range(num_players)
    ]
    for seed in range(5):
        matches = create_swiss_pairings(players, rng=random.Random(seed))
        ids = _appearances(matches)
        assert sorted(ids) == sorted(p.id for p in players)
        for match in matches:
            assert match.player2 is None or match.player1.id != match.player2.id


def test_dropped_players_are_not_paired():
    players = [make_player(n) for n in ["Ann", "Bob", "Cat", "Dan"]]
    players[1].is_dropped = True

    matches = create_swiss_pairings(players, rng=random.Random(0))

    assert "bob" not in _appearances(matches)
    assert len(matches) == 2
    assert matches[0].is_bye


def test_five_players_get_two_matches_and_a_bye():
    players = [make_player(n) for n in ["Ann", "Bob", "Cat", "Dan", "Eve"]]

    matches = create_swiss_pairings(players, rng=random.Random(3))

    byes = [m for m in matches if m.is_bye]
    assert len(matches) == 3
    assert len(byes) == 1
    assert matches[0] is byes[0]
    assert byes[0].winner_id == byes[0].player1.id
    assert all(m.winner_id is None for m in matches[1:])


def test_bye_goes_to_lowest_ranked_player_without_one():
    players = [
        make_player("Ann", 12),
        make_player("Bob", 9),
        make_player("Cat", 6),
        make_player("Dan", 3),
        make_player("Eve", 0, has_bye=True),
    ]

    matches = create_swiss_pairings(players, rng=random.Random(0))

    assert matches[0].is_bye
    assert matches[0].player1.id == "dan"


def test_bye_falls_back_to_lowest_ranked_when_everyone_had_one():
    players = [
        make_player("Ann", 6, has_bye=True),
        make_player("Bob", 3, has_bye=True),
        make_player("Cat", 0, has_bye=True),
    ]

    matches = create_swiss_pairings(players, rng=random.Random(0))

    assert matches[0].player1.id == "cat"


def test_player_with_bye_not_chosen_while_others_lack_one():
    for seed in range(20):
        players = [make_player(n) for n in ["Ann", "Bob", "Cat", "Dan", "Eve"]]
        players[4].has_bye = True
        players[2].has_bye = True

        matches = create_swiss_pairings(players, rng=random.Random(seed))

        assert matches[0].player1.id not in {"eve", "cat"}


def test_lone_player_gets_no_match():
    players = [make_player("Ann"), make_player("Bob", is_dropped=True)]

    assert create_swiss_pairings(players) == []


def test_no_players_gives_no_matches():
    assert create_swiss_pairings([]) == []


def test_pairs_top_down_by_points():
    players = [
        make_player("Dan", 0),
        make_player("Cat", 3),
        make_player("Bob", 6),
        make_player("Ann", 9),
    ]

    matches = create_swiss_pairings(players, rng=random.Random(0))

    assert [(m.player1.id, m.player2.id) for m in matches] == [
        ("ann", "bob"),
        ("cat", "dan"),
    ]


def test_avoids_rematches_when_possible():
    players = [
        make_player("Ann", 9, match_history=["bob"]),
        make_player("Bob", 6, match_history=["ann"]),
        make_player("Cat", 3),
        make_player("Dan", 0),
    ]

    matches = create_swiss_pairings(players, rng=random.Random(0))

    assert [(m.player1.id, m.player2.id) for m in matches] == [
        ("ann", "cat"),
        ("bob", "dan"),
    ]


def test_allows_rematch_when_no_new_opponent_is_left():
    players = [
        make_player("Ann", 3, match_history=["bob"]),
        make_player("Bob", 0, match_history=["ann"]),
    ]

    matches = create_swiss_pairings(players, rng=random.Random(0))

    assert len(matches) == 1
    assert {matches[0].player1.id, matches[0].player2.id} == {"ann", "bob"}


def test_same_seed_gives_same_pairings(id_factory):
    players = [make_player(f"P{i}", points=3 * (i % 2)) for i in range(9)]

    first = create_swiss_pairings(players, rng=random.Random(42))
    second = create_swiss_pairings(players, rng=random.Random(42))

    assert [(m.player1, m.player2) for m in first] == [
        (m.player1, m.player2) for m in second
    ]


def test_match_ids_come_from_factory(id_factory):
    players = [make_player(n) for n in ["Ann", "Bob", "Cat"]]

    matches = create_swiss_pairings(players, rng=random.Random(0), id_factory=id_factory)

    assert [m.id for m in matches] == ["m1", "m2"]


def test_input_players_are_not_modified():
    players = [make_player(n) for n in ["Ann", "Bob", "Cat"]]

    create_swiss_pairings(players, rng=random.Random(0))

    assert all(p.points == 0 and not p.has_bye for p in players)
    assert all(p.match_history == [] for p in players)
