import pytest

from topcut.controllers.tournament import BracketManager, seed_quarterfinals
from topcut.models import BracketStage, Contestant

from conftest import make_state


@pytest.fixture
def top8():
    return [Contestant(id=f"s{i}", name=f"Seed {i}") for i in range(1, 9)]


@pytest.fixture
def qf_state(top8):
    return make_state(
        [],
        round=4,
        is_started=True,
        is_swiss_finished=True,
        top8=top8,
        qf_matches=seed_quarterfinals(top8),
        stage=BracketStage.QUARTERFINAL,
    )


def _resolve_quarterfinals(manager, state):
    for i, match in enumerate(list(state.qf_matches)):
        state = manager.record_bracket_result(state, "quarterfinal", i, match.player1)
    return state


def _play_to_champion(manager, state):
    state = _resolve_quarterfinals(manager, state)
    for i, match in enumerate(list(state.sf_matches)):
        state = manager.record_bracket_result(state, BracketStage.SEMIFINAL, i, match.player2)
    return manager.record_bracket_result(
        state, BracketStage.FINAL, 0, state.final_match.player1
    )


def test_quarterfinal_seeding(top8):
    matches = seed_quarterfinals(top8)

    assert [(m.player1.id, m.player2.id) for m in matches] == [
        ("s1", "s8"),
        ("s4", "s5"),
        ("s3", "s6"),
        ("s2", "s7"),
    ]
    assert [(m.seed1, m.seed2) for m in matches] == [(1, 8), (4, 5), (3, 6), (2, 7)]
    assert [m.id for m in matches] == ["qf1", "qf2", "qf3", "qf4"]
    assert all(m.winner is None for m in matches)


def test_no_quarterfinals_for_fewer_than_eight(top8):
    assert seed_quarterfinals(top8[:7]) == []


def test_semifinals_pair_quarterfinal_winners_in_bracket_order(qf_state):
    state = _resolve_quarterfinals(BracketManager(), qf_state)

    assert state.stage == BracketStage.SEMIFINAL
    assert [(m.player1.id, m.player2.id) for m in state.sf_matches] == [
        ("s1", "s4"),
        ("s3", "s2"),
    ]
    assert [m.id for m in state.sf_matches] == ["sf1", "sf2"]


def test_semifinals_wait_for_all_quarterfinals(qf_state):
    manager = BracketManager()
    state = qf_state
    for i in range(3):
        state = manager.record_bracket_result(state, "quarterfinal", i, state.qf_matches[i].player2)

    assert state.stage == BracketStage.QUARTERFINAL
    assert state.sf_matches == []


def test_clicking_winner_twice_clears_it(qf_state):
    manager = BracketManager()
    winner = qf_state.qf_matches[0].player1

    state = manager.record_bracket_result(qf_state, "quarterfinal", 0, winner)
    assert state.qf_matches[0].winner == winner

    state = manager.record_bracket_result(state, "quarterfinal", 0, winner)
    assert state.qf_matches[0].winner is None


def test_switching_winner_replaces_it(qf_state):
    manager = BracketManager()
    match = qf_state.qf_matches[1]

    state = manager.record_bracket_result(qf_state, "quarterfinal", 1, match.player1)
    state = manager.record_bracket_result(state, "quarterfinal", 1, match.player2)

    assert state.qf_matches[1].winner == match.player2


@pytest.mark.parametrize("index", range(4))
def test_clearing_a_quarterfinal_discards_everything_after_it(qf_state, index):
    manager = BracketManager()
    state = _play_to_champion(manager, qf_state)
    assert state.stage == BracketStage.CHAMPION

    state = manager.record_bracket_result(
        state, "quarterfinal", index, state.qf_matches[index].winner
    )

    assert state.stage == BracketStage.QUARTERFINAL
    assert state.sf_matches == []
    assert state.final_match is None
    assert state.champion is None


def test_changing_a_quarterfinal_winner_rebuilds_semifinals(qf_state):
    manager = BracketManager()
    state = _play_to_champion(manager, qf_state)

    state = manager.record_bracket_result(
        state, "quarterfinal", 0, state.qf_matches[0].player2
    )

    assert state.stage == BracketStage.SEMIFINAL
    assert state.sf_matches[0].player1.id == "s8"
    assert all(m.winner is None for m in state.sf_matches)
    assert state.final_match is None
    assert state.champion is None


def test_final_is_built_from_semifinal_winners(qf_state):
    manager = BracketManager()
    state = _resolve_quarterfinals(manager, qf_state)
    state = manager.record_bracket_result(state, "semifinal", 0, state.sf_matches[0].player1)

    assert state.stage == BracketStage.SEMIFINAL
    assert state.final_match is None

    state = manager.record_bracket_result(state, "semifinal", 1, state.sf_matches[1].player2)

    assert state.stage == BracketStage.FINAL
    assert state.final_match.id == "final"
    assert (state.final_match.player1.id, state.final_match.player2.id) == ("s1", "s2")


def test_clearing_a_semifinal_discards_final_and_champion(qf_state):
    manager = BracketManager()
    state = _play_to_champion(manager, qf_state)

    state = manager.record_bracket_result(state, "semifinal", 1, state.sf_matches[1].winner)

    assert state.stage == BracketStage.SEMIFINAL
    assert state.final_match is None
    assert state.champion is None
    assert len(state.sf_matches) == 2


def test_final_winner_becomes_champion_and_can_be_cleared(qf_state):
    manager = BracketManager()
    state = _play_to_champion(manager, qf_state)

    assert state.champion == state.final_match.player1
    assert state.final_match.winner == state.champion

    state = manager.record_bracket_result(state, "final", 0, state.champion)

    assert state.champion is None
    assert state.final_match.winner is None
    assert state.stage == BracketStage.FINAL


def test_final_result_without_final_match_is_ignored(qf_state):
    state = BracketManager().record_bracket_result(
        qf_state, "final", 0, Contestant("s1", "Seed 1")
    )

    assert state is qf_state


def test_winner_must_play_in_the_match(qf_state):
    outsider = Contestant("s2", "Seed 2")

    assert BracketManager().record_bracket_result(qf_state, "quarterfinal", 0, outsider) is qf_state


def test_bad_index_or_stage_is_ignored(qf_state):
    manager = BracketManager()
    winner = qf_state.qf_matches[0].player1

    assert manager.record_bracket_result(qf_state, "quarterfinal", 4, winner) is qf_state
    assert manager.record_bracket_result(qf_state, "semifinal", 0, winner) is qf_state
    assert manager.record_bracket_result(qf_state, BracketStage.CHAMPION, 0, winner) is qf_state
    assert manager.record_bracket_result(qf_state, "QF", 0, winner) is qf_state
    assert manager.record_bracket_result(qf_state, "Finals", 0, winner) is qf_state


def test_recorded_winner_uses_match_contestant_name(qf_state):
    renamed = Contestant("s1", "Someone Else")

    state = BracketManager().record_bracket_result(qf_state, "quarterfinal", 0, renamed)

    assert state.qf_matches[0].winner.name == "Seed 1"
