from topcut.controllers.tournament import ResultRecorder
from topcut.models import Contestant, SwissMatch

from conftest import make_player, make_state


def _state():
    players = [make_player("Ann"), make_player("Bob"), make_player("Cat", points=3, has_bye=True)]
    matches = [
        SwissMatch(id="bye", player1=Contestant("cat", "Cat"), winner_id="cat"),
        SwissMatch(id="m1", player1=Contestant("ann", "Ann"), player2=Contestant("bob", "Bob")),
    ]
    return make_state(players, matches=matches, round=1, is_started=True)


def _points(state):
    return {p.id: p.points for p in state.players}


def test_recording_a_winner_awards_three_points():
    new_state = ResultRecorder().record_swiss_result(_state(), 1, "ann")

    assert new_state.matches[1].winner_id == "ann"
    assert _points(new_state) == {"ann": 3, "bob": 0, "cat": 3}


def test_recording_same_winner_again_is_a_no_op():
    recorder = ResultRecorder()
    state = recorder.record_swiss_result(_state(), 1, "ann")

    assert recorder.record_swiss_result(state, 1, "ann") is state
    assert state.matches[1].winner_id == "ann"


def test_correcting_a_winner_moves_the_points():
    recorder = ResultRecorder()
    state = recorder.record_swiss_result(_state(), 1, "ann")

    corrected = recorder.record_swiss_result(state, 1, "bob")

    assert corrected.matches[1].winner_id == "bob"
    assert _points(corrected) == {"ann": 0, "bob": 3, "cat": 3}


def test_points_follow_the_current_winner_through_corrections():
    recorder = ResultRecorder()
    state = _state()
    for winner in ["ann", "bob", "bob", "ann", "bob", "ann", "ann"]:
        state = recorder.record_swiss_result(state, 1, winner)

    assert state.matches[1].winner_id == "ann"
    assert _points(state) == {"ann": 3, "bob": 0, "cat": 3}


def test_bye_match_cannot_be_changed():
    state = _state()

    assert ResultRecorder().record_swiss_result(state, 0, "cat") is state
    assert ResultRecorder().record_swiss_result(state, 0, "ann") is state


def test_unknown_match_or_player_is_ignored():
    state = _state()
    recorder = ResultRecorder()

    assert recorder.record_swiss_result(state, 5, "ann") is state
    assert recorder.record_swiss_result(state, -1, "ann") is state
    assert recorder.record_swiss_result(state, 1, "cat") is state


def test_given_state_is_not_modified():
    state = _state()

    ResultRecorder().record_swiss_result(state, 1, "bob")

    assert state.matches[1].winner_id is None
    assert _points(state) == {"ann": 0, "bob": 0, "cat": 3}


def test_dropped_player_result_can_still_be_recorded():
    state = _state()
    state.players[1].is_dropped = True

    new_state = ResultRecorder().record_swiss_result(state, 1, "ann")

    assert _points(new_state)["ann"] == 3
