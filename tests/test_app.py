import pytest
from unittest.mock import patch

from flashcard_srs.app import (
    SessionExitRequested, cmd_stats, parse_answer, run_review_session, session_prompt,
)
from flashcard_srs.errors import InvalidOutcome
from flashcard_srs.models import Again, Good, Typed
from flashcard_srs.review import ReviewSession


@pytest.fixture
def session(store, clock):
    return ReviewSession(store, clock)


def test_session_prompt_raises_on_q():
    with patch("flashcard_srs.app.Prompt.ask", return_value="q"):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_raises_on_menu():
    with patch("flashcard_srs.app.Prompt.ask", return_value="menu"):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_returns_normal_input():
    with patch("flashcard_srs.app.Prompt.ask", return_value="hello"):
        assert session_prompt("test prompt") == "hello"


def test_parse_answer():
    assert parse_answer("a") == Again()
    assert parse_answer("G") == Good()
    assert parse_answer("good") == Good()
    assert parse_answer("=Paris") == Typed(answer="Paris")


def test_parse_answer_rejects_garbage():
    with pytest.raises(InvalidOutcome):
        parse_answer("maybe")


def test_review_session_runs_until_nothing_due(session, store, clock):
    store.add_card("p1", "Q1", "Paris", clock.now(), card_id="c1")
    store.add_card("p1", "Q2", "Rome", clock.now(), card_id="c2")
    with patch("flashcard_srs.app.Prompt.ask", side_effect=["", "g", "=rome"]):
        reviewed = run_review_session(session, "p1")
    assert reviewed == 2
    assert store.get_schedule("c1").streak == 1
    assert store.get_schedule("c2").streak == 1


def test_review_session_exits_on_q(session, store, clock):
    """First card is saved, then 'q' on the second aborts the session."""
    store.add_card("p1", "Q1", "Paris", clock.now(), card_id="c1")
    store.add_card("p1", "Q2", "Rome", clock.now(), card_id="c2")
    with patch("flashcard_srs.app.Prompt.ask", side_effect=["", "a", "q"]):
        with pytest.raises(SessionExitRequested):
            run_review_session(session, "p1")
    assert store.get_schedule("c1").lapses == 1
    assert store.get_schedule("c2").version == 0


def test_practice_session_leaves_schedules_alone(session, store, clock):
    store.add_card("p1", "Q1", "Paris", clock.now(), card_id="c1")
    store.add_card("p1", "Q2", "Rome", clock.now(), card_id="c2")
    before = store.list_schedules_for_project("p1")
    with patch("flashcard_srs.app.Prompt.ask", side_effect=["", "a", "=wrong"]):
        reviewed = run_review_session(session, "p1", practice=True)
    assert reviewed == 2
    assert store.list_schedules_for_project("p1") == before


def test_review_session_empty_project(session):
    with patch("flashcard_srs.app.Prompt.ask") as ask:
        assert run_review_session(session, "p1") == 0
        assert run_review_session(session, "p1", practice=True) == 0
    ask.assert_not_called()


def test_cmd_stats_prints(session, store, clock, capsys):
    store.add_card("p1", "Q1", "Paris", clock.now(), card_id="c1")
    cmd_stats(session, "p1")
    out = capsys.readouterr().out
    assert "Total" in out
    assert "Next card" in out


def test_review_turn_reveals_back_before_rating(session, store, clock, capsys):
    store.add_card("p1", "Capital of France?", "Paris", clock.now(), card_id="c1")
    with patch("flashcard_srs.app.Prompt.ask", side_effect=["", "g"]) as ask:
        run_review_session(session, "p1")
        out = capsys.readouterr().out
    assert "Paris" in out
    assert "Rate yourself" in ask.call_args_list[1].args[0]
    assert store.get_schedule("c1").streak == 1


def test_review_session_reasks_after_bad_input(session, store, clock):
    """A typo at either prompt is reported and asked again, not fatal."""
    store.add_card("p1", "Q1", "Paris", clock.now(), card_id="c1")
    store.add_card("p1", "Q2", "Rome", clock.now(), card_id="c2")
    answers = ["paris", "", "maybe", "=rome", "g", "=rome"]
    with patch("flashcard_srs.app.Prompt.ask", side_effect=answers):
        reviewed = run_review_session(session, "p1")
    assert reviewed == 2
    assert store.get_schedule("c1").streak == 1
    assert store.get_schedule("c2").streak == 1


def test_practice_session_reasks_after_bad_input(session, store, clock):
    store.add_card("p1", "Q1", "Paris", clock.now(), card_id="c1")
    store.add_card("p1", "Q2", "Rome", clock.now(), card_id="c2")
    answers = ["paris", "", "g", "oops", "", "a"]
    with patch("flashcard_srs.app.Prompt.ask", side_effect=answers):
        assert run_review_session(session, "p1", practice=True) == 2
