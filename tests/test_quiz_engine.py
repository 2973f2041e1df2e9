"""
Tests for the QuizEngine state machine.

Tests cover:
- load / advance / select / next transitions
- Working queue retire and requeue behaviour
- Score counting and double-answer guard
- Restart, shuffle of the remaining queue, progress
- Answer and warning events
"""

import json
import random

import pytest

from cram_app.core.models import AnswerEvaluated, QuizPhase
from cram_app.core.quiz_engine import QuizEngine, compute_progress
from cram_app.core.quiz_importer import QuizParseError


def _wrong_index(question):
    return (question.correct_index + 1) % 4


def _make_raw_questions(count):
    return [
        {
            "question": f"Question {n}",
            "options": ["a", "b", "c", "d"],
            "correctIndex": n % 4,
        }
        for n in range(count)
    ]


def _answer_correctly(engine):
    current = engine.snapshot().current
    event = engine.select_option(current.correct_index)
    engine.next_question()
    return event


def _answer_wrongly(engine):
    current = engine.snapshot().current
    event = engine.select_option(_wrong_index(current))
    engine.next_question()
    return event


class TestInitialState:

    def test_no_session_snapshot(self, engine):
        snapshot = engine.snapshot()
        assert snapshot.phase is QuizPhase.NO_SESSION
        assert snapshot.current is None
        assert snapshot.total == 0
        assert snapshot.progress == 0
        assert not snapshot.is_complete
        assert not engine.has_loaded_quiz()

    def test_select_without_session_is_noop(self, engine):
        assert engine.select_option(0) is None
        assert engine.snapshot().score.attempts == 0

    def test_restart_without_session_is_noop(self, engine):
        assert engine.restart().phase is QuizPhase.NO_SESSION


class TestLoad:

    def test_load_enters_active_with_first_question(self, loaded_engine):
        snapshot = loaded_engine.snapshot()
        assert snapshot.phase is QuizPhase.ACTIVE
        assert snapshot.current is not None
        assert snapshot.current == loaded_engine.get_remaining_questions()[0]
        assert snapshot.selected_option is None
        assert not snapshot.is_answered
        assert snapshot.total == 2
        assert snapshot.remaining == 2
        assert snapshot.progress == 0

    def test_normalizes_sample_questions(self, loaded_engine):
        by_text = {q.text: q for q in loaded_engine.get_all_questions()}
        assert by_text["2+2?"].correct_index == 1
        assert by_text["Capital of France?"].correct_index == 2

    def test_questions_are_shuffled_with_engine_rng(self):
        raw = _make_raw_questions(12)
        first = QuizEngine(rng=random.Random(5))
        second = QuizEngine(rng=random.Random(5))
        first.load(raw)
        second.load(raw)
        order_a = [q.id for q in first.get_all_questions()]
        order_b = [q.id for q in second.get_all_questions()]
        assert order_a == order_b
        assert sorted(order_a) == list(range(12))

    def test_load_replaces_previous_session(self, loaded_engine):
        _answer_wrongly(loaded_engine)
        loaded_engine.load(_make_raw_questions(3))
        snapshot = loaded_engine.snapshot()
        assert snapshot.total == 3
        assert snapshot.remaining == 3
        assert snapshot.score.attempts == 0

    def test_empty_quiz_completes_immediately(self, engine):
        snapshot = engine.load([])
        assert snapshot.is_complete
        assert snapshot.current is None
        assert snapshot.progress == 0

    def test_load_file(self, engine, tmp_path, sample_raw_questions):
        quiz_file = tmp_path / "deck.json"
        quiz_file.write_text(json.dumps(sample_raw_questions), encoding="utf-8")
        snapshot = engine.load_file(quiz_file)
        assert snapshot.total == 2
        assert engine.get_source_name() == "deck.json"

    def test_malformed_file_leaves_session_untouched(self, loaded_engine, tmp_path):
        loaded_engine.select_option(_wrong_index(loaded_engine.snapshot().current))
        before = loaded_engine.snapshot()
        remaining_before = loaded_engine.get_remaining_questions()

        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        with pytest.raises(QuizParseError):
            loaded_engine.load_file(broken)

        assert loaded_engine.snapshot() == before
        assert loaded_engine.get_remaining_questions() == remaining_before


class TestSelectOption:

    def test_correct_answer_retires_question(self, loaded_engine):
        current = loaded_engine.snapshot().current
        event = loaded_engine.select_option(current.correct_index)

        snapshot = loaded_engine.snapshot()
        assert event == AnswerEvaluated(question_id=current.id, selected_index=current.correct_index, correct=True)
        assert snapshot.is_answered
        assert snapshot.selected_option == current.correct_index
        assert snapshot.score.correct == 1
        assert snapshot.score.incorrect == 0
        assert current not in loaded_engine.get_remaining_questions()
        assert snapshot.remaining == 1

    def test_incorrect_answer_moves_question_to_tail(self, loaded_engine):
        current = loaded_engine.snapshot().current
        event = loaded_engine.select_option(_wrong_index(current))

        snapshot = loaded_engine.snapshot()
        assert not event.correct
        assert snapshot.score.incorrect == 1
        assert snapshot.remaining == 2
        assert loaded_engine.get_remaining_questions()[-1] == current

    def test_current_stays_until_next(self, loaded_engine):
        current = loaded_engine.snapshot().current
        loaded_engine.select_option(current.correct_index)
        assert loaded_engine.snapshot().current == current

    def test_second_select_does_not_change_score(self, loaded_engine):
        current = loaded_engine.snapshot().current
        loaded_engine.select_option(_wrong_index(current))
        score_after_first = loaded_engine.snapshot().score
        remaining_after_first = loaded_engine.get_remaining_questions()

        assert loaded_engine.select_option(current.correct_index) is None
        assert loaded_engine.snapshot().score == score_after_first
        assert loaded_engine.snapshot().selected_option == _wrong_index(current)
        assert loaded_engine.get_remaining_questions() == remaining_after_first

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_out_of_range_index_raises(self, loaded_engine, index):
        with pytest.raises(ValueError):
            loaded_engine.select_option(index)
        assert not loaded_engine.snapshot().is_answered


class TestNextQuestion:

    def test_next_before_answer_is_noop(self, loaded_engine):
        before = loaded_engine.snapshot()
        assert loaded_engine.next_question() == before

    def test_next_moves_to_new_head(self, loaded_engine):
        _answer_correctly(loaded_engine)
        snapshot = loaded_engine.snapshot()
        assert snapshot.current == loaded_engine.get_remaining_questions()[0]
        assert snapshot.selected_option is None
        assert not snapshot.is_answered

    def test_has_next_question_reflects_queue(self, engine):
        engine.load(_make_raw_questions(1))
        engine.select_option(engine.snapshot().current.correct_index)
        assert not engine.snapshot().has_next_question


class TestScenarios:

    def test_two_questions_answered_correctly(self, loaded_engine):
        _answer_correctly(loaded_engine)
        _answer_correctly(loaded_engine)

        snapshot = loaded_engine.snapshot()
        assert snapshot.is_complete
        assert snapshot.current is None
        assert snapshot.score.correct == 2
        assert snapshot.score.incorrect == 0
        assert snapshot.remaining == 0
        assert snapshot.progress == 100

    def test_wrong_then_right_requeues_once(self, loaded_engine):
        first = loaded_engine.snapshot().current
        _answer_wrongly(loaded_engine)

        second = loaded_engine.snapshot().current
        assert second != first
        _answer_correctly(loaded_engine)

        # The missed question comes back last.
        assert loaded_engine.snapshot().current == first
        assert not loaded_engine.snapshot().is_complete
        _answer_correctly(loaded_engine)

        snapshot = loaded_engine.snapshot()
        assert snapshot.is_complete
        assert snapshot.score.correct == 2
        assert snapshot.score.incorrect == 1

    def test_every_incorrect_attempt_is_counted(self, engine):
        engine.load(_make_raw_questions(1))
        for _ in range(3):
            _answer_wrongly(engine)
            assert not engine.snapshot().is_complete
        _answer_correctly(engine)
        snapshot = engine.snapshot()
        assert snapshot.is_complete
        assert snapshot.score.incorrect == 3
        assert snapshot.score.correct == 1

    def test_queue_never_exceeds_total(self, engine):
        rng = random.Random(11)
        engine.load(_make_raw_questions(6))
        mastered = set()
        steps = 0
        while not engine.snapshot().is_complete:
            snapshot = engine.snapshot()
            assert snapshot.remaining + len(mastered) == snapshot.total
            current = snapshot.current
            if rng.random() < 0.4:
                engine.select_option(_wrong_index(current))
            else:
                engine.select_option(current.correct_index)
                mastered.add(current.id)
            engine.next_question()
            steps += 1
            assert steps < 1000
        assert mastered == set(range(6))
        assert engine.snapshot().score.correct == 6


class TestRestart:

    def test_restart_resets_score_and_queue(self, loaded_engine):
        _answer_wrongly(loaded_engine)
        _answer_correctly(loaded_engine)

        snapshot = loaded_engine.restart()
        assert snapshot.phase is QuizPhase.ACTIVE
        assert snapshot.score.attempts == 0
        assert snapshot.remaining == snapshot.total == 2
        assert not snapshot.is_answered

    def test_restart_from_complete(self, loaded_engine):
        _answer_correctly(loaded_engine)
        _answer_correctly(loaded_engine)
        assert loaded_engine.snapshot().is_complete

        snapshot = loaded_engine.restart()
        assert snapshot.is_active
        assert snapshot.current is not None

    def test_restart_keeps_question_set(self, loaded_engine):
        all_before = loaded_engine.get_all_questions()
        loaded_engine.restart()
        assert sorted(q.id for q in loaded_engine.get_remaining_questions()) == sorted(q.id for q in all_before)
        assert loaded_engine.get_all_questions() == all_before


class TestShuffleRemaining:

    def test_current_becomes_new_head(self):
        engine = QuizEngine(rng=random.Random(3))
        engine.load(_make_raw_questions(8))
        engine.shuffle_remaining()
        snapshot = engine.snapshot()
        assert snapshot.current == engine.get_remaining_questions()[0]
        assert sorted(q.id for q in engine.get_remaining_questions()) == list(range(8))

    def test_shuffle_keeps_score(self, engine):
        engine.load(_make_raw_questions(5))
        _answer_wrongly(engine)
        before = engine.snapshot().score
        engine.shuffle_remaining()
        assert engine.snapshot().score == before
        assert engine.snapshot().remaining == 5

    def test_shuffle_when_complete_keeps_current_empty(self, loaded_engine):
        _answer_correctly(loaded_engine)
        _answer_correctly(loaded_engine)
        snapshot = loaded_engine.shuffle_remaining()
        assert snapshot.current is None
        assert snapshot.is_complete

    def test_shuffle_after_answer_keeps_answered_flag(self, engine):
        engine.load(_make_raw_questions(4))
        current = engine.snapshot().current
        engine.select_option(current.correct_index)
        snapshot = engine.shuffle_remaining()
        assert snapshot.is_answered
        assert snapshot.current == engine.get_remaining_questions()[0]


class TestProgress:

    @pytest.mark.parametrize(
        "total, remaining, expected",
        [(4, 3, 25), (4, 4, 0), (4, 0, 100), (3, 1, 66), (3, 2, 33), (0, 0, 0), (7, 5, 28)],
    )
    def test_compute_progress(self, total, remaining, expected):
        assert compute_progress(total, remaining) == expected

    def test_engine_progress_after_one_mastered(self, engine):
        engine.load(_make_raw_questions(4))
        _answer_correctly(engine)
        assert engine.progress == 25
        assert engine.snapshot().progress == 25

    def test_incorrect_answer_does_not_advance_progress(self, engine):
        engine.load(_make_raw_questions(4))
        _answer_wrongly(engine)
        assert engine.progress == 0


class TestEvents:

    def test_answer_listener_receives_events(self, loaded_engine):
        events = []
        loaded_engine.add_answer_listener(events.append)
        _answer_wrongly(loaded_engine)
        _answer_correctly(loaded_engine)
        assert [event.correct for event in events] == [False, True]

    def test_double_select_emits_once(self, loaded_engine):
        events = []
        loaded_engine.add_answer_listener(events.append)
        current = loaded_engine.snapshot().current
        loaded_engine.select_option(current.correct_index)
        loaded_engine.select_option(current.correct_index)
        assert len(events) == 1

    def test_failing_listener_does_not_affect_scoring(self, loaded_engine, caplog):
        def broken_listener(event):
            raise RuntimeError("speaker unplugged")

        received = []
        loaded_engine.add_answer_listener(broken_listener)
        loaded_engine.add_answer_listener(received.append)

        current = loaded_engine.snapshot().current
        event = loaded_engine.select_option(current.correct_index)

        assert event.correct
        assert received == [event]
        assert loaded_engine.snapshot().score.correct == 1
        assert "speaker unplugged" in caplog.text

    def test_warning_listener_receives_ambiguous_answers(self, engine):
        warnings = []
        engine.add_warning_listener(warnings.append)
        engine.load([
            {"question": "Q1", "options": ["a", "b", "c", "d"], "correctOption": "z"},
            {"question": "Q2", "options": ["a", "b", "c", "d"], "correctOption": 2},
        ])
        assert len(warnings) == 1
        assert warnings[0].question_text == "Q1"
        assert warnings[0].resolved_index == 0


class TestShuffleSeed:

    def test_same_seed_same_order(self):
        raw = _make_raw_questions(10)
        engine = QuizEngine()
        engine.set_shuffle_seed(77)
        engine.load(raw)
        first = [q.id for q in engine.get_all_questions()]
        engine.set_shuffle_seed(77)
        engine.load(raw)
        assert [q.id for q in engine.get_all_questions()] == first

    def test_unchanged_seed_keeps_shuffle_sequence(self):
        raw = _make_raw_questions(10)
        reseeded = QuizEngine()
        continued = QuizEngine()
        for engine in (reseeded, continued):
            engine.set_shuffle_seed(77)
            engine.load(raw)

        reseeded.set_shuffle_seed(77)
        assert continued.update_shuffle_seed(77) is False
        reseeded.load(raw)
        continued.load(raw)

        assert [q.id for q in continued.get_all_questions()] != [
            q.id for q in reseeded.get_all_questions()
        ]
        assert continued.shuffle_seed == 77

    def test_changed_seed_reseeds(self):
        raw = _make_raw_questions(10)
        engine = QuizEngine()
        engine.set_shuffle_seed(77)
        engine.load(raw)
        first = [q.id for q in engine.get_all_questions()]

        assert engine.update_shuffle_seed(None) is True
        assert engine.update_shuffle_seed(77) is True
        engine.load(raw)

        assert [q.id for q in engine.get_all_questions()] == first
        assert engine.shuffle_seed == 77
