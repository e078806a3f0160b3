from quizapp.config import UNANSWERED
from quizapp.services.grader import build_report, count_correct, is_correct, summary_text
from quizapp.services.question_store import QuestionStore
from quizapp.services.session import QuizSession


def wrong_option(store, i):
    return next(o for o in store.get_question(i).options if o != store.get_correct_answer(i))


def test_all_correct_scores_ten():
    store = QuestionStore()
    s = QuizSession(store)
    s.start()
    for i in range(10):
        s.advance(store.get_correct_answer(i))
    assert count_correct(store, s.selections) == 10


def test_all_wrong_scores_zero():
    store = QuestionStore()
    s = QuizSession(store)
    s.start()
    for i in range(10):
        s.advance(wrong_option(store, i))
    report = build_report(store, s.selections)
    assert report.correct_count == 0
    assert not any(r.correct for r in report.rows)


def test_first_answer_counts():
    store = QuestionStore()
    report = build_report(store, {0: "java JavaProgram"})
    assert report.correct_count == 1
    assert report.rows[0].correct


def test_rows_carry_prompt_user_and_correct_answer():
    store = QuestionStore()
    report = build_report(store, {3: '"2"'})
    assert report.total == 10
    row = report.rows[3]
    assert row.number == 4
    assert row.prompt == "Which one would be an int"
    assert row.user_answer == '"2"'
    assert row.correct_answer == "2"
    assert not row.correct


def test_missing_selections_are_unanswered_and_wrong():
    store = QuestionStore()
    report = build_report(store, {})
    assert report.correct_count == 0
    assert all(r.user_answer == UNANSWERED for r in report.rows)


def test_summary_text():
    assert summary_text(7, 10) == "Number of correct answers: 7/10"


def test_count_matches_report_and_row_flags():
    store = QuestionStore()
    selections = {0: "java JavaProgram", 1: "It is used to print text on the screen.", 7: "Using break"}
    report = build_report(store, selections)
    assert count_correct(store, selections) == report.correct_count == 2
    assert [r.number for r in report.rows if r.correct] == [1, 8]
    assert is_correct(store, selections, 0)
    assert not is_correct(store, selections, 1)
    assert not is_correct(store, selections, 2)
