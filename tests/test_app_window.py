import pytest

tk = pytest.importorskip("tkinter")

from quizapp.config import FINISH_LABEL, NEXT_LABEL
from quizapp.ui.app_window import QuizApp
from quizapp.ui.widgets.report import ReportWin


@pytest.fixture
def app():
    try:
        a = QuizApp()
    except tk.TclError as e:
        pytest.skip(f"no display: {e}")
    a.update_idletasks()
    yield a
    if a.report_win is not None and a.report_win.winfo_exists():
        a.report_win.destroy()
    a.destroy()


def click_through(app, pick_index=0):
    for _ in range(app.session.total):
        app.exam_view.choice_buttons[pick_index].invoke()
        app.btn_next.invoke()
        app.update_idletasks()


def test_first_question_shown_with_first_option_selected(app):
    assert app.title() == "Quiz Program"
    assert app.exam_view.qtitle.cget("text") == "Q1. How to run Java program on the command prompt?"
    assert app.exam_view.selected_option() == "java JavaProgram"
    assert len(app.exam_view.choice_buttons) == 4
    assert app.exam_view.choice_buttons[0].cget("text") == "A. java JavaProgram"
    assert app.btn_next.cget("text") == NEXT_LABEL


def test_button_label_changes_on_last_question(app):
    for _ in range(9):
        app.btn_next.invoke()
    assert app.session.current_index == 9
    assert app.exam_view.progress.cget("text") == "[10/10]"
    assert app.btn_next.cget("text") == FINISH_LABEL


def test_radio_choice_is_recorded(app):
    app.exam_view.choice_buttons[2].invoke()
    app.btn_next.invoke()
    assert app.session.selections == {0: "javac JavaProgram"}
    # 다음 문항은 다시 첫 보기 선택
    assert app.exam_view.selected_option() == app.store.get_question(1).options[0]


def test_completion_opens_report(app):
    click_through(app)
    assert app.session.is_complete
    assert isinstance(app.report_win, ReportWin)
    assert len(app.report_win.tree.get_children()) == 10
    expected = sum(
        1 for i in range(10)
        if app.store.get_question(i).options[0] == app.store.get_correct_answer(i)
    )
    assert app.report_win.summary.cget("text") == f"Number of correct answers: {expected}/10"
    assert str(app.btn_next.cget("state")) == tk.DISABLED


def test_closing_report_resets_session(app):
    click_through(app)
    app.report_win.close()
    assert app.report_win is None
    assert app.session.current_index == 0
    assert app.session.selections == {}
    assert app.btn_next.cget("text") == NEXT_LABEL
    assert str(app.btn_next.cget("state")) == tk.NORMAL


def test_next_ignored_while_report_open(app):
    click_through(app)
    app._next()
    assert app.session.is_complete


def test_window_manager_close_resets_session(app):
    click_through(app)
    handler = app.report_win.protocol("WM_DELETE_WINDOW")
    app.tk.call(handler)
    app.update_idletasks()
    assert app.report_win is None
    assert app.session.current_index == 0
    assert app.session.selections == {}


def test_return_key_advances(app):
    app.focus_force()
    app.update()
    app.event_generate("<Return>")
    app.update()
    assert app.session.current_index == 1
    assert app.session.selections == {0: "java JavaProgram"}


def test_only_one_report_window(app):
    click_through(app)
    first = app.report_win
    app._show_report()
    app.update_idletasks()
    reports = [w for w in app.winfo_children() if isinstance(w, ReportWin)]
    assert len(reports) == 1
    assert reports[0] is app.report_win
    assert not first.winfo_exists()
