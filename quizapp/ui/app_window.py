import logging
import tkinter as tk

from quizapp.config import (
    WINDOW_TITLE,
    WINDOW_SIZE,
    NEXT_LABEL,
    FINISH_LABEL,
)
from quizapp.services.grader import build_report
from quizapp.services.question_store import QuestionStore
from quizapp.services.session import QuizSession
from quizapp.ui.views.exam_view import ExamView
from quizapp.ui.widgets.report import ReportWin

logger = logging.getLogger(__name__)


# ===== 공통 스타일 =====
FONT_BTN = ("Arial", 11, "bold")
WINDOW_BG = "#dbe7f5"
BTN_BG    = "#1e3a5f"
BTN_FG    = "white"


class QuizApp(tk.Tk):
    def __init__(self, store: QuestionStore | None = None):
        super().__init__()

        # ------------------------
        # 윈도우 기본 세팅
        # ------------------------
        self.title(WINDOW_TITLE)
        self.geometry(WINDOW_SIZE)
        self.resizable(False, False)
        self.configure(bg=WINDOW_BG)

        # ------------------------
        # 상태값
        # ------------------------
        self.store = store if store is not None else QuestionStore()
        self.session = QuizSession(self.store)
        self.report_win = None  # 완료 후 결과창 핸들

        # ------------------------
        # UI 구성
        # ------------------------
        self._build_ui()
        self.session.subscribe(self._on_session_change)
        self.session.start()

    # ------------------------------------------------------------------
    # UI 빌드
    # ------------------------------------------------------------------
    def _build_ui(self):
        self.exam_view = ExamView(self)
        self.exam_view.pack(fill=tk.BOTH, expand=True, padx=6, pady=(4,0))

        # 하단 버튼 바
        footer = tk.Frame(self, bg=WINDOW_BG)
        footer.pack(fill=tk.X, padx=14, pady=(0,8))

        self.btn_next = tk.Button(
            footer,
            text=NEXT_LABEL,
            font=FONT_BTN,
            bg=BTN_BG,
            fg=BTN_FG,
            width=12,
            command=self._next,
        )
        self.btn_next.pack(side=tk.RIGHT)

        # 단축키: Enter
        self.bind("<Return>", lambda e: self._next())

    # ------------------------------------------------------------------
    # 세션 변경 알림
    # ------------------------------------------------------------------
    def _on_session_change(self, session: QuizSession):
        if session.is_complete:
            self.btn_next.config(state=tk.DISABLED)
            self._show_report()
            return

        self.exam_view.render(session)
        self.btn_next.config(
            state=tk.NORMAL,
            text=FINISH_LABEL if session.is_last_question else NEXT_LABEL,
        )

    # ------------------------------------------------------------------
    # 네비게이션
    # ------------------------------------------------------------------
    def _next(self):
        # 결과창이 떠 있는 동안에는 진행 불가
        if self.session.is_complete:
            return
        self.session.advance(self.exam_view.selected_option())

    # ------------------------------------------------------------------
    # 결과 화면
    # ------------------------------------------------------------------
    def _show_report(self):
        if self.report_win is not None and self.report_win.winfo_exists():
            self.report_win.destroy()

        report = build_report(self.store, self.session.selections)
        logger.info("score: %d/%d", report.correct_count, report.total)
        self.report_win = ReportWin(self, report, on_close=self._on_report_closed)

    def _on_report_closed(self):
        self.report_win = None
        self.session.reset()
        self.focus_force()
