# quizapp/ui/widgets/report.py
import tkinter as tk
from tkinter import ttk

from quizapp.config import REPORT_SIZE, REPORT_TITLE
from quizapp.services.grader import Report, summary_text

FONT_BTN     = ("Arial", 11, "bold")
FONT_SUMMARY = ("Arial", 14, "bold")
COLOR_WRONG  = "#c62828"
COLOR_RIGHT  = "#1b5e20"
COLOR_SUMMARY = "#1565c0"
BTN_BG       = "#1e3a5f"
BTN_FG       = "white"

COLUMNS = ("no", "question", "user", "answer")
HEADINGS = {"no": "#", "question": "Question", "user": "Your answer", "answer": "Correct answer"}
WIDTHS = {"no": 40, "question": 360, "user": 200, "answer": 200}

class ReportWin(tk.Toplevel):
    """제출 후 뜨는 결과 창. 닫히면 on_close 콜백 호출"""
    def __init__(self, master, report: Report, on_close):
        super().__init__(master)
        self.title(REPORT_TITLE)
        self.geometry(REPORT_SIZE)
        self.configure(bg="white")
        self.report = report
        self.on_close = on_close

        body = tk.Frame(self, bg="white")
        body.pack(fill=tk.BOTH, expand=True, padx=10, pady=(10,4))

        self.tree = ttk.Treeview(body, columns=COLUMNS, show="headings")
        for c in COLUMNS:
            self.tree.heading(c, text=HEADINGS[c])
            self.tree.column(c, width=WIDTHS[c], anchor="w", stretch=(c != "no"))
        self.tree.tag_configure("wrong", foreground=COLOR_WRONG)
        self.tree.tag_configure("right", foreground=COLOR_RIGHT)

        sb = ttk.Scrollbar(body, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=sb.set)
        sb.pack(side=tk.RIGHT, fill=tk.Y)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        for r in report.rows:
            self.tree.insert(
                "", tk.END,
                values=(r.number, r.prompt, r.user_answer, r.correct_answer),
                tags=("right" if r.correct else "wrong",),
            )

        # 하단: 정답 수 + 닫기
        bottom = tk.Frame(self, bg="white")
        bottom.pack(fill=tk.X, padx=10, pady=(4,10))
        self.summary = tk.Label(
            bottom,
            text=summary_text(report.correct_count, report.total),
            font=FONT_SUMMARY,
            fg=COLOR_SUMMARY,
            bg="white",
        )
        self.summary.pack(side=tk.LEFT)
        self.btn_close = tk.Button(bottom, text="Close", font=FONT_BTN, bg=BTN_BG, fg=BTN_FG,
                                   width=8, command=self.close)
        self.btn_close.pack(side=tk.RIGHT)

        # 창 닫기(X)도 같은 처리
        self.protocol("WM_DELETE_WINDOW", self.close)

    def close(self):
        self.destroy()
        self.on_close()
