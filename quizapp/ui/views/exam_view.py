# quizapp/ui/views/exam_view.py
import tkinter as tk

from quizapp.config import PROMPT_HINT
from quizapp.services.session import QuizSession
from quizapp.utils.labels import choice_caption, labels_for_choices

FONT_HINT  = ("Arial", 11, "bold")
FONT_TITLE = ("Arial", 12, "bold")
FONT_TEXT  = ("Arial", 11)
COLOR_TEXT = "#111111"
COLOR_HINT = "#1f4f80"
COLOR_BG   = "#dbe7f5"
COLOR_CARD = "#ffffff"

class ExamView(tk.Frame):
    """문제/보기/헤더를 렌더하는 뷰. 상태는 QuizSession이 들고 있고,
       이 뷰는 현재 문항을 그리고 선택값만 돌려준다."""
    def __init__(self, master):
        super().__init__(master, bg=COLOR_BG)

        box_style = dict(bd=1, relief=tk.SOLID, bg=COLOR_CARD)

        # 헤더: 안내 문구 + 진행도
        head = tk.Frame(self, bg=COLOR_BG)
        head.pack(fill=tk.X, padx=8, pady=(6,0))
        tk.Label(head, text=PROMPT_HINT, font=FONT_HINT, fg=COLOR_HINT, bg=COLOR_BG).pack(side=tk.LEFT)
        self.progress = tk.Label(head, text="", font=FONT_HINT, fg=COLOR_HINT, bg=COLOR_BG)
        self.progress.pack(side=tk.RIGHT)

        # 문제 영역
        top = tk.Frame(self, **box_style)
        top.pack(fill=tk.X, padx=8, pady=6)
        self.qtitle = tk.Label(top, text="", anchor="w", justify="left", wraplength=380,
                               font=FONT_TITLE, fg=COLOR_TEXT, bg=COLOR_CARD)
        self.qtitle.pack(fill=tk.X, pady=8, padx=8)

        # 보기 영역 (단일 선택)
        mid = tk.Frame(self, **box_style)
        mid.pack(fill=tk.BOTH, expand=True, padx=8, pady=(0,6))
        self.choices_frame = tk.Frame(mid, bg=COLOR_CARD)
        self.choices_frame.pack(fill=tk.BOTH, expand=True, padx=8, pady=8)

        self.choice_var = tk.StringVar(master=self)
        self.choice_buttons = []

    def render(self, session: QuizSession):
        q = session.current_question
        index = session.current_index
        self.progress.config(text=f"[{index+1}/{session.total}]")
        self.qtitle.config(text=f"Q{index+1}. {q.prompt}")

        # 보기 다시 그림
        for w in list(self.choices_frame.children.values()):
            w.destroy()
        self.choice_buttons = []
        labels = labels_for_choices(len(q.options))

        for i, txt in enumerate(q.options):
            rb = tk.Radiobutton(
                self.choices_frame,
                text=choice_caption(labels[i], txt),
                value=txt,
                variable=self.choice_var,
                font=FONT_TEXT,
                fg=COLOR_TEXT,
                bg=COLOR_CARD,
                activebackground=COLOR_CARD,
                anchor="w",
                justify="left",
                wraplength=360,
            )
            rb.pack(fill=tk.X, anchor="w", pady=1)
            self.choice_buttons.append(rb)

        # 첫 번째 보기 기본 선택
        self.choice_var.set(q.options[0])

    def selected_option(self) -> str:
        return self.choice_var.get()
