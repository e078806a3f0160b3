# =========================
# quizapp/main.py
# =========================
import logging
import tkinter as tk
from tkinter import messagebox

from quizapp.config import LOG_LEVEL
from quizapp.services.question_store import QuestionStore
from quizapp.ui.app_window import QuizApp

logger = logging.getLogger("quizapp")


def setup_logging():
    logger.setLevel(LOG_LEVEL)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)


def run():
    setup_logging()
    try:
        store = QuestionStore()
        store.validate()
        app = QuizApp(store)
        app.mainloop()
    except Exception as e:
        logger.exception("quiz program crashed")
        try:
            messagebox.showerror("Error", str(e))
        except tk.TclError:
            # 디스플레이 없음
            pass
        raise

if __name__ == "__main__":
    run()
