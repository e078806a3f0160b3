# quizapp/services/grader.py
from dataclasses import dataclass, field

from quizapp.config import UNANSWERED
from quizapp.services.question_store import QuestionStore


@dataclass(frozen=True)
class ReportRow:
    number: int
    prompt: str
    user_answer: str
    correct_answer: str
    correct: bool


@dataclass(frozen=True)
class Report:
    rows: list[ReportRow] = field(default_factory=list)
    correct_count: int = 0

    @property
    def total(self) -> int:
        return len(self.rows)


def is_correct(store: QuestionStore, selections: dict[int, str], index: int) -> bool:
    """선택이 없는 문항은 오답 처리"""
    ua = selections.get(index)
    return ua is not None and ua == store.get_correct_answer(index)


def count_correct(store: QuestionStore, selections: dict[int, str]) -> int:
    return sum(1 for i in range(store.question_count()) if is_correct(store, selections, i))


def build_report(store: QuestionStore, selections: dict[int, str]) -> Report:
    """채점 및 리뷰 생성"""
    rows = []
    for i in range(store.question_count()):
        ua = selections.get(i)
        rows.append(ReportRow(
            number=i + 1,
            prompt=store.get_question(i).prompt,
            user_answer=ua if ua is not None else UNANSWERED,
            correct_answer=store.get_correct_answer(i),
            correct=is_correct(store, selections, i),
        ))
    return Report(rows=rows, correct_count=count_correct(store, selections))


def summary_text(correct_count: int, total: int) -> str:
    return f"Number of correct answers: {correct_count}/{total}"
