# quizapp/services/session.py
import logging

from quizapp.services.question_store import Question, QuestionStore

logger = logging.getLogger(__name__)

STATE_ACTIVE = "active"
STATE_COMPLETE = "complete"


class QuizSession:
    """현재 문항 인덱스와 사용자 선택을 보관하는 시험 상태.
       화면은 subscribe()로 변경 알림을 받고, advance()/reset()만 호출한다."""

    def __init__(self, store: QuestionStore):
        self.store = store
        self.current_index = 0
        self._selections: dict[int, str] = {}
        self._listeners = []

    # ------------------------------------------------------------------
    # 구독
    # ------------------------------------------------------------------
    def subscribe(self, listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # 조회
    # ------------------------------------------------------------------
    @property
    def total(self) -> int:
        return self.store.question_count()

    @property
    def is_complete(self) -> bool:
        return self.current_index >= self.total

    @property
    def state(self) -> str:
        return STATE_COMPLETE if self.is_complete else STATE_ACTIVE

    @property
    def is_last_question(self) -> bool:
        return self.current_index == self.total - 1

    @property
    def current_question(self) -> Question:
        if self.is_complete:
            raise RuntimeError("시험 완료 상태: 현재 문항 없음")
        return self.store.get_question(self.current_index)

    @property
    def selections(self) -> dict[int, str]:
        return dict(self._selections)

    # ------------------------------------------------------------------
    # 상태 전이
    # ------------------------------------------------------------------
    def start(self):
        self.current_index = 0
        self._selections.clear()
        logger.info("quiz started (%d questions)", self.total)
        self._notify()

    def advance(self, selected_option: str):
        if self.is_complete:
            raise RuntimeError("시험 완료 후 advance() 호출")
        q = self.current_question
        if selected_option not in q.options:
            raise ValueError(
                f"Q{self.current_index+1}: '{selected_option}' 은(는) 보기에 없음 {list(q.options)}"
            )

        self._selections[self.current_index] = selected_option
        logger.debug("Q%d answered: %s", self.current_index + 1, selected_option)

        # 마지막 문항이면 완료 상태로
        self.current_index += 1
        if self.is_complete:
            logger.info("quiz complete: %d answers recorded", len(self._selections))
        self._notify()

    def reset(self):
        logger.info("quiz reset")
        self.current_index = 0
        self._selections.clear()
        self._notify()
