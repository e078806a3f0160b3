# =========================
# quizapp/config.py
# =========================
import logging

# 메인 창
WINDOW_TITLE = "Quiz Program"
WINDOW_SIZE = "430x350"
PROMPT_HINT = "Choose a correct answer"

# 진행 버튼 라벨
NEXT_LABEL = "Next"
FINISH_LABEL = "Show answers"

# 결과(리포트) 창
REPORT_TITLE = "Answers"
REPORT_SIZE = "850x550"
UNANSWERED = "unanswered"

LOG_LEVEL = logging.INFO
