# quizapp/services/question_store.py
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

NUM_OPTIONS = 4


@dataclass(frozen=True)
class Question:
    prompt: str
    options: tuple[str, ...]


# 문제 목록 (인덱스 0~9 고정)
QUESTIONS: tuple[Question, ...] = (
    Question(
        "How to run Java program on the command prompt?",
        ("java JavaProgram", "run JavaProgram", "javac JavaProgram", "execute JavaProgram"),
    ),
    Question(
        "What is the use of the println method?",
        (
            "It is used to print text on the screen.",
            "It is used to print text on the screen with the line break.",
            "It is used to read text from keyboard.",
            "It is used to read text from a file.",
        ),
    ),
    Question(
        "How to read a character from the keyboard?",
        ("char c=read()", "char c=getch()", "char c=(char)System.in.read()", "char c=System.in.read()"),
    ),
    Question(
        "Which one would be an int",
        ("2.0", '"2"', "2", "'2'"),
    ),
    Question(
        "How do you declare an integer variable x?",
        ("int x", "x int", "int X", "Int x"),
    ),
    Question(
        "How do you convert a string of number to a number?",
        (
            "int num=Integer.parseInt(str_num)",
            "int num=str_num.toInteger()",
            "int num=(int)str_num",
            "int num=Integer.parseInteger(str_num)",
        ),
    ),
    Question(
        "What is the value of x? int x=3>>2",
        ("1", "0", "3", "-3"),
    ),
    Question(
        "How to do exit a loop?",
        ("Using exit", "Using break", "Using continue", "Using terminate"),
    ),
    Question(
        "What is the correct way to allocate one-dimensional array?",
        ("int[size] arr=new int[]", "int arr[size]=new int[]", "int[size] arr=new int[size]", "int[] arr=new int[size]"),
    ),
    Question(
        "What is the correct way to allocate two-dimensional array?",
        (
            "int[size][] arr=new int[][]",
            "int arr=new int[rows][cols]",
            "int arr[rows][]=new int[rows][cols]",
            "int[][] arr=new int[rows][cols]",
        ),
    ),
)

# 정답표: 문제 인덱스 -> 정답 보기 텍스트
ANSWER_KEY: dict[int, str] = {
    0: "java JavaProgram",
    1: "It is used to print text on the screen with the line break.",
    2: "char c=(char)System.in.read()",
    3: "2",
    4: "int x",
    5: "int num=Integer.parseInt(str_num)",
    6: "0",
    7: "Using break",
    8: "int[] arr=new int[size]",
    9: "int[][] arr=new int[rows][cols]",
}


class QuestionStore:
    """읽기 전용 문제은행. 문항과 정답표를 함께 보관"""

    def __init__(self, questions=QUESTIONS, answer_key=ANSWER_KEY):
        self._questions = tuple(questions)
        self._answer_key = dict(answer_key)

    def question_count(self) -> int:
        return len(self._questions)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._questions):
            raise IndexError(
                f"문항 인덱스 범위 초과: {index} (0..{len(self._questions) - 1})"
            )

    def get_question(self, index: int) -> Question:
        self._check_index(index)
        return self._questions[index]

    def get_correct_answer(self, index: int) -> str:
        self._check_index(index)
        return self._answer_key[index]

    def validate(self):
        """문제/정답표 정합성 검사. 어긋나면 ValueError"""
        if set(self._answer_key) != set(range(len(self._questions))):
            raise ValueError(f"정답표 인덱스 불일치: {sorted(self._answer_key)}")
        for i, q in enumerate(self._questions):
            if len(q.options) != NUM_OPTIONS:
                raise ValueError(f"Q{i+1}: 보기 개수 {len(q.options)}개 (필요 {NUM_OPTIONS})")
            if self._answer_key[i] not in q.options:
                raise ValueError(f"Q{i+1}: 정답 '{self._answer_key[i]}' 이(가) 보기에 없음")
        logger.debug("question bank ok: %d questions", len(self._questions))
