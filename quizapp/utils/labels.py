# quizapp/utils/labels.py

def labels_for_choices(n: int) -> list[str]:
    """보기 개수에 맞는 A,B,C,... 라벨 생성"""
    n = max(0, min(n, 26))
    return [chr(ord("A") + i) for i in range(n)]

def choice_caption(label: str, text: str) -> str:
    """라디오버튼에 표시할 'A. 보기' 문자열"""
    return f"{label}. {text}"
