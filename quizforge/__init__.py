"""QuizForge 학습 문제 저장소 코어"""

__version__ = "0.1.0"
