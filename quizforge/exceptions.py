"""커스텀 예외 클래스 정의"""
from enum import Enum


class ErrorKind(str, Enum):
    """경계에서 문자열로 변환되기 전까지 유지되는 오류 종류"""
    NOT_FOUND = "NOT_FOUND"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    kind: ErrorKind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, message: str, kind: ErrorKind | None = None):
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)


class NotFoundError(BaseAppError):
    """대상을 찾을 수 없을 때 발생하는 예외"""

    kind = ErrorKind.NOT_FOUND


class SubjectNotFoundError(NotFoundError):
    """과목을 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, subject_id: int):
        self.subject_id = subject_id
        super().__init__(f"과목을 찾을 수 없습니다: {subject_id}")


class TopicNotFoundError(NotFoundError):
    """주제를 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, topic_id: int):
        self.topic_id = topic_id
        super().__init__(f"주제를 찾을 수 없습니다: {topic_id}")


class QuestionNotFoundError(NotFoundError):
    """문제를 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"문제를 찾을 수 없습니다: {question_id}")


class QuizNotFoundError(NotFoundError):
    """퀴즈를 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, quiz_id: int):
        self.quiz_id = quiz_id
        super().__init__(f"퀴즈를 찾을 수 없습니다: {quiz_id}")


class ExamNotFoundError(NotFoundError):
    """시험을 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, exam_id: int):
        self.exam_id = exam_id
        super().__init__(f"시험을 찾을 수 없습니다: {exam_id}")


class ConstraintViolationError(BaseAppError):
    """유일성/외래키 제약 위반 (저장소 엔진에서 발생)"""

    kind = ErrorKind.CONSTRAINT_VIOLATION

    def __init__(self, message: str = "데이터 제약 조건을 위반했습니다."):
        super().__init__(message)


class StorageUnavailableError(BaseAppError):
    """저장소 핸들을 사용할 수 없을 때 발생하는 예외"""

    kind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, message: str = "데이터베이스를 사용할 수 없습니다."):
        super().__init__(message)


class MalformedPayloadError(BaseAppError):
    """요청 데이터 형식이 잘못되었을 때 발생하는 예외"""

    kind = ErrorKind.MALFORMED_PAYLOAD

    def __init__(self, message: str):
        super().__init__(message)


class InvalidQuestionVariantError(MalformedPayloadError):
    """문제 유형과 맞지 않는 답안 데이터가 포함된 경우"""

    def __init__(self, question_type: str, unexpected: list[str]):
        self.question_type = question_type
        self.unexpected = unexpected
        fields = ", ".join(unexpected)
        super().__init__(f"{question_type} 유형 문제에 허용되지 않는 답안 데이터가 있습니다: {fields}")
