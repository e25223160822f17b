from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from quizforge.models.exam import Exam, ExamAttempt
from quizforge.models.quiz import Quiz, QuizAttempt
from quizforge.models.subject import Subject
from quizforge.models.topic import Topic
from quizforge.schemas import attempt as attempt_schema


async def create_quiz_attempt(session: AsyncSession, data: attempt_schema.QuizAttemptCreateRequest) -> int:
    """퀴즈 응시 기록 추가 (완료 시각은 저장 시점)"""
    result = await session.execute(
        insert(QuizAttempt).values(
            quiz_id=data.quiz_id,
            score=data.score,
            max_score=data.max_score,
            percentage=data.percentage,
            time_taken_seconds=data.time_taken_seconds,
            completed_at=func.now(),
        )
    )
    return result.inserted_primary_key[0]


async def create_exam_attempt(session: AsyncSession, data: attempt_schema.ExamAttemptCreateRequest) -> int:
    """시험 응시 기록 추가 (완료 시각은 저장 시점)"""
    result = await session.execute(
        insert(ExamAttempt).values(
            exam_id=data.exam_id,
            score=data.score,
            max_score=data.max_score,
            percentage=data.percentage,
            time_taken_seconds=data.time_taken_seconds,
            completed_at=func.now(),
        )
    )
    return result.inserted_primary_key[0]


async def get_all_quiz_attempts(session: AsyncSession) -> list[dict]:
    """모든 퀴즈 응시 기록 조회 (퀴즈/주제/과목명, 합격 기준 포함, 최근 완료순)"""
    stmt = (
        select(
            QuizAttempt.id,
            QuizAttempt.quiz_id,
            Quiz.name.label("quiz_name"),
            Quiz.passing_score_percent,
            Topic.name.label("topic_name"),
            Subject.name.label("subject_name"),
            QuizAttempt.started_at,
            QuizAttempt.completed_at,
            QuizAttempt.score,
            QuizAttempt.max_score,
            QuizAttempt.percentage,
            QuizAttempt.time_taken_seconds,
        )
        .join(Quiz, QuizAttempt.quiz_id == Quiz.id)
        .join(Topic, Quiz.topic_id == Topic.id)
        .join(Subject, Topic.subject_id == Subject.id)
        .order_by(QuizAttempt.completed_at.desc(), QuizAttempt.id.desc())
    )
    result = await session.execute(stmt)
    return [dict(row._mapping) for row in result.all()]


async def get_all_exam_attempts(session: AsyncSession) -> list[dict]:
    """모든 시험 응시 기록 조회 (시험/과목명, 합격 기준 포함, 최근 완료순)"""
    stmt = (
        select(
            ExamAttempt.id,
            ExamAttempt.exam_id,
            Exam.name.label("exam_name"),
            Exam.passing_score_percent,
            Subject.name.label("subject_name"),
            ExamAttempt.started_at,
            ExamAttempt.completed_at,
            ExamAttempt.score,
            ExamAttempt.max_score,
            ExamAttempt.percentage,
            ExamAttempt.time_taken_seconds,
        )
        .join(Exam, ExamAttempt.exam_id == Exam.id)
        .join(Subject, Exam.subject_id == Subject.id)
        .order_by(ExamAttempt.completed_at.desc(), ExamAttempt.id.desc())
    )
    result = await session.execute(stmt)
    return [dict(row._mapping) for row in result.all()]
