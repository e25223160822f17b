from sqlalchemy import Float, case, cast, func, select, type_coerce
from sqlalchemy.ext.asyncio import AsyncSession

from quizforge.models.exam import Exam, ExamAttempt
from quizforge.models.quiz import Quiz, QuizAttempt
from quizforge.models.subject import Subject
from quizforge.models.topic import Topic


def _pass_rate(attempt_id, percentage, passing_score_percent):
    # 100 * (합격 기준 이상 응시 수) / 전체 응시 수, 실수 나눗셈
    passed_count = func.sum(case((percentage >= passing_score_percent, 1), else_=0))
    return type_coerce(cast(passed_count, Float) * 100.0 / func.count(attempt_id), Float)


async def get_subject_performance(session: AsyncSession) -> list[dict]:
    """과목별 시험 성적 (응시 기록이 없는 과목은 제외, 평균 점수 내림차순)"""
    attempts = func.count(ExamAttempt.id).label("attempts")
    average_score = cast(func.avg(ExamAttempt.percentage), Float).label("average_score")
    stmt = (
        select(
            Subject.name.label("subject_name"),
            attempts,
            average_score,
            _pass_rate(ExamAttempt.id, ExamAttempt.percentage, Exam.passing_score_percent).label("pass_rate"),
        )
        .join(Exam, Exam.subject_id == Subject.id)
        .join(ExamAttempt, ExamAttempt.exam_id == Exam.id)
        .where(ExamAttempt.completed_at.is_not(None))
        .group_by(Subject.id, Subject.name)
        .having(func.count(ExamAttempt.id) > 0)
        .order_by(average_score.desc(), Subject.id)
    )
    result = await session.execute(stmt)
    return [dict(row._mapping) for row in result.all()]


async def get_topic_performance(session: AsyncSession) -> list[dict]:
    """주제별 퀴즈 성적 (과목명 포함, 응시 기록이 없는 주제는 제외, 평균 점수 내림차순)"""
    attempts = func.count(QuizAttempt.id).label("attempts")
    average_score = cast(func.avg(QuizAttempt.percentage), Float).label("average_score")
    stmt = (
        select(
            Topic.name.label("topic_name"),
            Subject.name.label("subject_name"),
            attempts,
            average_score,
            _pass_rate(QuizAttempt.id, QuizAttempt.percentage, Quiz.passing_score_percent).label("pass_rate"),
        )
        .join(Subject, Topic.subject_id == Subject.id)
        .join(Quiz, Quiz.topic_id == Topic.id)
        .join(QuizAttempt, QuizAttempt.quiz_id == Quiz.id)
        .where(QuizAttempt.completed_at.is_not(None))
        .group_by(Topic.id, Topic.name, Subject.name)
        .having(func.count(QuizAttempt.id) > 0)
        .order_by(average_score.desc(), Topic.id)
    )
    result = await session.execute(stmt)
    return [dict(row._mapping) for row in result.all()]
