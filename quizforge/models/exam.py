from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizforge.models.base import Base, TimestampMixin


class Exam(Base, TimestampMixin):
    __tablename__ = "exams"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    total_question_count: Mapped[int] = mapped_column(nullable=False)
    time_limit_minutes: Mapped[int | None] = mapped_column(default=None)
    shuffle_questions: Mapped[bool] = mapped_column(nullable=False, default=True)
    shuffle_options: Mapped[bool] = mapped_column(nullable=False, default=True)
    show_answers_after: Mapped[str] = mapped_column(nullable=False, default="END_OF_QUIZ")
    passing_score_percent: Mapped[int] = mapped_column(nullable=False, default=60)

    subject: Mapped["Subject"] = relationship("Subject", back_populates="exams")
    topics: Mapped[list["ExamTopic"]] = relationship(
        "ExamTopic",
        back_populates="exam",
        passive_deletes=True,
    )
    attempts: Mapped[list["ExamAttempt"]] = relationship(
        "ExamAttempt",
        back_populates="exam",
        passive_deletes=True,
    )


class ExamTopic(Base):
    """시험-주제 연결 (주제별 출제 문항 수)"""

    __tablename__ = "exam_topics"

    id: Mapped[int] = mapped_column(primary_key=True)
    exam_id: Mapped[int] = mapped_column(
        ForeignKey("exams.id", ondelete="CASCADE"), nullable=False, index=True
    )
    topic_id: Mapped[int] = mapped_column(
        ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_count: Mapped[int] = mapped_column(nullable=False)

    exam: Mapped["Exam"] = relationship("Exam", back_populates="topics")
    topic: Mapped["Topic"] = relationship("Topic")


class ExamAttempt(Base):
    """시험 응시 기록 (추가만 가능, passed는 저장하지 않음)"""

    __tablename__ = "exam_attempts"

    id: Mapped[int] = mapped_column(primary_key=True)
    exam_id: Mapped[int] = mapped_column(
        ForeignKey("exams.id", ondelete="CASCADE"), nullable=False, index=True
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)
    score: Mapped[int | None] = mapped_column(default=None)
    max_score: Mapped[int | None] = mapped_column(default=None)
    percentage: Mapped[float | None] = mapped_column(default=None)
    time_taken_seconds: Mapped[int | None] = mapped_column(default=None)

    exam: Mapped["Exam"] = relationship("Exam", back_populates="attempts")
