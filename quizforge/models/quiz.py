from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizforge.models.base import Base, TimestampMixin


class Quiz(Base, TimestampMixin):
    __tablename__ = "quizzes"

    id: Mapped[int] = mapped_column(primary_key=True)
    topic_id: Mapped[int] = mapped_column(
        ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    question_count: Mapped[int] = mapped_column(nullable=False)
    time_limit_minutes: Mapped[int | None] = mapped_column(default=None)
    shuffle_questions: Mapped[bool] = mapped_column(nullable=False, default=True)
    shuffle_options: Mapped[bool] = mapped_column(nullable=False, default=True)
    show_answers_after: Mapped[str] = mapped_column(nullable=False, default="END_OF_QUIZ")  # EACH_QUESTION, END_OF_QUIZ, NEVER
    passing_score_percent: Mapped[int] = mapped_column(nullable=False, default=60)

    topic: Mapped["Topic"] = relationship("Topic", back_populates="quizzes")
    attempts: Mapped[list["QuizAttempt"]] = relationship(
        "QuizAttempt",
        back_populates="quiz",
        passive_deletes=True,
    )


class QuizAttempt(Base):
    """퀴즈 응시 기록 (추가만 가능, passed는 저장하지 않음)"""

    __tablename__ = "quiz_attempts"

    id: Mapped[int] = mapped_column(primary_key=True)
    quiz_id: Mapped[int] = mapped_column(
        ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)
    score: Mapped[int | None] = mapped_column(default=None)
    max_score: Mapped[int | None] = mapped_column(default=None)
    percentage: Mapped[float | None] = mapped_column(default=None)
    time_taken_seconds: Mapped[int | None] = mapped_column(default=None)

    quiz: Mapped["Quiz"] = relationship("Quiz", back_populates="attempts")
