from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizforge.models.base import Base, TimestampMixin


class Question(Base, TimestampMixin):
    """문제 기본 행. question_type이 4개 답안 테이블 중 어느 것이 유효한지 결정한다."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    topic_id: Mapped[int] = mapped_column(
        ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_type: Mapped[str] = mapped_column(nullable=False)  # MULTIPLE_CHOICE, FILL_BLANK, NUMERIC, ORDERING, MATCHING
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_image_path: Mapped[str | None] = mapped_column(default=None)
    explanation: Mapped[str | None] = mapped_column(Text, default=None)
    difficulty: Mapped[str] = mapped_column(nullable=False, default="MEDIUM")  # EASY, MEDIUM, HARD
    points: Mapped[int] = mapped_column(nullable=False, default=1)
    source: Mapped[str | None] = mapped_column(default=None)

    topic: Mapped["Topic"] = relationship("Topic", back_populates="questions")
    options: Mapped[list["QuestionOption"]] = relationship(
        "QuestionOption", back_populates="question", passive_deletes=True
    )
    blanks: Mapped[list["QuestionBlank"]] = relationship(
        "QuestionBlank", back_populates="question", passive_deletes=True
    )
    order_items: Mapped[list["QuestionOrderItem"]] = relationship(
        "QuestionOrderItem", back_populates="question", passive_deletes=True
    )
    matches: Mapped[list["QuestionMatch"]] = relationship(
        "QuestionMatch", back_populates="question", passive_deletes=True
    )


class QuestionOption(Base):
    __tablename__ = "question_options"

    id: Mapped[int] = mapped_column(primary_key=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    option_text: Mapped[str] = mapped_column(Text, nullable=False)
    option_image_path: Mapped[str | None] = mapped_column(default=None)
    is_correct: Mapped[bool] = mapped_column(nullable=False, default=False)
    display_order: Mapped[int] = mapped_column(nullable=False, default=0)

    question: Mapped["Question"] = relationship("Question", back_populates="options")


class QuestionBlank(Base):
    __tablename__ = "question_blanks"

    id: Mapped[int] = mapped_column(primary_key=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    blank_index: Mapped[int] = mapped_column(nullable=False)
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False)
    acceptable_answers: Mapped[str | None] = mapped_column(Text, default=None)  # 직렬화된 대체 정답 목록
    is_numeric: Mapped[bool] = mapped_column(nullable=False, default=False)
    numeric_tolerance: Mapped[float | None] = mapped_column(default=None)
    unit: Mapped[str | None] = mapped_column(default=None)
    input_type: Mapped[str | None] = mapped_column(default="INPUT")  # INPUT, DROPDOWN
    dropdown_options: Mapped[str | None] = mapped_column(Text, default=None)

    question: Mapped["Question"] = relationship("Question", back_populates="blanks")


class QuestionOrderItem(Base):
    __tablename__ = "question_order_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_text: Mapped[str] = mapped_column(Text, nullable=False)
    correct_position: Mapped[int] = mapped_column(nullable=False)

    question: Mapped["Question"] = relationship("Question", back_populates="order_items")


class QuestionMatch(Base):
    __tablename__ = "question_matches"

    id: Mapped[int] = mapped_column(primary_key=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    left_item: Mapped[str] = mapped_column(Text, nullable=False)
    right_item: Mapped[str] = mapped_column(Text, nullable=False)
    left_image_path: Mapped[str | None] = mapped_column(default=None)
    right_image_path: Mapped[str | None] = mapped_column(default=None)
    display_order: Mapped[int] = mapped_column(nullable=False, default=0)

    question: Mapped["Question"] = relationship("Question", back_populates="matches")
