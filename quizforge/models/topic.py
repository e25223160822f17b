from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizforge.models.base import Base, TimestampMixin


class Topic(Base, TimestampMixin):
    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    week_number: Mapped[int | None] = mapped_column(default=None)

    subject: Mapped["Subject"] = relationship("Subject", back_populates="topics")
    questions: Mapped[list["Question"]] = relationship(
        "Question",
        back_populates="topic",
        passive_deletes=True,
    )
    quizzes: Mapped[list["Quiz"]] = relationship(
        "Quiz",
        back_populates="topic",
        passive_deletes=True,
    )
