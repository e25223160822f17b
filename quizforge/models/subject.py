from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizforge.models.base import Base, TimestampMixin


class Subject(Base, TimestampMixin):
    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    color: Mapped[str] = mapped_column(nullable=False)
    icon: Mapped[str | None] = mapped_column(default=None)

    topics: Mapped[list["Topic"]] = relationship(
        "Topic",
        back_populates="subject",
        passive_deletes=True,
    )
    exams: Mapped[list["Exam"]] = relationship(
        "Exam",
        back_populates="subject",
        passive_deletes=True,
    )
