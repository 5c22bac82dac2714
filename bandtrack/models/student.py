from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from bandtrack.database import Base


class Student(Base):
    __tablename__ = "roster"
    __table_args__ = (
        UniqueConstraint("full_name", "graduation_year", name="uq_roster_name_year"),
    )

    student_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    graduation_year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    instrument_played: Mapped[str | None] = mapped_column(String(128), nullable=True)

    assignments: Mapped[list["Assignment"]] = relationship(back_populates="student")
