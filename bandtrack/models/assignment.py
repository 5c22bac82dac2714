from datetime import date
from sqlalchemy import CheckConstraint, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from bandtrack.database import Base


class Assignment(Base):
    """Check-out of an instrument and/or uniform piece to a student.

    Create-only: there is no update path, so ``date_in`` is fixed at insert
    time. A row with ``date_in`` NULL is an active (outstanding) assignment.
    Nothing at this level stops two active rows pointing at the same
    instrument or uniform piece.
    """

    __tablename__ = "assignments"
    __table_args__ = (
        CheckConstraint(
            "instrument_fk IS NOT NULL OR uniform_fk IS NOT NULL",
            name="ck_assignments_item_present",
        ),
    )

    assignment_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    student_fk: Mapped[int] = mapped_column(ForeignKey("roster.student_id"), nullable=False, index=True)
    instrument_fk: Mapped[int | None] = mapped_column(
        ForeignKey("instruments.instrument_id"), nullable=True, index=True
    )
    uniform_fk: Mapped[int | None] = mapped_column(ForeignKey("uniforms.uniform_id"), nullable=True, index=True)
    date_out: Mapped[date] = mapped_column(Date, nullable=False)
    date_in: Mapped[date | None] = mapped_column(Date, nullable=True)

    student: Mapped["Student"] = relationship(back_populates="assignments")
    instrument: Mapped["Instrument | None"] = relationship(back_populates="assignments")
    uniform: Mapped["UniformPiece | None"] = relationship(back_populates="assignments")
