from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from bandtrack.database import Base


class Instrument(Base):
    __tablename__ = "instruments"
    __table_args__ = (
        UniqueConstraint("instrument_name", "instrument_number", name="uq_instruments_name_number"),
    )

    instrument_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    instrument_name: Mapped[str] = mapped_column(String(128), nullable=False)
    instrument_number: Mapped[str] = mapped_column(String(64), nullable=False)
    locker_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    locker_code: Mapped[str | None] = mapped_column(String(32), nullable=True)
    condition_notes: Mapped[str | None] = mapped_column(String(2000), nullable=True)

    assignments: Mapped[list["Assignment"]] = relationship(back_populates="instrument")
