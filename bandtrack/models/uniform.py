from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from bandtrack.database import Base


class UniformPiece(Base):
    __tablename__ = "uniforms"

    uniform_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    item_type: Mapped[str] = mapped_column(String(128), nullable=False)
    item_number: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    size: Mapped[str | None] = mapped_column(String(32), nullable=True)
    status: Mapped[str | None] = mapped_column(String(64), nullable=True)

    assignments: Mapped[list["Assignment"]] = relationship(back_populates="uniform")
