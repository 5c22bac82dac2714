from sqlalchemy.orm import Session
from sqlalchemy import select
from bandtrack.models.uniform import UniformPiece
from bandtrack.schemas.uniform import UniformCreate
from bandtrack.services.store import insert_row, read_guard


def get_uniforms(db: Session) -> list[UniformPiece]:
    with read_guard("uniforms", "Error fetching uniform data."):
        return db.scalars(
            select(UniformPiece).order_by(UniformPiece.item_type, UniformPiece.item_number)
        ).all()


def create_uniform(db: Session, data: UniformCreate) -> UniformPiece:
    piece = UniformPiece(**data.model_dump())
    return insert_row(
        db,
        piece,
        failure_message="Error inserting new uniform data.",
        conflict_message="Error: A uniform piece with that Item Number already exists.",
    )
