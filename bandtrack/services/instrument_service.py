from sqlalchemy.orm import Session
from sqlalchemy import select
from bandtrack.models.instrument import Instrument
from bandtrack.schemas.instrument import InstrumentCreate
from bandtrack.services.store import insert_row, read_guard


def get_instruments(db: Session) -> list[Instrument]:
    with read_guard("instruments", "Error fetching instrument data."):
        return db.scalars(
            select(Instrument).order_by(Instrument.instrument_name, Instrument.instrument_number)
        ).all()


def create_instrument(db: Session, data: InstrumentCreate) -> Instrument:
    instrument = Instrument(**data.model_dump())
    return insert_row(
        db,
        instrument,
        failure_message="Error inserting new instrument data.",
        conflict_message="Error: An instrument with that number already exists.",
    )
