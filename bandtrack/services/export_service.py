import io
from sqlalchemy.orm import Session
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter
from bandtrack.services import assignment_service, instrument_service, roster_service, uniform_service

_HEADER_FILL = PatternFill(start_color="1C2D42", end_color="1C2D42", fill_type="solid")
_HEADER_FONT = Font(bold=True, color="F5A623", size=11)


def _write_sheet(ws, headers: list[str], rows: list[list], widths: list[int]) -> None:
    for col, h in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col, value=h)
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.alignment = Alignment(horizontal="center")

    for row_num, values in enumerate(rows, 2):
        for col, value in enumerate(values, 1):
            ws.cell(row=row_num, column=col, value=value)

    for i, w in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(i)].width = w
    ws.row_dimensions[1].height = 22
    ws.freeze_panes = "A2"


def export_inventory_excel(db: Session) -> bytes:
    """Workbook with one sheet per collection: roster, instruments, uniforms, assignments."""
    wb = Workbook()

    ws = wb.active
    ws.title = "Roster"
    _write_sheet(
        ws,
        ["ID", "Name", "Graduation Year", "Instrument Played"],
        [
            [s.student_id, s.full_name, s.graduation_year, s.instrument_played or ""]
            for s in roster_service.get_roster(db)
        ],
        [6, 32, 16, 24],
    )

    _write_sheet(
        wb.create_sheet("Instruments"),
        ["ID", "Instrument", "Number", "Locker", "Locker Code", "Condition Notes"],
        [
            [i.instrument_id, i.instrument_name, i.instrument_number,
             i.locker_number or "", i.locker_code or "", i.condition_notes or ""]
            for i in instrument_service.get_instruments(db)
        ],
        [6, 24, 14, 10, 14, 40],
    )

    _write_sheet(
        wb.create_sheet("Uniforms"),
        ["ID", "Item Type", "Item Number", "Size", "Status"],
        [
            [u.uniform_id, u.item_type, u.item_number, u.size or "", u.status or ""]
            for u in uniform_service.get_uniforms(db)
        ],
        [6, 24, 14, 10, 16],
    )

    _write_sheet(
        wb.create_sheet("Assignments"),
        ["ID", "Student", "Graduation Year", "Instrument", "Instrument Number",
         "Uniform", "Uniform Number", "Date Out", "Date In"],
        [
            [a["assignment_id"], a["student_name"], a["graduation_year"],
             a["instrument_name"] or "", a["instrument_number"] or "",
             a["uniform_type"] or "", a["uniform_item_number"] or "",
             a["date_out"].isoformat(),
             a["date_in"].isoformat() if a["date_in"] else "Active"]
            for a in assignment_service.get_assignments(db)
        ],
        [6, 28, 16, 22, 18, 20, 16, 12, 12],
    )

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
