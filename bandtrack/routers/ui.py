from collections import OrderedDict
from datetime import date
from pathlib import Path
from threading import Lock
from typing import Callable
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from bandtrack.client import render
from bandtrack.client.availability import build_assignment_options
from bandtrack.client.roster import RosterSnapshot
from bandtrack.database import get_db
from bandtrack.errors import validation_message
from bandtrack.schemas.assignment import ActiveIds, AssignmentCreate, AssignmentRow
from bandtrack.schemas.instrument import InstrumentCreate, InstrumentResponse
from bandtrack.schemas.student import StudentCreate, StudentResponse
from bandtrack.schemas.uniform import UniformCreate, UniformResponse
import bandtrack.services.assignment_service as assignment_svc
import bandtrack.services.instrument_service as instrument_svc
import bandtrack.services.roster_service as roster_svc
import bandtrack.services.uniform_service as uniform_svc

router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.globals.update(
    student_label=render.student_label,
    instrument_label=render.instrument_label,
    uniform_label=render.uniform_label,
    instrument_cell=render.assignment_instrument_cell,
    uniform_cell=render.assignment_uniform_cell,
    date_in_cell=render.assignment_date_in_cell,
)

_LOAD_ERROR = "Error loading data. Check your server connection."

# Roster snapshots taken at page load, one per browser session.
_SNAPSHOT_KEY = "roster_snapshot"
_MAX_SNAPSHOTS = 512
_snapshots: "OrderedDict[str, RosterSnapshot]" = OrderedDict()
_snapshots_lock = Lock()


def flash(request: Request, message: str, category: str = "info") -> None:
    msgs = request.session.setdefault("_flash_messages", [])
    msgs.append((category, message))


def _session_snapshot(request: Request) -> RosterSnapshot | None:
    key = request.session.get(_SNAPSHOT_KEY)
    if not key:
        return None
    with _snapshots_lock:
        snapshot = _snapshots.get(key)
        if snapshot is not None:
            _snapshots.move_to_end(key)
        return snapshot


def _keep_snapshot(request: Request, students: list[StudentResponse]) -> RosterSnapshot:
    """Make `students` the roster this session searches until its next page load."""
    key = request.session.get(_SNAPSHOT_KEY) or uuid4().hex
    request.session[_SNAPSHOT_KEY] = key
    with _snapshots_lock:
        snapshot = _snapshots.get(key)
        if snapshot is None:
            snapshot = _snapshots[key] = RosterSnapshot()
        snapshot.replace(students)
        _snapshots.move_to_end(key)
        while len(_snapshots) > _MAX_SNAPSHOTS:
            _snapshots.popitem(last=False)
    return snapshot


def _load(loader: Callable[[Session], list], model: type[BaseModel], db: Session) -> tuple[list, str | None]:
    try:
        return [model.model_validate(row) for row in loader(db)], None
    except HTTPException:
        # the service has already logged the underlying store error
        return [], _LOAD_ERROR


def _render_index(request: Request, db: Session, values: dict | None = None, status_code: int = 200):
    roster, roster_error = _load(roster_svc.get_roster, StudentResponse, db)
    instruments, instruments_error = _load(instrument_svc.get_instruments, InstrumentResponse, db)
    uniforms, uniforms_error = _load(uniform_svc.get_uniforms, UniformResponse, db)
    assignments, assignments_error = _load(assignment_svc.get_assignments, AssignmentRow, db)
    active, active_error = _load(assignment_svc.get_active_ids, ActiveIds, db)
    if not roster_error:
        _keep_snapshot(request, roster)

    options = None
    if not (roster_error or instruments_error or uniforms_error or active_error):
        options = build_assignment_options(roster, instruments, uniforms, active)
    else:
        flash(request, "Failed to load assignment options. Check server connection.", "error")

    return templates.TemplateResponse(request, "index.html", {
        "roster": roster,
        "instruments": instruments,
        "uniforms": uniforms,
        "assignments": assignments,
        "options": options,
        # roster rows partial
        "students": roster,
        "searching": False,
        "error": None,
        "errors": {
            "roster": roster_error,
            "instruments": instruments_error,
            "uniforms": uniforms_error,
            "assignments": assignments_error,
        },
        "values": values or {},
        "today": date.today().isoformat(),
    }, status_code=status_code)


def _submit(request: Request, db: Session, form_name: str, form: dict,
            schema: type[BaseModel], create: Callable, success: str):
    """Create one record from a page form.

    On success redirect back to the page; on failure re-render it with the
    submitted values still filled in and the error flashed.
    """
    try:
        create(db, schema.model_validate(form))
    except ValidationError as exc:
        flash(request, f"Error: {validation_message(exc.errors())}", "error")
        return _render_index(request, db, values={form_name: form}, status_code=400)
    except HTTPException as exc:
        flash(request, str(exc.detail), "error")
        return _render_index(request, db, values={form_name: form}, status_code=exc.status_code)
    flash(request, success, "success")
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
def index(request: Request, db: Session = Depends(get_db)):
    return _render_index(request, db)


@router.get("/roster/search", response_class=HTMLResponse)
def roster_search(request: Request, search: str = "", db: Session = Depends(get_db)):
    """Filter the roster as it stood when this session last loaded the page."""
    snapshot, error = _session_snapshot(request), None
    if snapshot is None:
        students, error = _load(roster_svc.get_roster, StudentResponse, db)
        if error is None:
            snapshot = _keep_snapshot(request, students)
    return templates.TemplateResponse(request, "partials/roster_rows.html", {
        "students": snapshot.filter(search) if snapshot is not None else [],
        "searching": bool(search.strip()),
        "error": error,
    })


@router.post("/roster/new")
async def submit_student(request: Request, db: Session = Depends(get_db)):
    form = dict(await request.form())
    return _submit(request, db, "student", form, StudentCreate,
                   roster_svc.create_student, "Student added successfully!")


@router.post("/instruments/new")
async def submit_instrument(request: Request, db: Session = Depends(get_db)):
    form = dict(await request.form())
    return _submit(request, db, "instrument", form, InstrumentCreate,
                   instrument_svc.create_instrument, "Instrument added successfully!")


@router.post("/uniforms/new")
async def submit_uniform(request: Request, db: Session = Depends(get_db)):
    form = dict(await request.form())
    return _submit(request, db, "uniform", form, UniformCreate,
                   uniform_svc.create_uniform, "Uniform added successfully!")


@router.post("/assignments/new")
async def submit_assignment(request: Request, db: Session = Depends(get_db)):
    form = dict(await request.form())
    return _submit(request, db, "assignment", form, AssignmentCreate,
                   assignment_svc.create_assignment, "Assignment created successfully!")
