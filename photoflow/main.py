import logging
from dataclasses import asdict
from datetime import date
from typing import Optional
from fastapi import FastAPI, Depends, HTTPException, Query, Request, status
from . import budget, config, crud, dashboard, schemas
from .enums import TaskStatus
from .timeline import Direction, Timeline, View, navigate

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=config.API_TITLE)
app.state.storage = crud.Storage()


def get_storage(request: Request) -> crud.Storage:
    return request.app.state.storage


def _found(record, kind: str):
    if not record:
        raise HTTPException(status_code=404, detail=f"{kind} not found")
    return record


def _deleted(deleted: bool, kind: str):
    if not deleted:
        raise HTTPException(status_code=404, detail=f"{kind} not found")
    return None


def _out_of_range(reference: date):
    return HTTPException(status_code=400, detail=f"Date out of range near {reference.isoformat()}")


# PROJECTS
@app.get("/api/projects", response_model=list[schemas.ProjectOut])
def list_projects(storage: crud.Storage = Depends(get_storage)):
    return storage.projects.list()

@app.get("/api/projects/{project_id}", response_model=schemas.ProjectOut)
def get_project(project_id: str, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.projects.get(project_id), "Project")

@app.post("/api/projects", response_model=schemas.ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(project: schemas.ProjectCreate, storage: crud.Storage = Depends(get_storage)):
    return storage.create_project(project.model_dump())

@app.patch("/api/projects/{project_id}", response_model=schemas.ProjectOut)
def update_project(project_id: str, project: schemas.ProjectUpdate, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.projects.update(project_id, project.model_dump(exclude_unset=True)), "Project")

@app.delete("/api/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: str, storage: crud.Storage = Depends(get_storage)):
    return _deleted(storage.delete_project(project_id), "Project")

@app.get("/api/projects/{project_id}/tasks", response_model=list[schemas.TaskOut])
def list_project_tasks(project_id: str, storage: crud.Storage = Depends(get_storage)):
    return storage.tasks.list_by_project(project_id)

@app.get("/api/projects/{project_id}/contacts", response_model=list[schemas.ContactOut])
def list_project_contacts(project_id: str, storage: crud.Storage = Depends(get_storage)):
    return storage.contacts.list_by_project(project_id)

@app.get("/api/projects/{project_id}/budget", response_model=list[schemas.BudgetItemOut])
def list_project_budget_items(project_id: str, storage: crud.Storage = Depends(get_storage)):
    return storage.budget_items.list_by_project(project_id)

@app.get("/api/projects/{project_id}/events", response_model=list[schemas.CalendarEventOut])
def list_project_events(project_id: str, storage: crud.Storage = Depends(get_storage)):
    return storage.calendar_events.list_by_project(project_id)

@app.get("/api/projects/{project_id}/budget/summary", response_model=schemas.BudgetSummaryOut)
def get_budget_summary(project_id: str, storage: crud.Storage = Depends(get_storage)):
    with storage.locked():
        project = _found(storage.projects.get(project_id), "Project")
        items = storage.budget_items.list_by_project(project_id)
    summary = budget.summarize(project.budget, items)
    return schemas.BudgetSummaryOut(project_id=project_id, margin_label=summary.margin_label, **asdict(summary))

@app.get("/api/projects/{project_id}/tasks/progress", response_model=schemas.TaskProgressOut)
def get_task_progress(project_id: str, storage: crud.Storage = Depends(get_storage)):
    with storage.locked():
        _found(storage.projects.get(project_id), "Project")
        tasks = storage.tasks.list_by_project(project_id)
    sections = dashboard.section_progress(tasks)
    return schemas.TaskProgressOut(
        project_id=project_id,
        total=len(tasks),
        completed=sum(1 for t in tasks if t.status == TaskStatus.COMPLETED.value),
        sections=sections,
    )

# TASKS
@app.get("/api/tasks", response_model=list[schemas.TaskOut])
def list_tasks(storage: crud.Storage = Depends(get_storage)):
    return storage.tasks.list()

@app.get("/api/tasks/{task_id}", response_model=schemas.TaskOut)
def get_task(task_id: str, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.tasks.get(task_id), "Task")

@app.post("/api/tasks", response_model=schemas.TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(task: schemas.TaskCreate, storage: crud.Storage = Depends(get_storage)):
    return storage.tasks.insert(task.model_dump())

@app.patch("/api/tasks/{task_id}", response_model=schemas.TaskOut)
def update_task(task_id: str, task_update: schemas.TaskUpdate, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.tasks.update(task_id, task_update.model_dump(exclude_unset=True)), "Task")

@app.delete("/api/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, storage: crud.Storage = Depends(get_storage)):
    return _deleted(storage.tasks.delete(task_id), "Task")

# CONTACTS
@app.get("/api/contacts", response_model=list[schemas.ContactOut])
def list_contacts(storage: crud.Storage = Depends(get_storage)):
    return storage.contacts.list()

@app.get("/api/contacts/{contact_id}", response_model=schemas.ContactOut)
def get_contact(contact_id: str, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.contacts.get(contact_id), "Contact")

@app.post("/api/contacts", response_model=schemas.ContactOut, status_code=status.HTTP_201_CREATED)
def create_contact(contact: schemas.ContactCreate, storage: crud.Storage = Depends(get_storage)):
    return storage.contacts.insert(contact.model_dump())

@app.patch("/api/contacts/{contact_id}", response_model=schemas.ContactOut)
def update_contact(contact_id: str, contact: schemas.ContactUpdate, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.contacts.update(contact_id, contact.model_dump(exclude_unset=True)), "Contact")

@app.delete("/api/contacts/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(contact_id: str, storage: crud.Storage = Depends(get_storage)):
    return _deleted(storage.contacts.delete(contact_id), "Contact")

# BUDGET ITEMS
@app.get("/api/budget-items", response_model=list[schemas.BudgetItemOut])
def list_budget_items(storage: crud.Storage = Depends(get_storage)):
    return storage.budget_items.list()

@app.get("/api/budget-items/{item_id}", response_model=schemas.BudgetItemOut)
def get_budget_item(item_id: str, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.budget_items.get(item_id), "Budget item")

@app.post("/api/budget-items", response_model=schemas.BudgetItemOut, status_code=status.HTTP_201_CREATED)
def create_budget_item(item: schemas.BudgetItemCreate, storage: crud.Storage = Depends(get_storage)):
    return storage.budget_items.insert(item.model_dump())

@app.patch("/api/budget-items/{item_id}", response_model=schemas.BudgetItemOut)
def update_budget_item(item_id: str, item: schemas.BudgetItemUpdate, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.budget_items.update(item_id, item.model_dump(exclude_unset=True)), "Budget item")

@app.delete("/api/budget-items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget_item(item_id: str, storage: crud.Storage = Depends(get_storage)):
    return _deleted(storage.budget_items.delete(item_id), "Budget item")

# CALENDAR EVENTS
@app.get("/api/calendar-events", response_model=list[schemas.CalendarEventOut])
def list_calendar_events(storage: crud.Storage = Depends(get_storage)):
    return storage.calendar_events.list()

@app.get("/api/calendar-events/{event_id}", response_model=schemas.CalendarEventOut)
def get_calendar_event(event_id: str, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.calendar_events.get(event_id), "Calendar event")

@app.post("/api/calendar-events", response_model=schemas.CalendarEventOut, status_code=status.HTTP_201_CREATED)
def create_calendar_event(event: schemas.CalendarEventCreate, storage: crud.Storage = Depends(get_storage)):
    return storage.calendar_events.insert(event.model_dump())

@app.patch("/api/calendar-events/{event_id}", response_model=schemas.CalendarEventOut)
def update_calendar_event(event_id: str, event: schemas.CalendarEventUpdate, storage: crud.Storage = Depends(get_storage)):
    return _found(storage.calendar_events.update(event_id, event.model_dump(exclude_unset=True)), "Calendar event")

@app.delete("/api/calendar-events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_calendar_event(event_id: str, storage: crud.Storage = Depends(get_storage)):
    return _deleted(storage.calendar_events.delete(event_id), "Calendar event")

# CALENDAR / DASHBOARD
@app.get("/api/calendar", response_model=schemas.CalendarOut)
def get_calendar(
    view: View = View.MONTH,
    reference: Optional[date] = Query(default=None, alias="date"),
    storage: crud.Storage = Depends(get_storage),
):
    reference = reference or date.today()
    try:
        return Timeline(storage).window(view, reference)
    except OverflowError:
        raise _out_of_range(reference)

@app.get("/api/calendar/navigate", response_model=schemas.NavigationOut)
def navigate_calendar(
    view: View = View.MONTH,
    direction: Direction = Direction.TODAY,
    reference: Optional[date] = Query(default=None, alias="date"),
):
    reference = reference or date.today()
    try:
        target = navigate(reference, view, direction)
    except OverflowError:
        raise _out_of_range(reference)
    logger.debug("Navigated %s view %s to %s", view.value, direction.value, target)
    return schemas.NavigationOut(view=view.value, reference_date=target)

@app.get("/api/dashboard", response_model=schemas.DashboardOut)
def get_dashboard(storage: crud.Storage = Depends(get_storage)):
    return dashboard.build_dashboard(storage)
