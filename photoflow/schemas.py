from datetime import date, datetime
from typing import Annotated, List, Optional
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from .enums import (
    BudgetCategory,
    EventType,
    PaymentStatus,
    ProjectStatus,
    ProjectType,
    TaskSection,
    TaskStatus,
)


def _to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    # The store keeps naive local times; day matching happens in local time.
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _required(value):
    if value is None:
        raise ValueError("field may not be null")
    return value


LocalDateTime = Annotated[datetime, AfterValidator(_to_local_naive)]
OptionalDateTime = Annotated[Optional[LocalDateTime], BeforeValidator(_blank_to_none)]
OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(_blank_to_none)]
OptionalCategory = Annotated[Optional[BudgetCategory], BeforeValidator(_blank_to_none)]

# Money is stored in a signed 64-bit integer column.
MAX_AMOUNT = 2**63 - 1


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)


class OrmModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Projects

class ProjectCreate(ApiModel):
    name: str = Field(min_length=1)
    type: ProjectType
    status: ProjectStatus = Field(default=ProjectStatus.PLANNING, validate_default=True)
    client_name: Optional[str] = None
    shoot_date: OptionalDateTime = None
    budget: Optional[int] = Field(default=0, ge=0, le=MAX_AMOUNT)
    description: Optional[str] = None


class ProjectUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[ProjectType] = None
    status: Optional[ProjectStatus] = None
    client_name: Optional[str] = None
    shoot_date: OptionalDateTime = None
    budget: Optional[int] = Field(default=None, ge=0, le=MAX_AMOUNT)
    description: Optional[str] = None

    @field_validator("name", "type", "status")
    @classmethod
    def not_null(cls, value):
        return _required(value)


class ProjectOut(OrmModel):
    id: str
    name: str
    type: str
    status: str
    client_name: Optional[str] = None
    shoot_date: Optional[datetime] = None
    budget: Optional[int] = 0
    description: Optional[str] = None
    created_at: datetime


# Tasks

class TaskCreate(ApiModel):
    project_id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    section: TaskSection = Field(default=TaskSection.GENERAL, validate_default=True)
    status: TaskStatus = Field(default=TaskStatus.TODO, validate_default=True)
    assignee: Optional[str] = None
    due_date: OptionalDateTime = None


class TaskUpdate(ApiModel):
    title: Optional[str] = Field(default=None, min_length=1)
    section: Optional[TaskSection] = None
    status: Optional[TaskStatus] = None
    assignee: Optional[str] = None
    due_date: OptionalDateTime = None

    @field_validator("title", "section", "status")
    @classmethod
    def not_null(cls, value):
        return _required(value)


class TaskOut(OrmModel):
    id: str
    project_id: str
    title: str
    section: str
    status: str
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None
    created_at: datetime


# Contacts

class ContactCreate(ApiModel):
    project_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    email: OptionalEmail = None
    phone: Optional[str] = None
    notes: Optional[str] = None


class ContactUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = Field(default=None, min_length=1)
    email: OptionalEmail = None
    phone: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name", "role")
    @classmethod
    def not_null(cls, value):
        return _required(value)


class ContactOut(OrmModel):
    id: str
    project_id: str
    name: str
    role: str
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


# Budget items

class BudgetItemCreate(ApiModel):
    project_id: str = Field(min_length=1)
    description: str = Field(min_length=1)
    planned_cost: int = Field(default=0, ge=0, le=MAX_AMOUNT)
    actual_cost: int = Field(default=0, ge=0, le=MAX_AMOUNT)
    payment_status: PaymentStatus = Field(default=PaymentStatus.UNPAID, validate_default=True)
    category: OptionalCategory = None


class BudgetItemUpdate(ApiModel):
    description: Optional[str] = Field(default=None, min_length=1)
    planned_cost: Optional[int] = Field(default=None, ge=0, le=MAX_AMOUNT)
    actual_cost: Optional[int] = Field(default=None, ge=0, le=MAX_AMOUNT)
    payment_status: Optional[PaymentStatus] = None
    category: OptionalCategory = None

    @field_validator("description", "planned_cost", "actual_cost", "payment_status")
    @classmethod
    def not_null(cls, value):
        return _required(value)


class BudgetItemOut(OrmModel):
    id: str
    project_id: str
    description: str
    planned_cost: int
    actual_cost: int
    payment_status: str
    category: Optional[str] = None


# Calendar events

class CalendarEventCreate(ApiModel):
    project_id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    type: EventType
    start_date: LocalDateTime
    end_date: OptionalDateTime = None
    description: Optional[str] = None
    location: Optional[str] = None


class CalendarEventUpdate(ApiModel):
    title: Optional[str] = Field(default=None, min_length=1)
    type: Optional[EventType] = None
    start_date: OptionalDateTime = None
    end_date: OptionalDateTime = None
    description: Optional[str] = None
    location: Optional[str] = None

    @field_validator("title", "type", "start_date")
    @classmethod
    def not_null(cls, value):
        return _required(value)


class CalendarEventOut(OrmModel):
    id: str
    project_id: str
    title: str
    type: str
    start_date: datetime
    end_date: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None


# Timeline

class TimelineItem(OrmModel):
    id: str
    type: str
    title: str
    start_date: datetime
    project_id: str
    source: str
    end_date: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None


class DayWindow(OrmModel):
    day: date
    in_month: bool = True
    items: List[TimelineItem] = []


class CalendarOut(OrmModel):
    view: str
    reference_date: date
    start: date
    end: date
    days: List[DayWindow]


class NavigationOut(OrmModel):
    view: str
    reference_date: date


# Budget / progress / dashboard

class BudgetSummaryOut(OrmModel):
    project_id: str
    budget: int
    total_planned: int
    total_actual: int
    profit_loss: int
    margin_percent: Optional[float] = None
    margin_label: str


class SectionProgressOut(OrmModel):
    section: str
    total: int
    completed: int


class TaskProgressOut(OrmModel):
    project_id: str
    total: int
    completed: int
    sections: List[SectionProgressOut]


class DashboardOut(OrmModel):
    total_projects: int
    pending_tasks: int
    in_progress_tasks: int
    projects_this_month: int
    active_projects: List[ProjectOut]
    upcoming_deadlines: List[TaskOut]
    upcoming_events: List[CalendarEventOut]
    recent_projects: List[ProjectOut]
