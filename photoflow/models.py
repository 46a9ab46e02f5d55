import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from .database import Base


def new_id() -> str:
    return str(uuid.uuid4())


# `seq` is an internal surrogate key; listing orders by it to keep insertion order.
# `project_id` deliberately has no ForeignKey: orphans are allowed, cleanup is by cascade only.

class Project(Base):
    __tablename__ = "projects"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    status = Column(String, nullable=False, default="Planning")
    client_name = Column(String)
    shoot_date = Column(DateTime)
    budget = Column(Integer, default=0)
    description = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.now)


class Task(Base):
    __tablename__ = "tasks"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    project_id = Column(String, index=True, nullable=False)
    title = Column(String, nullable=False)
    section = Column(String, nullable=False, default="General")
    status = Column(String, nullable=False, default="To Do")
    assignee = Column(String)
    due_date = Column(DateTime)
    created_at = Column(DateTime, nullable=False, default=datetime.now)


class Contact(Base):
    __tablename__ = "contacts"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    project_id = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    email = Column(String)
    phone = Column(String)
    notes = Column(Text)


class BudgetItem(Base):
    __tablename__ = "budget_items"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    project_id = Column(String, index=True, nullable=False)
    description = Column(String, nullable=False)
    planned_cost = Column(Integer, nullable=False, default=0)
    actual_cost = Column(Integer, nullable=False, default=0)
    payment_status = Column(String, nullable=False, default="Unpaid")
    category = Column(String)


class CalendarEvent(Base):
    __tablename__ = "calendar_events"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    project_id = Column(String, index=True, nullable=False)
    title = Column(String, nullable=False)
    type = Column(String, nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime)
    description = Column(Text)
    location = Column(String)
