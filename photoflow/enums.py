from enum import Enum


class ProjectType(str, Enum):
    WEDDING = "Wedding"
    PORTRAIT = "Portrait"
    COMMERCIAL = "Commercial"
    EVENT = "Event"
    BLANK = "Blank"


class ProjectStatus(str, Enum):
    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    EDITING = "Editing"
    DELIVERED = "Delivered"


class TaskSection(str, Enum):
    PRE_PRODUCTION = "Pre-Production"
    SHOOT_DAY = "Shoot Day"
    POST_PRODUCTION = "Post-Production"
    GENERAL = "General"


class TaskStatus(str, Enum):
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"


class BudgetCategory(str, Enum):
    STUDIO_RENTAL = "Studio Rental"
    ASSISTANT_FEE = "Assistant Fee"
    TRANSPORTATION = "Transportation"
    EQUIPMENT_RENTAL = "Equipment Rental"
    MAKEUP_ARTIST = "Makeup Artist"
    OTHER = "Other"


class EventType(str, Enum):
    PHOTOSHOOT = "Photoshoot"
    MEETING = "Meeting"
    DEADLINE = "Deadline"
