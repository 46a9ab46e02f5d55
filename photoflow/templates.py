from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple


class TaskTemplate(NamedTuple):
    title: str
    section: str


_PRE = "Pre-Production"
_SHOOT = "Shoot Day"
_POST = "Post-Production"

PROJECT_TEMPLATES = MappingProxyType({
    "Wedding": (
        TaskTemplate("Book venue", _PRE),
        TaskTemplate("Create shot list", _PRE),
        TaskTemplate("Send questionnaire to couple", _PRE),
        TaskTemplate("Scout location", _PRE),
        TaskTemplate("Confirm timeline with couple", _PRE),
        TaskTemplate("Charge batteries", _SHOOT),
        TaskTemplate("Pack equipment", _SHOOT),
        TaskTemplate("Conduct ceremony shots", _SHOOT),
        TaskTemplate("Capture reception moments", _SHOOT),
        TaskTemplate("Import and backup photos", _POST),
        TaskTemplate("Cull images", _POST),
        TaskTemplate("Edit selected photos", _POST),
        TaskTemplate("Deliver final gallery", _POST),
    ),
    "Portrait": (
        TaskTemplate("Discuss vision with client", _PRE),
        TaskTemplate("Choose location or studio", _PRE),
        TaskTemplate("Plan wardrobe and props", _PRE),
        TaskTemplate("Book makeup artist (if needed)", _PRE),
        TaskTemplate("Set up lighting", _SHOOT),
        TaskTemplate("Conduct portrait session", _SHOOT),
        TaskTemplate("Review shots with client", _SHOOT),
        TaskTemplate("Import and backup photos", _POST),
        TaskTemplate("Retouch selected images", _POST),
        TaskTemplate("Deliver finals to client", _POST),
    ),
    "Commercial": (
        TaskTemplate("Review creative brief", _PRE),
        TaskTemplate("Create shot list", _PRE),
        TaskTemplate("Secure permits if needed", _PRE),
        TaskTemplate("Hire crew/assistants", _PRE),
        TaskTemplate("Scout and prepare location", _PRE),
        TaskTemplate("Conduct product/brand shoot", _SHOOT),
        TaskTemplate("Review shots with client", _SHOOT),
        TaskTemplate("Import and organize files", _POST),
        TaskTemplate("Edit to brand guidelines", _POST),
        TaskTemplate("Submit for client approval", _POST),
        TaskTemplate("Deliver final assets", _POST),
    ),
    "Event": (
        TaskTemplate("Discuss event details with client", _PRE),
        TaskTemplate("Create shot list", _PRE),
        TaskTemplate("Scout venue", _PRE),
        TaskTemplate("Plan equipment needs", _PRE),
        TaskTemplate("Arrive early for setup", _SHOOT),
        TaskTemplate("Capture key moments", _SHOOT),
        TaskTemplate("Photograph attendees", _SHOOT),
        TaskTemplate("Import and backup photos", _POST),
        TaskTemplate("Cull and organize images", _POST),
        TaskTemplate("Edit selected photos", _POST),
        TaskTemplate("Deliver event gallery", _POST),
    ),
    "Blank": (),
})


def template_for(project_type: Optional[str]) -> Tuple[TaskTemplate, ...]:
    """Task skeletons for a project type; unknown or missing types get none."""
    if not project_type:
        return ()
    return PROJECT_TEMPLATES.get(getattr(project_type, "value", project_type), ())
