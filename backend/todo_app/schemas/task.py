"""Task Schemas — request body and response projection for /tasks routes."""

from pydantic import BaseModel

from todo_app.models.task import Task


class TaskBody(BaseModel):
    """Create/update body: both fields optional at the schema level."""
    title: str | None = None
    description: str | None = None


class TaskView(BaseModel):
    """Public task shape: title and description only."""
    title: str
    description: str


def project_task(task: Task) -> TaskView:
    return TaskView(title=task.title, description=task.description)
