"""Task Routes — CRUD over the authenticated caller's own tasks.

Invariants:
    - Every handler scopes by the principal's user id: never by an id from the path
    - Requires the USER role (enforced by the router-level access interceptor)
    - Bodies out are {title, description} projections only
"""

from fastapi import APIRouter, Depends, Response, status

from todo_app.api.dependencies import authorize_request, get_principal, get_task_service
from todo_app.core.domain_types import API_PREFIX, Principal, TaskId
from todo_app.schemas.task import TaskBody, TaskView, project_task
from todo_app.services.task_service import TaskService

router = APIRouter(
    prefix=f"{API_PREFIX}/tasks", tags=["tasks"],
    dependencies=[Depends(authorize_request)],
)


@router.get("/{task_id}", response_model=TaskView)
async def get_task(
    task_id: int,
    principal: Principal = Depends(get_principal),
    tasks: TaskService = Depends(get_task_service),
):
    task = await tasks.get_task(TaskId(task_id), principal.user_id)
    return project_task(task)


@router.get("/", response_model=list[TaskView])
async def list_tasks(
    principal: Principal = Depends(get_principal),
    tasks: TaskService = Depends(get_task_service),
):
    return [project_task(t) for t in await tasks.list_tasks(principal.user_id)]


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_task(
    body: TaskBody,
    principal: Principal = Depends(get_principal),
    tasks: TaskService = Depends(get_task_service),
):
    """Create a task; Location points at its per-owner id."""
    task_id = await tasks.create_task(
        body.title, body.description, principal.user_id,
    )
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{API_PREFIX}/tasks/{task_id}"},
    )


@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_task(
    task_id: int,
    body: TaskBody,
    principal: Principal = Depends(get_principal),
    tasks: TaskService = Depends(get_task_service),
):
    await tasks.update_task(
        TaskId(task_id), principal.user_id, body.title, body.description,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int,
    principal: Principal = Depends(get_principal),
    tasks: TaskService = Depends(get_task_service),
):
    await tasks.delete_task(TaskId(task_id), principal.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
