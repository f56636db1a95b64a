from fastapi import APIRouter, Depends, Path, Request, Response, status
from task_manager.domain.task_models import TASK_ID_MAX, TASK_ID_MIN, Task
from task_manager.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_service(request: Request) -> TaskService:
    # set by create_app(); tests swap it through app.dependency_overrides
    return request.app.state.task_service


@router.get("", response_model=list[Task], response_model_exclude_none=True)
async def get_all_tasks(svc: TaskService = Depends(get_service)):
    return await svc.get_all_tasks()


@router.get("/{task_id}", response_model=Task, response_model_exclude_none=True)
async def get_task(
    task_id: int = Path(ge=TASK_ID_MIN, le=TASK_ID_MAX),
    svc: TaskService = Depends(get_service),
):
    # TaskNotFoundError is mapped to 404 by the app-level handler
    return await svc.get_task_by_id(task_id)


@router.post("", response_model=Task, response_model_exclude_none=True)
async def add_task(payload: Task, svc: TaskService = Depends(get_service)):
    return await svc.add_task(payload)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int = Path(ge=TASK_ID_MIN, le=TASK_ID_MAX),
    svc: TaskService = Depends(get_service),
):
    await svc.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
