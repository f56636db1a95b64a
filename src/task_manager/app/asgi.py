"""ASGI entry point: uvicorn task_manager.app.asgi:app"""

import uvicorn

from task_manager.app.main import create_app
from task_manager.config import get_settings

settings = get_settings()
app = create_app(settings)


def run() -> None:
    # log_config=None keeps the JSON handlers installed by create_app
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
