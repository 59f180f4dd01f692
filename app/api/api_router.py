from fastapi import APIRouter

from app.api import api_ai, api_healthcheck, api_planner, api_task, api_user, api_wellness

router = APIRouter()

router.include_router(api_healthcheck.router, tags=["health-check"], prefix="/healthcheck")
router.include_router(api_user.router, tags=["user"], prefix="/users")
router.include_router(api_task.router, tags=["task"], prefix="/tasks")
router.include_router(api_ai.router, tags=["ai"], prefix="/ai")
router.include_router(api_planner.router, tags=["planner"], prefix="/planner")
router.include_router(api_wellness.router, tags=["wellness"], prefix="/wellness")
