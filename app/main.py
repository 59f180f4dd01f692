import logging
import logging.config
import os

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import FileResponse

from app.api.api_router import router
from app.models import Base
from app.db.base import engine
from app.core.config import settings
from app.helpers.exception_handler import CustomException, http_exception_handler

logging.config.fileConfig(settings.LOGGING_CONFIG_FILE, disable_existing_loggers=False)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)


def add_spa_routes(application: FastAPI, static_dir: str) -> None:
    """Serve the built single-page app; unknown client routes fall back to index.html."""
    static_root = os.path.realpath(static_dir)
    index_file = os.path.join(static_root, 'index.html')
    api_prefix = settings.API_PREFIX.strip('/') + '/'

    @application.get("/{full_path:path}", include_in_schema=False)
    async def serve_spa(full_path: str):
        if full_path.startswith(api_prefix):
            raise CustomException(http_code=404, code='404', message="Not Found")

        file_path = os.path.realpath(os.path.join(static_root, full_path))
        if full_path and file_path.startswith(static_root + os.sep) and os.path.isfile(file_path):
            return FileResponse(file_path)
        return FileResponse(index_file)

    logger.info(f"Serving single-page app from {static_root}")


def get_application() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME, docs_url="/docs", redoc_url='/re-docs',
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        description='''
        Ria wellness assistant backend
            - Tasks with XP rewards and due notifications
            - Gemini task parsing, chat and weekly planner
            - Mood and posture analysis
        '''
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router, prefix=settings.API_PREFIX)
    application.add_exception_handler(CustomException, http_exception_handler)

    # Health check endpoint
    @application.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "services": {
                "database": "connected",
                "gemini": "configured" if settings.GEMINI_API_KEY else "not configured",
                "vision": "enabled" if settings.VISION_ENABLED else "disabled"
            }
        }

    if os.path.isfile(os.path.join(settings.STATIC_DIR, 'index.html')):
        add_spa_routes(application, settings.STATIC_DIR)

    return application


app = get_application()
if __name__ == '__main__':
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
