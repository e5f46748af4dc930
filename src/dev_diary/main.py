import logging

import uvicorn
from fastapi import FastAPI

from .api.router import router as diary_router
from .settings import get_settings

app = FastAPI(title="Dev Diary", version="0.1.0")

app.include_router(diary_router)

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the web server."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting Dev Diary Web Server")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
