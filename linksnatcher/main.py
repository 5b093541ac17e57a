from pathlib import Path
import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from linksnatcher.api.pages import router as pages_router
from linksnatcher.api.resolve import router as resolve_router
from linksnatcher.middleware.error_handler import register_error_handlers
from linksnatcher.services.target_validator import get_supported_sources
from linksnatcher.core.config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = FastAPI(
    title="LinkSnatcher",
    description="Download videos from TikTok, Instagram and YouTube",
    version="1.0.0",
    debug=settings.debug
)

register_error_handlers(app)

# Include routers
app.include_router(pages_router)
app.include_router(resolve_router)

# Mount static files
app.mount(
    "/static",
    StaticFiles(directory=str(Path(__file__).resolve().parent / "static")),
    name="static"
)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "supported_platforms": get_supported_sources()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
