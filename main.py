from fastapi import Depends, FastAPI
from fastapi.staticfiles import StaticFiles

from shorten_app.config import settings
from shorten_app.logging_config import configure_logging
from shorten_app.dependencies import get_shortener
from shorten_app.services.shortener import Shortener
from shorten_app.api.v1 import urls, redirect
from shorten_app.web import routes as web

logger = configure_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="An in-memory URL shortener service built with FastAPI",
    debug=settings.debug
)

app.mount("/assets", StaticFiles(directory=web.static_dir), name="assets")


@app.get("/health")
def health_check(shortener: Shortener = Depends(get_shortener)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "urls": len(shortener),
    }


######## Include routers
# Order matters: the catch-all /{short_id} redirect goes last
app.include_router(urls.router, prefix="/api/v1")
app.include_router(urls.generate_router)
app.include_router(web.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    logger.info("Application is running on %s", settings.base_url)
    uvicorn.run(app, host=settings.host, port=settings.port)
