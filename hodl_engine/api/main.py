# hodl_engine/api/main.py

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
import uvicorn
import logging
from decimal import getcontext

from hodl_engine.api.v1.router import router as v1_router
from hodl_engine.core.config.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(settings.APP_NAME)

# Cost basis means and percent changes are computed in this context
getcontext().prec = settings.DECIMAL_PRECISION

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG_MODE,
    description="API for building crypto portfolio cost basis and unrealized gain reports."
)

app.include_router(v1_router, prefix=settings.API_V1_STR)

@app.get("/", include_in_schema=False)
async def root():
    """Sends browsers to the interactive report API docs."""
    return RedirectResponse(url="/docs")

# Local development server; reload follows DEBUG_MODE
if __name__ == "__main__":
    logger.info(
        f"Starting {settings.APP_NAME} v{settings.APP_VERSION} "
        f"(strict={settings.STRICT_MODE}, price source={settings.PRICE_API_BASE_URL})"
    )
    uvicorn.run(
        "hodl_engine.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG_MODE,
        log_level=settings.LOG_LEVEL.lower()
    )
