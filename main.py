# main.py
import logging

import uvicorn
from fastapi import FastAPI
from starlette.responses import RedirectResponse

from config.settings import settings
from modules.employee_profile.routes import api as employee_profile_api, pages as employee_profile_pages

# ----- Logging -----
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ----- App instance -----
app = FastAPI(title=settings.APP_NAME, version="1.0.0")

# ----- Routers -----
app.include_router(employee_profile_api)
app.include_router(employee_profile_pages, include_in_schema=False)


@app.on_event("startup")
def on_startup():
    logger.info("%s started (default view mode: %s)", settings.APP_NAME, settings.DEFAULT_VIEW_MODE)


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse("/docs", status_code=302)


# ----- Entrypoint -----
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=5000, reload=True)
