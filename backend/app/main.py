import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import pages, tax
from app.config import get_settings
from app.utils.constants import DISCLAIMER

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="US Take-Home Pay Calculator", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# JSON endpoints live under /api; HTML pages are served from the root.
app.include_router(tax.router, prefix="/api")
app.include_router(pages.router)

logger.info("Calculator ready (CORS origins: %s)", ", ".join(settings.cors_origins))


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "disclaimer": DISCLAIMER}
