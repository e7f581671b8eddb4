import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from app.api.endpoints import requirements
from app.api.endpoints import requirement_types
from app.core.config import Settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.database import create_db_engine, init_db

settings = Settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

LANDING_PAGE = os.path.join(os.path.dirname(__file__), "static", "customerreq.html")


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_db_engine(app.state.settings)
    app.state.engine = engine
    init_db(engine)
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database engine disposed.")


app = FastAPI(title="Customer Requirements", lifespan=lifespan)
app.state.settings = settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(requirements.router, prefix="/api/requirements", tags=["requirements"])
app.include_router(requirement_types.router, prefix="/api/types", tags=["types"])


@app.get("/", include_in_schema=False)
def landing_page():
    return FileResponse(LANDING_PAGE)
