import logging
import sqlite3
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from advocate_directory import __version__
from advocate_directory.config import settings
from advocate_directory.routers import advocates

logger = logging.getLogger("advocates")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    # Startup: make sure the schema exists, then integrity-check the database
    try:
        from advocate_directory.database import init_db
        init_db(settings.database_path)
        conn = sqlite3.connect(str(settings.database_path))
        result = conn.execute("PRAGMA integrity_check").fetchone()
        conn.close()
        if result and result[0] == "ok":
            logger.info("Database integrity check passed.")
        else:
            logger.error("DATABASE INTEGRITY CHECK FAILED: %s", result)
    except sqlite3.Error as exc:
        logger.error("Could not run startup schema/integrity check: %s", exc)
    yield
    # Shutdown: release pooled connections
    from advocate_directory.database import engine
    await engine.dispose()


app = FastAPI(
    title="Advocate Directory",
    description="Search, filter and page through healthcare advocates",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(advocates.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


def run():
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
