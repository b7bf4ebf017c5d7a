"""
WordNet Service — FastAPI Application.

Entry point for the taxonomy query service.
Registers routers, configures CORS, initialises the database and loads the
stored taxonomy on startup using the lifespan context manager.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import SessionFactory, init_db
from app.exceptions import InvalidTaxonomyError
from app.routers import nouns, outcast, sap, taxonomy
from app.services import taxonomy_service

# ── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(name)-30s | %(levelname)-8s | %(message)s",
)
logger = logging.getLogger(__name__)


def _load_stored_taxonomy(app: FastAPI) -> None:
    """Build the in-memory WordNet from the database, if one is stored."""
    with SessionFactory() as db:
        try:
            app.state.wordnet = taxonomy_service.load_wordnet(db)
        except InvalidTaxonomyError as exc:
            logger.error("Stored taxonomy is invalid and was not loaded: %s", exc)
            return

    if app.state.wordnet is None:
        logger.warning("⚠️  No taxonomy stored — import one via POST %s/taxonomy", settings.api_prefix)
    else:
        logger.info("✅ Taxonomy ready: %r", app.state.wordnet)


# ── Lifespan ──────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle hook."""
    logger.info("🚀 %s starting up (env=%s)", settings.app_name, settings.environment)
    app.state.wordnet = None

    if init_db():
        logger.info("✅ Database ready")
        if settings.taxonomy_autoload:
            _load_stored_taxonomy(app)
    else:
        logger.warning(
            "⚠️  Database initialisation failed — queries stay unavailable until a taxonomy is imported."
        )

    yield

    logger.info("🛑 %s shutting down", settings.app_name)


# ── Application ───────────────────────────────────────────────────────────────
app = FastAPI(
    title=settings.app_name,
    description=(
        "WordNet taxonomy service.\n\n"
        "Import synsets and hypernym edges, then query noun membership, "
        "shortest ancestral paths and outcasts. "
        "The hypernym graph is validated as a single-rooted Directed Acyclic Graph (DAG) "
        "on import — cyclic or multi-rooted taxonomies are rejected."
    ),
    version="0.1.0",
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(taxonomy.router, prefix=settings.api_prefix)
app.include_router(nouns.router, prefix=settings.api_prefix)
app.include_router(sap.router, prefix=settings.api_prefix)
app.include_router(outcast.router, prefix=settings.api_prefix)


# ── Health / root ─────────────────────────────────────────────────────────────
@app.get("/", include_in_schema=False)
@app.get(f"{settings.api_prefix}/health", tags=["Health"])
async def health_check():
    """Liveness probe — always returns 200 if the process is alive."""
    return JSONResponse(
        {
            "status": "ok",
            "service": settings.app_name,
            "environment": settings.environment,
            "taxonomy_loaded": getattr(app.state, "wordnet", None) is not None,
            "version": "0.1.0",
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=not settings.is_production,
    )
