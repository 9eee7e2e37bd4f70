"""FastAPI application factory."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pdfdrop.config import Settings, settings as default_settings
from pdfdrop.routes.files import router as files_router
from pdfdrop.services.file_storage import FileStorageService
from pdfdrop.services.metadata_store import MetadataStore, MetadataStoreError
from pdfdrop.services.storage_paths import ensure_storage_dirs

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Announce where the service is reachable."""
    cfg: Settings = app.state.settings
    logger.info("Server running at http://localhost:%d", cfg.API_PORT)
    logger.info("Upload PDFs from http://localhost:%d", cfg.API_PORT)
    yield
    logger.info("Server shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app. Storage directories are created before anything is mounted."""
    cfg = settings or default_settings
    ensure_storage_dirs(cfg)

    app = FastAPI(
        title="pdfdrop",
        version="1.0.0",
        description="Upload PDFs into sections and list them back.",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.store = MetadataStore(cfg.METADATA_FILE)
    app.state.file_storage = FileStorageService(cfg.UPLOADS_DIR)

    # CORS
    origins = [o.strip() for o in cfg.CORS_ORIGINS.split(",")]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    async def health_check():
        """Verify the API and that the metadata store is readable."""
        try:
            await app.state.store.load()
            return {"status": "ok", "store": "ok"}
        except (MetadataStoreError, OSError) as e:
            return {"status": "error", "store": str(e)}

    app.include_router(files_router)

    # Uploaded files are public to anyone who knows the generated name.
    app.mount("/uploads", StaticFiles(directory=cfg.UPLOADS_DIR), name="uploads")
    # Mounted last: a root mount swallows every path not matched above.
    app.mount("/", StaticFiles(directory=cfg.PUBLIC_DIR, html=True, check_dir=False), name="public")

    return app
