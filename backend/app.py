# backend/app.py
import os
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import DataConfig, load_config
from data_routes import register_data_routes
from security import Authorizer, api_key_authorizer

# ---- Logging ------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("data")
if not logger.handlers:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s | %(levelname)s | %(message)s")

# ---- FastAPI app --------------------------------------------------------------
APP_TITLE = "Data Browser"
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://localhost:5173")


def _authorizer_from_env() -> Optional[Authorizer]:
    key = os.getenv("DATA_API_KEY")
    return api_key_authorizer(key) if key else None


def create_app(config: Optional[DataConfig] = None, authorize: Optional[Authorizer] = None) -> FastAPI:
    config = config or load_config(logger)
    app = FastAPI(title=APP_TITLE)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONTEND_ORIGIN, "http://localhost:5173", "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # ---- Basic routes ---------------------------------------------------------
    @app.get("/")
    def root():
        return {"ok": True, "service": APP_TITLE}

    @app.get("/health")
    def health():
        return {"ok": True}

    # ---- Data endpoint --------------------------------------------------------
    register_data_routes(app, config, authorize or _authorizer_from_env())
    return app


app = create_app()


def dev():
    """Run the development server."""
    uvicorn.run(
        "app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    dev()
