# backend/data_routes.py
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI
from fastapi.responses import JSONResponse

from config import DataConfig
from models import ErrorBody
from errors import EntryNotFoundError, PathTraversalError, UnsupportedEntryTypeError
from security import Authorizer, allow_all
from tools import read_entry, resolve_path


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(ErrorBody(error=message).model_dump(), status_code=status_code)


def create_data_router(config: DataConfig, authorize: Optional[Authorizer] = None) -> APIRouter:
    """
    Router serving GET {data_path}/{path} out of config.data_dir.
    `authorize` runs as a dependency before any path handling.
    """
    logger = config.logger
    router = APIRouter(prefix=config.data_path, dependencies=[Depends(authorize or allow_all)])

    async def browse(path: str):
        try:
            full_path = resolve_path(path, config.data_dir)
            logger.info(f"Data operation request: {path} -> {full_path}")
            result = await read_entry(full_path, path, logger)
        except EntryNotFoundError as e:
            logger.error(f"Data operation error: path not found: {e}")
            return _error(404, "Path not found")
        except PathTraversalError as e:
            logger.error(f"Data operation error: {e}")
            return _error(400, "Invalid path")
        except UnsupportedEntryTypeError as e:
            logger.error(f"Data operation error: unsupported type: {e}")
            return _error(400, "Path is neither file nor directory")
        except Exception as e:
            logger.exception(f"Data operation error: {e}")
            return _error(500, "Internal server error")
        return JSONResponse(result.model_dump(exclude_none=True))

    async def browse_root():
        return await browse("")

    router.add_api_route("/{path:path}", browse, methods=["GET"])
    if config.data_path:
        router.add_api_route("", browse_root, methods=["GET"])
    return router


def register_data_routes(app: FastAPI, config: DataConfig, authorize: Optional[Authorizer] = None) -> None:
    app.include_router(create_data_router(config, authorize))
    config.logger.info(f"Data endpoints registered at {config.data_path}/* serving from {config.data_dir}")
