"""
Portfolio Backend — FastAPI Dependencies
==========================================

What:  Providers handing the store, the upload service and the per-entity
       services to route handlers via Depends().
Why:   The store and FileService are built once by create_app() and kept on
       app.state. Handlers never import a global connection; tests swap
       either object by building the app with their own settings or through
       app.dependency_overrides.
"""

from typing import Optional

from fastapi import Depends, Request, UploadFile

from portfolio_api.services.file_service import FileService
from portfolio_api.services.message_service import MessageService
from portfolio_api.services.project_service import ProjectService
from portfolio_api.services.skill_service import SkillService
from portfolio_api.store import PortfolioStore


def get_store(request: Request) -> PortfolioStore:
    return request.app.state.store


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service


def get_skill_service(
    store: PortfolioStore = Depends(get_store),
    files: FileService = Depends(get_file_service),
) -> SkillService:
    return SkillService(store, files)


def get_project_service(
    store: PortfolioStore = Depends(get_store),
    files: FileService = Depends(get_file_service),
) -> ProjectService:
    return ProjectService(store, files)


def get_message_service(store: PortfolioStore = Depends(get_store)) -> MessageService:
    return MessageService(store)


def has_upload(image: Optional[UploadFile]) -> bool:
    """
    True when the multipart form actually carried a file.

    Browsers submit an empty part with filename="" when no file was chosen;
    that counts as no upload.
    """
    return image is not None and bool(image.filename)
