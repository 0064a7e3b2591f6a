"""HTTP API for rendering and creating memes."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from memepen.api.builder import MemeService
from memepen.design.template import Template
from memepen.exceptions import (
    MemeNotFound,
    MemepenError,
    TemplateNotFound,
    TextCountMismatch,
    UploadFailure,
)
from memepen.render.image import save_image_to_bytes

logger = logging.getLogger(__name__)


class PreviewRequest(BaseModel):
    """Body of a preview request."""

    text: list[str]


class CreateMemeRequest(BaseModel):
    """Body of a create-meme request."""

    template_id: str
    text: list[str]
    user_id: str | None = None


def _status_for(error: MemepenError) -> int:
    if isinstance(error, (TemplateNotFound, MemeNotFound)):
        return 404
    if isinstance(error, TextCountMismatch):
        return 422
    if isinstance(error, UploadFailure):
        return 502
    # Missing fonts or backgrounds are server-side configuration problems
    return 500


def create_app(service: MemeService) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Meme service handling all requests.

    Returns:
        Configured FastAPI app.
    """
    app = FastAPI(title="memepen")

    @app.exception_handler(MemepenError)
    async def handle_memepen_error(request: Request, exc: MemepenError) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/templates", response_model=list[Template])
    def list_templates() -> list[Template]:
        return service.templates.list()

    @app.get("/templates/{template_id}", response_model=Template)
    def get_template(template_id: str) -> Template:
        return service.templates.get(template_id)

    @app.post("/templates/{template_id}/preview")
    def preview_template(template_id: str, body: PreviewRequest) -> Response:
        """Render a meme and return the PNG without storing it."""
        img = service.create_meme_from_template_id(template_id, body.text)
        return Response(content=save_image_to_bytes(img, format="PNG"), media_type="image/png")

    @app.post("/memes", status_code=201)
    def create_meme(body: CreateMemeRequest) -> dict:
        """Render, upload and record a meme."""
        meme = service.create_meme_and_upload_from_template_id(
            body.template_id, body.text, user_id=body.user_id
        )
        return meme.to_dict()

    @app.get("/memes/{meme_id}")
    def get_meme(meme_id: str) -> dict:
        return service.memes.get(meme_id).to_dict()

    return app
