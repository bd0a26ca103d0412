"""FastAPI application exposing the explanation engine to the browser UI."""

import logging
from pathlib import Path
from typing import Dict, Literal, Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import FileResponse, Response
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from . import __version__
from .adapters import open_preference_store
from .config import Settings, get_settings
from .errors import ExplanationError, SessionBusyError, UploadRejectedError
from .export import EXPORT_FORMATS, export
from .ports import PreferenceStore
from .preferences import DEFAULT_THEME, THEME_KEY
from .service import ExplanationService, ExplanationSession

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS = frozenset(
    {
        ".txt", ".md", ".html", ".json", ".js", ".ts", ".jsx", ".tsx", ".py",
        ".java", ".cpp", ".c", ".go", ".rs", ".php", ".rb", ".swift", ".kt",
    }
)


class ExplainRequest(BaseModel):
    input: str
    channel: Literal["paste", "url", "file"] = "paste"


def decode_upload(filename: str, data: bytes, max_bytes: int = 5 * 1024 * 1024) -> str:
    """Validate an uploaded file and decode it to text for the engine."""
    suffix = Path(filename or "").suffix.lower()
    if suffix not in ACCEPTED_EXTENSIONS:
        raise UploadRejectedError(f"unsupported file type: {suffix or filename!r}", status_code=415)
    if len(data) > max_bytes:
        raise UploadRejectedError(
            f"file size must be less than {max_bytes // (1024 * 1024)}MB", status_code=413
        )
    return data.decode("utf-8", errors="replace")


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[ExplanationService] = None,
    preferences: Optional[PreferenceStore] = None,
) -> FastAPI:
    settings = settings or get_settings()
    service = service or ExplanationService(
        latency_seconds=(settings.latency_min_seconds, settings.latency_max_seconds),
        min_content_length=settings.min_content_length,
    )
    session = ExplanationSession(service)
    preferences = preferences or open_preference_store(settings.preferences_url)

    app = FastAPI(title="DocExplain", version=__version__)
    app.state.session = session
    app.state.preferences = preferences

    async def _explain(raw_input: str, channel: str) -> Dict:
        try:
            artifact = await session.submit(raw_input, channel)
        except SessionBusyError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except ExplanationError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return artifact.to_dict()

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": __version__}

    @app.post("/api/explain")
    async def explain(request: ExplainRequest) -> dict:
        return await _explain(request.input, request.channel)

    @app.post("/api/upload")
    async def upload(file: UploadFile = File(...)) -> dict:
        data = await file.read(settings.max_upload_bytes + 1)
        try:
            text = decode_upload(file.filename, data, settings.max_upload_bytes)
        except UploadRejectedError as exc:
            logger.warning("Rejected upload %r: %s", file.filename, exc)
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        return await _explain(text, "file")

    @app.get("/api/session")
    def get_session() -> dict:
        return session.snapshot()

    @app.delete("/api/session")
    def clear_session() -> dict:
        session.clear()
        return session.snapshot()

    @app.get("/api/export/{fmt}")
    def export_current(fmt: str) -> Response:
        if fmt not in EXPORT_FORMATS:
            raise HTTPException(status_code=400, detail=f"unknown export format: {fmt}")
        if session.current is None:
            raise HTTPException(status_code=404, detail="generate an explanation first")
        result = export(session.current, fmt)
        headers = {}
        if fmt != "share":
            headers["Content-Disposition"] = f'attachment; filename="{result.filename}"'
        return Response(content=result.content, media_type=result.media_type, headers=headers)

    # Preference routes run on the event loop so toggles never interleave.
    @app.get("/api/preferences/theme")
    async def get_theme() -> dict:
        return {"theme": preferences.get(THEME_KEY, DEFAULT_THEME)}

    @app.post("/api/preferences/theme/toggle")
    async def toggle_theme() -> dict:
        return {"theme": preferences.toggle_theme()}

    if settings.frontend_dir is not None:
        frontend_dir = Path(settings.frontend_dir)
        app.mount("/static", StaticFiles(directory=str(frontend_dir)), name="static")

        @app.get("/")
        def index() -> FileResponse:
            return FileResponse(frontend_dir / "index.html")

    return app
