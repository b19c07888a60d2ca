# backend/routes/frontend.py
import logging
from pathlib import Path

import httpx
from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import FileResponse

from config import settings

router = APIRouter(tags=["Frontend"])
logger = logging.getLogger(__name__)


def _proxy_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=settings.FRONTEND_PROXY_URL)


async def _proxy(request: Request, full_path: str) -> Response:
    # Forward to the frontend dev server and hand its answer back unchanged
    headers = {"accept": request.headers.get("accept", "*/*")}
    async with _proxy_client() as client:
        try:
            upstream = await client.get("/" + full_path, params=list(request.query_params.multi_items()), headers=headers)
        except httpx.RequestError as e:
            logger.error(f"Frontend proxy error: {e}")
            raise HTTPException(status_code=502, detail="Frontend dev server unavailable")
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type"),
    )


def _serve_build(full_path: str) -> Response:
    build_dir = Path(settings.FRONTEND_BUILD_DIR).resolve()
    if full_path:
        candidate = (build_dir / full_path).resolve()
        if build_dir in candidate.parents and candidate.is_file():
            return FileResponse(candidate)

    # Client side routes all load the single page app
    index = build_dir / "index.html"
    if index.is_file():
        return FileResponse(index)
    raise HTTPException(status_code=404, detail="Not Found")


# Registered last: everything no other route matched
@router.get("/{full_path:path}", include_in_schema=False)
async def frontend(full_path: str, request: Request):
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not Found")
    if settings.FRONTEND_PROXY_URL:
        return await _proxy(request, full_path)
    return _serve_build(full_path)
