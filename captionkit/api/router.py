"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from captionkit.api import classify, health, lines, render

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(lines.router)
api_router.include_router(classify.router)
api_router.include_router(render.router)
