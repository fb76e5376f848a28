from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.routes import router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description=(
        "Check a proposed building against zoning and building-code limits: "
        "zoning envelope, allowable height and area, fire and life-safety "
        "ratings, occupant load and egress."
    ),
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins + ["http://localhost:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """API info."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "endpoints": {
            "api_docs": "/docs",
            "health": "/health",
            "compliance": "POST /api/compliance",
            "zoning": "POST /api/compliance/zoning",
            "height_area": "POST /api/compliance/height-area",
            "fire_safety": "POST /api/compliance/fire-safety",
            "occupancy": "POST /api/compliance/occupancy",
            "districts": "GET /api/reference/districts",
            "space_types": "GET /api/reference/space-types",
        },
    }


@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
