#!/usr/bin/env python3
"""
SDI Designer Backend API
FastAPI server for the subsurface drip irrigation design calculator

Features:
- Hydraulic engine endpoints (velocity, Hazen-Williams, zone flows, TDH)
- Full design report with site summary and design feedback
- Status and health endpoints
"""

from datetime import datetime
from typing import Optional
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import psutil
import uvicorn

from api.calculations import router as calculations_router
from core.config import settings
from core.logger import logger

app = FastAPI(
    title="SDI Designer API",
    description="Hydraulic design calculator for subsurface drip irrigation wastewater systems",
    version="1.0.0"
)

app.include_router(calculations_router)

# CORS middleware for frontend connection
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Response Models ===
class SystemStatus(BaseModel):
    system: str
    status: str
    engine: str
    timestamp: str
    uptime_seconds: Optional[int] = None


# === Startup time tracking ===
startup_time = datetime.now()


@app.on_event("startup")
async def startup_event():
    logger.info("SDI Designer API starting")
    logger.info(f"CORS origins: {', '.join(settings.cors_origins)}")


# === API Endpoints ===

@app.get("/api/status", response_model=SystemStatus)
async def get_status():
    """
    Get system status.
    """
    uptime = (datetime.now() - startup_time).seconds
    return SystemStatus(
        system="SDI Designer",
        status="LIVE",
        engine="READY",
        timestamp=datetime.now().isoformat(),
        uptime_seconds=uptime
    )


@app.get("/api/health")
async def health_check():
    """
    Health check endpoint.
    Checks disk space for logs and memory usage.
    """
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    disk = psutil.disk_usage(str(log_dir))
    disk_free_gb = disk.free / (1024 ** 3)
    disk_ok = disk_free_gb > 1.0  # Require at least 1 GB

    memory = psutil.virtual_memory()
    memory_ok = memory.percent < 90

    all_ok = disk_ok and memory_ok

    return {
        "status": "healthy" if all_ok else "degraded",
        "checks": {
            "disk": {
                "ok": disk_ok,
                "free_gb": round(disk_free_gb, 2),
                "message": "OK" if disk_ok else "Low disk space"
            },
            "memory": {
                "ok": memory_ok,
                "used_percent": memory.percent,
                "message": "OK" if memory_ok else "High memory usage"
            },
        },
        "uptime_seconds": (datetime.now() - startup_time).seconds
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "message": "Welcome to SDI Designer API",
        "docs": "/docs",
        "status_endpoint": "/api/status"
    }


def run():
    """Console entry point: serve the API with uvicorn."""
    logger.info(f"API Docs: http://{settings.api_host}:{settings.api_port}/docs")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
