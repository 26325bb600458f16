"""
FastAPI application entry point.

Run with: uvicorn flightlens.main:app
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flightlens.config import get_settings
from flightlens.errors import FlightLensError
from flightlens.models.lookup import ErrorResponse
from flightlens.routers import lookup

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

app = FastAPI(
    title="Flight Lens API",
    description="Proxy that turns a flight number into AI-generated flight and aircraft details",
    version="1.0.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(lookup.router, prefix="/api/v1/lookup", tags=["Lookup"])


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok"}


# Global error handlers: every failure leaves as {"error": ..., "details"?: ...}
@app.exception_handler(FlightLensError)
async def flightlens_error_handler(request: Request, exc: FlightLensError):
    body = ErrorResponse(error=exc.error, details=exc.details)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )
