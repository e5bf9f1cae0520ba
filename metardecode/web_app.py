"""FastAPI web application exposing the decoders."""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from metardecode.config import AppConfig, DecoderConfig
from metardecode.datetime_group import parse_date_time_group
from metardecode.errors import DecodeError
from metardecode.icao import parse_icao_identifier
from metardecode.icao_prefixes import all_prefixes, lookup
from metardecode.metar import decode_metar
from metardecode.runway import decode_runway_visual_range
from metardecode.visibility import decode_visibility_group
from metardecode.wind import decode_wind_group

logger = logging.getLogger(__name__)

app = FastAPI(title="METAR Decoder")

# Set by main() once the configuration is loaded
config: Optional[AppConfig] = None


class DecodeMETARRequest(BaseModel):
    raw: str


def _decoder_config() -> DecoderConfig:
    return config.decoder if config is not None else DecoderConfig()


@app.exception_handler(DecodeError)
async def decode_error_handler(request: Request, exc: DecodeError):
    """Return decode failures as JSON with the error kind and offending value."""
    logger.info(f"Decode failed for {request.url.path}: {exc.kind}: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "error": True,
            "kind": exc.kind,
            "field": exc.field,
            "value": exc.value,
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all other exceptions and return JSON."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": str(exc), "error": True})


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/prefixes")
async def get_prefixes():
    """List every known ICAO prefix."""
    return {"prefixes": [prefix.to_dict() for prefix in all_prefixes()]}


@app.get("/api/prefixes/{code}")
async def get_prefix(code: str):
    prefix = lookup(code)
    if prefix is None:
        raise HTTPException(status_code=404, detail=f"Unknown ICAO prefix: {code}")
    return prefix.to_dict()


@app.get("/api/icao/{identifier}")
async def get_icao_identifier(identifier: str):
    return parse_icao_identifier(identifier).to_dict()


@app.get("/api/datetime/{group}")
async def get_date_time_group(group: str):
    return parse_date_time_group(group).to_dict()


@app.get("/api/wind/{group}")
async def get_wind(group: str, variable: Optional[str] = None):
    return decode_wind_group(group, variable).to_dict()


@app.get("/api/visibility")
async def get_visibility(group: str):
    """Decode a visibility group, passed as a query parameter since it may contain '/' and spaces."""
    return decode_visibility_group(group).to_dict()


@app.get("/api/rvr")
async def get_runway_visual_range(group: str):
    return decode_runway_visual_range(group).to_dict()


@app.post("/api/metar")
async def post_metar(request: DecodeMETARRequest):
    """Decode a raw METAR/SPECI report."""
    metar = decode_metar(request.raw, _decoder_config().default_message_type)
    logger.debug(f"Decoded {metar.message_type.value} for {metar.identifier.full_code}")
    return metar.to_dict()
