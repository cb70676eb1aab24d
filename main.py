"""
Crypto Tool - Local API

A local FastAPI application exposing passphrase-based encrypt/decrypt.
Runs on http://127.0.0.1:18422 by default.
"""

import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, HTTPException
from fastapi.concurrency import run_in_threadpool

from config import config, VERSION
from cryptotool import (
    DEFAULT_VARIANT,
    SUPPORTED_VARIANTS,
    AuthenticationFailed,
    CryptoToolError,
    Operation,
    TextCipher,
)

logger = logging.getLogger(__name__)


# Global state
class AppState:
    """Application state container."""
    text_cipher: Optional[TextCipher] = None


app_state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    app_state.text_cipher = TextCipher(config.kdf_params)
    logger.info(f"Crypto Tool API started on http://{config.HOST}:{config.PORT} (kdf={config.KDF_ALGORITHM})")

    yield

    # Shutdown
    app_state.text_cipher = None
    logger.info("Crypto Tool API stopped")


# Create FastAPI app
app = FastAPI(
    title="Crypto Tool",
    description="Local passphrase-based authenticated encryption",
    version=VERSION,
    lifespan=lifespan,
)


async def _read_json(request: Request) -> dict:
    """Read a JSON object body or fail with 400."""
    try:
        data = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be JSON")
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return data


async def _run(operation: Operation, passphrase: str, text: str, variant: str) -> str:
    """Run an operation off the event loop and map failures to HTTP errors."""
    try:
        # Key derivation is CPU-bound; keep it off the event loop
        return await run_in_threadpool(app_state.text_cipher.run, operation, passphrase, text, variant)
    except AuthenticationFailed:
        raise HTTPException(status_code=400, detail="Decryption failed")
    except CryptoToolError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ============================================================================
# API
# ============================================================================

@app.get("/api/health")
async def health():
    """Liveness check."""
    return {"status": "ok", "version": VERSION}


@app.get("/api/variants")
async def list_variants():
    """List supported cipher variants."""
    return {
        "default": DEFAULT_VARIANT,
        "variants": [
            {"name": v.name, "key_length": v.key_length}
            for v in SUPPORTED_VARIANTS.values()
        ],
    }


@app.post("/api/encrypt")
async def api_encrypt(request: Request):
    """Encrypt text with a passphrase."""
    data = await _read_json(request)
    passphrase = data.get("passphrase", "")
    text = data.get("text", "")
    variant = data.get("variant", DEFAULT_VARIANT)
    if variant is None:
        variant = DEFAULT_VARIANT

    if not all(isinstance(v, str) for v in (passphrase, text, variant)):
        raise HTTPException(status_code=400, detail="passphrase, text and variant must be strings")

    envelope = await _run(Operation.ENCRYPT, passphrase, text, variant)
    return {"envelope": envelope, "variant": variant}


@app.post("/api/decrypt")
async def api_decrypt(request: Request):
    """Decrypt an envelope with a passphrase."""
    data = await _read_json(request)
    passphrase = data.get("passphrase", "")
    envelope = data.get("envelope", "")
    variant = data.get("variant", DEFAULT_VARIANT)
    if variant is None:
        variant = DEFAULT_VARIANT

    if not all(isinstance(v, str) for v in (passphrase, envelope, variant)):
        raise HTTPException(status_code=400, detail="passphrase, envelope and variant must be strings")

    text = await _run(Operation.DECRYPT, passphrase, envelope, variant)
    return {"text": text}


# ============================================================================
# Main Entry Point
# ============================================================================

def serve():
    """Run the API with uvicorn."""
    import uvicorn

    logging.basicConfig(level=config.LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    serve()
