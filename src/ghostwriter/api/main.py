"""Ghostwriter Lyric Generator — FastAPI Application.

This module defines the FastAPI ``app`` instance, all REST API routes, and
the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application is stateless between requests:

- **Generation** is performed by :class:`~ghostwriter.core.generator.LyricsGenerator`,
  created once in the lifespan handler and stored on ``app.state``.  If no
  API key is configured the generator cannot be built and the server
  refuses to start.
- **Options** (axis values, labels and defaults) are served from the
  constant tables in :mod:`ghostwriter.core.styles`.
- Nothing is persisted; every generation is one request and one response.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/api/config``               Version, model, style axes
POST      ``/api/prompt/compile``       Preview the instruction string
POST      ``/api/generate``             Generate lyrics
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    ghostwriter

Direct invocation::

    python -m ghostwriter.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from ghostwriter import __version__
from ghostwriter.api.models import CompileResponse, GenerateRequest, GenerateResponse
from ghostwriter.core.config import config
from ghostwriter.core.exceptions import EmptyConceptError, GenerationServiceError
from ghostwriter.core.generator import LyricsGenerator
from ghostwriter.core.models import validate_concept
from ghostwriter.core.prompt_builder import build_instructions
from ghostwriter.core.styles import AXES, STYLE_PRESET_DESCRIPTIONS, StylePreset

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application lifecycle — generator setup and teardown.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown lifecycle.

    On startup:
        Builds a :class:`LyricsGenerator` from the global configuration and
        stores it on ``app.state``.  A missing API key raises
        :class:`~ghostwriter.core.exceptions.MissingCredentialError`, which
        aborts startup.

    On shutdown:
        Closes the generator's HTTP connection pool.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    # --- Startup -----------------------------------------------------------
    app.state.generator = LyricsGenerator(config)
    logger.info("LyricsGenerator initialised.")

    yield  # Application runs here.

    # --- Shutdown ----------------------------------------------------------
    app.state.generator.close()
    logger.info("LyricsGenerator closed on shutdown.")


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Ghostwriter Lyric Generator",
    description="Structured rap-lyric generation on top of the Gemini API.",
    version=__version__,
    lifespan=lifespan,
)

# Allow cross-origin requests so a separately served frontend can call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config(request: Request) -> dict:
    """Return the options the frontend needs to render the form.

    The response includes:

    - ``version`` — API version string.
    - ``model_id`` — model generations are sent to.
    - ``axes`` — one entry per style axis, in instruction order, with its
      title, default and the list of ``{value, label}`` options.  Style
      presets also carry a ``description``.

    Returns:
        Dictionary with keys ``version``, ``model_id`` and ``axes``.
    """
    axes = []
    for axis in AXES.values():
        options = []
        for member in axis.enum:
            option = {"value": member.value, "label": axis.labels[member]}
            if axis.enum is StylePreset:
                option["description"] = STYLE_PRESET_DESCRIPTIONS[member]
            options.append(option)
        axes.append(
            {
                "name": axis.name,
                "title": axis.title,
                "default": axis.default.value,
                "options": options,
            }
        )

    return {
        "version": __version__,
        "model_id": request.app.state.generator.model_id,
        "axes": axes,
    }


@app.post("/api/prompt/compile", response_model=CompileResponse)
async def compile_prompt(req: GenerateRequest) -> CompileResponse:
    """Preview the instruction string without calling the model.

    Args:
        req: Validated :class:`GenerateRequest` payload.

    Returns:
        The compiled instructions.

    Raises:
        HTTPException: 400 if the concept is blank.
    """
    try:
        validate_concept(req.concept)
    except EmptyConceptError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return CompileResponse(instructions=build_instructions(req.to_generation_request()))


@app.post("/api/generate", response_model=GenerateResponse)
def generate_lyrics(req: GenerateRequest, request: Request) -> GenerateResponse:
    """Generate lyrics for the requested concept and style.

    Declared as a plain function so FastAPI runs the blocking model call in
    its threadpool.

    Args:
        req: Validated :class:`GenerateRequest` payload.
        request: The incoming request (used to reach ``app.state``).

    Returns:
        The generated lyrics and the model that wrote them.

    Raises:
        HTTPException: 400 for a blank concept, 502 when the generation
            service fails or returns nothing.
    """
    generator: LyricsGenerator = request.app.state.generator

    try:
        lyrics = generator.generate(req.to_generation_request())
    except EmptyConceptError as e:
        logger.warning(f"Rejected generation request: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    except GenerationServiceError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    return GenerateResponse(lyrics=lyrics, model_id=generator.model_id)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~ghostwriter.core.config.config` (which
    loads from ``GHOSTWRITER_SERVER_HOST`` and ``GHOSTWRITER_SERVER_PORT``
    environment variables).  Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``ghostwriter`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "ghostwriter.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
