"""
FastAPI application — REST API behind the Access for All UI.

Endpoints:
  GET  /health                              — Health check
  GET  /sessions/{sid}                      — Full UI state for a session
  POST /sessions/{sid}/feature              — Switch the active feature
  POST /sessions/{sid}/theme/toggle         — Toggle light/dark theme
  POST /sessions/{sid}/voice                — Dispatch a voice transcript
  POST /sessions/{sid}/image                — Select an image (multipart)
  POST /sessions/{sid}/image/submit         — Generate alt text
  PUT  /sessions/{sid}/contrast             — Set foreground/background colors
  POST /sessions/{sid}/contrast/submit      — Run the WCAG contrast check
  PUT  /sessions/{sid}/text                 — Set the text to simplify
  POST /sessions/{sid}/text/submit          — Simplify the text
  POST /sessions/{sid}/video                — Select a video (metadata only)
  PUT  /sessions/{sid}/video                — Set the video prompt
  POST /sessions/{sid}/video/submit         — Describe the video
  DELETE /sessions/{sid}                    — Forget a session
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, File, HTTPException, UploadFile
from pydantic import BaseModel

import config
from features.shell import SessionStore, Shell
from models.schemas import Feature
from utils.llm import has_api_key

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger(__name__)

sessions = SessionStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not has_api_key():
        # Not enforced: calls are still attempted and fail at call time
        log.error("OPENAI_API_KEY is not set. Remote analysis calls will fail.")
    else:
        log.info("Using OpenAI model %s", config.OPENAI_MODEL)
    yield


app = FastAPI(
    title="Access for All",
    description="AI web accessibility suite: alt text, contrast, plain language and video descriptions",
    version="1.0.0",
    lifespan=lifespan,
)


class FeatureRequest(BaseModel):
    feature: Feature


class VoiceRequest(BaseModel):
    transcript: str


class ColorsRequest(BaseModel):
    foreground: str | None = None
    background: str | None = None


class TextRequest(BaseModel):
    text: str


class PromptRequest(BaseModel):
    prompt: str


async def _blocking(func, *args) -> Any:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


# ── Health ────────────────────────────────────────────────────────────

@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": "access-for-all",
        "model": config.OPENAI_MODEL,
        "api_key_configured": has_api_key(),
        "sessions": len(sessions),
    }


# ── Shell ─────────────────────────────────────────────────────────────

@app.get("/sessions/{session_id}")
def get_session(session_id: str):
    return sessions.get(session_id).state()


@app.delete("/sessions/{session_id}")
def delete_session(session_id: str):
    if not sessions.drop(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return {"session_id": session_id, "deleted": True}


@app.post("/sessions/{session_id}/feature")
def select_feature(session_id: str, req: FeatureRequest):
    shell = sessions.get(session_id)
    shell.select_feature(req.feature)
    return shell.state()


@app.post("/sessions/{session_id}/theme/toggle")
def toggle_theme(session_id: str):
    return {"theme": sessions.get(session_id).toggle_theme()}


@app.post("/sessions/{session_id}/voice")
async def voice_command(session_id: str, req: VoiceRequest):
    """Dispatch one final transcript from browser speech capture."""
    transcript = req.transcript.strip()
    if not transcript:
        raise HTTPException(status_code=400, detail="Transcript is empty")
    shell = sessions.get(session_id)
    action = await _blocking(shell.handle_voice_result, transcript)
    payload = action.payload.value if isinstance(action.payload, Feature) else action.payload
    return {
        "action": {"type": action.type.value, "payload": payload},
        "state": shell.state(),
    }


# ── Image Describer ───────────────────────────────────────────────────

@app.post("/sessions/{session_id}/image")
async def select_image(session_id: str, file: UploadFile = File(...)):
    controller = _controller(session_id, Feature.IMAGE_ANALYZER)
    filename = file.filename or "image"
    size = file.size if file.size is not None else _measure(file)
    if not controller.check_file_size(filename, size):
        raise HTTPException(status_code=413, detail=controller.error)
    data = await file.read()
    if not controller.select_file(filename, file.content_type or "", data):
        raise HTTPException(status_code=413, detail=controller.error)
    return controller.state()


@app.post("/sessions/{session_id}/image/submit")
async def submit_image(session_id: str):
    controller = _controller(session_id, Feature.IMAGE_ANALYZER)
    await _blocking(controller.submit)
    return controller.state()


# ── Color Contrast ────────────────────────────────────────────────────

@app.put("/sessions/{session_id}/contrast")
def set_colors(session_id: str, req: ColorsRequest):
    controller = _controller(session_id, Feature.COLOR_CONTRAST_CHECKER)
    if req.foreground is not None:
        controller.set_foreground(req.foreground)
    if req.background is not None:
        controller.set_background(req.background)
    return controller.state()


@app.post("/sessions/{session_id}/contrast/submit")
async def submit_colors(session_id: str):
    controller = _controller(session_id, Feature.COLOR_CONTRAST_CHECKER)
    if not controller.can_submit:
        raise HTTPException(status_code=409, detail=controller.state())
    await _blocking(controller.submit)
    return controller.state()


# ── Text Simplifier ───────────────────────────────────────────────────

@app.put("/sessions/{session_id}/text")
def set_text(session_id: str, req: TextRequest):
    controller = _controller(session_id, Feature.TEXT_SIMPLIFIER)
    controller.set_text(req.text)
    return controller.state()


@app.post("/sessions/{session_id}/text/submit")
async def submit_text(session_id: str):
    controller = _controller(session_id, Feature.TEXT_SIMPLIFIER)
    await _blocking(controller.submit)
    return controller.state()


# ── Video Describer ───────────────────────────────────────────────────

@app.post("/sessions/{session_id}/video")
def select_video(session_id: str, file: UploadFile = File(...)):
    """Only the file name and size are used; the content is never read."""
    controller = _controller(session_id, Feature.VIDEO_DESCRIBER)
    size = file.size if file.size is not None else _measure(file)
    if not controller.select_file(file.filename or "video", size, file.content_type or ""):
        raise HTTPException(status_code=413, detail=controller.error)
    return controller.state()


@app.put("/sessions/{session_id}/video")
def set_video_prompt(session_id: str, req: PromptRequest):
    controller = _controller(session_id, Feature.VIDEO_DESCRIBER)
    controller.set_prompt(req.prompt)
    return controller.state()


@app.post("/sessions/{session_id}/video/submit")
async def submit_video(session_id: str):
    controller = _controller(session_id, Feature.VIDEO_DESCRIBER)
    await _blocking(controller.submit)
    return controller.state()


def _controller(session_id: str, feature: Feature) -> Any:
    shell: Shell = sessions.get(session_id)
    return shell.controller(feature)


def _measure(file: UploadFile) -> int:
    """Size of a spooled upload without reading it into memory."""
    file.file.seek(0, os.SEEK_END)
    size = file.file.tell()
    file.file.seek(0)
    return size


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
