import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# Project modules read their settings at import time, so .env goes first.
load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env", override=False)

from database import Base, engine
import models  # noqa: F401  (registers the interactions table)
from routes import admin_router, chat_router

API_VERSION = "1.0.0"

LOCAL_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
)


def cors_origins() -> list[str]:
    configured = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
    return configured or list(LOCAL_ORIGINS)


Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="SobremIA API",
    description="Rule-based chat assistant for Eduardo's portfolio",
    version=API_VERSION,
)

# The chat session rides on a cookie.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(chat_router)
app.include_router(admin_router)


@app.middleware("http")
async def json_utf8_charset(request: Request, call_next):
    # Explicit charset for JSON bodies.
    response = await call_next(request)
    content_type = response.headers.get("content-type", "")
    if content_type.startswith("application/json") and "charset" not in content_type:
        response.headers["content-type"] = f"{content_type}; charset=utf-8"
    return response


@app.get("/")
async def root():
    return {"message": "SobremIA API - asistente del portafolio", "version": API_VERSION}


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("main:app", host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
