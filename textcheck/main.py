import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse

from .core.config import settings
from .api.routes.analyze import router as analyze_router
from .api.routes.credentials import router as credentials_router
from .api.routes.detect import router as detect_router

logging.basicConfig(level=logging.INFO)
# httpx logs full request URLs at INFO, which would include ?key=
logging.getLogger("httpx").setLevel(logging.WARNING)

app = FastAPI(title="TextCheck - AI Text Detector")

# CORS open for local dev (tighten in prod)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

STATIC_DIR = settings.STATIC_DIR
app.mount("/static", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")

# Routers
app.include_router(analyze_router)
app.include_router(credentials_router)
app.include_router(detect_router)

# The page itself, served from the project root like any static site
@app.get("/")
async def root():
    index_path = os.path.join(STATIC_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path, media_type="text/html")
    return JSONResponse({"message": "Index file not found"}, status_code=404)

@app.get("/style.css")
async def css():
    p = os.path.join(STATIC_DIR, "style.css")
    if os.path.exists(p):
        return FileResponse(p, media_type="text/css")
    return JSONResponse({"detail": "style.css not found"}, status_code=404)

@app.get("/script.js")
async def js():
    p = os.path.join(STATIC_DIR, "script.js")
    if os.path.exists(p):
        return FileResponse(p, media_type="application/javascript")
    return JSONResponse({"detail": "script.js not found"}, status_code=404)
