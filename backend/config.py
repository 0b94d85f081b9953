"""Application configuration via environment variables."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# Plan canvas origin (plan-space point mapped to world origin)
PLAN_ORIGIN_X = float(os.getenv("PLAN_ORIGIN_X", "400"))
PLAN_ORIGIN_Y = float(os.getenv("PLAN_ORIGIN_Y", "300"))

# Font handed to the viewer for room labels
LABEL_FONT = os.getenv("LABEL_FONT", "/fonts/Inter-Bold.woff")

# File Storage
EXPORT_DIR = Path(os.getenv("EXPORT_DIR", str(BASE_DIR / "exports")))
EXPORT_DIR.mkdir(parents=True, exist_ok=True)

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
