"""Run the API locally: python main.py (production: uvicorn app.main:app)."""
import os

import uvicorn

from app.core.config import settings

ENV = settings.environment.lower()
HOST = os.getenv("HOST", "0.0.0.0" if ENV == "production" else "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))
RELOAD = ENV != "production"

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=HOST, port=PORT, reload=RELOAD)
