"""Sportsfeed entry point."""
import uvicorn

from sportsfeed.api.app import app
from sportsfeed.config import Config

if __name__ == "__main__":
    uvicorn.run(app, host=Config.API_HOST, port=Config.API_PORT)
