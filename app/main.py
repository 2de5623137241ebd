"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from app.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Mortgage Cost Calculator",
    description="Total cost of fixed-rate amortized loans",
    version="0.1.0",
)

app.include_router(router)
