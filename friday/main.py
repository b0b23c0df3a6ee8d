"""Main FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from friday import __version__
from friday.api.endpoints import router
from friday.utils.logging import setup_logging

setup_logging()

# Create FastAPI application
app = FastAPI(
    title="FRIDAY+ Agent",
    description=(
        "A conversational AI co-pilot that answers directly or calls real-time "
        "weather and news tools before replying."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Conversation",
            "description": "Run a turn over a caller-supplied message history.",
        },
        {
            "name": "Chats",
            "description": "Create chats and exchange messages persisted by the service.",
        },
        {
            "name": "Health",
            "description": "Service health monitoring and status checks.",
        },
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("friday.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
