"""
FastAPI service serving the SOLID guide.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solidguide.guide_config import load_config
from solidguide.handlers import guide, health

config = load_config()

app = FastAPI(
    title=config.api_title,
    version="1.0.0",
    description="The five SOLID principles, each shown as a bad/good contrast pair"
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register health check endpoint
app.include_router(health.router)

# Register guide endpoints
app.include_router(guide.router)
