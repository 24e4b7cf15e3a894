import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from nearby_places.core.logger import logs
from nearby_places.core.places_client import PlacesApiClient
from nearby_places.repos.places_repo import ProximityCache
from nearby_places.routes.places_route import router as places_router
from nearby_places.services.Places_service import PlacesService

@asynccontextmanager
async def lifespan(app: FastAPI):
    # One HTTP client and one cache for the whole process
    async with httpx.AsyncClient() as http_client:
        client = PlacesApiClient(http_client)
        app.state.places_service = PlacesService(client, ProximityCache())
        logs.log(logging.INFO, f"Places API client initialized for {client.base_url}")
        yield
    logs.log(logging.INFO, "Places API client closed")

app = FastAPI(title="Nearby Places Provider", lifespan=lifespan)
app.include_router(places_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Nearby Places API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "places": "/places",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Nearby Places Provider"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("nearby_places.main:app", host="0.0.0.0", port=8000, reload=True)
