import logging

from fastapi import FastAPI
from src.config import settings
from src.stations import router as stations_router
from src.routes import router as routes_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Delhi Metro Route Planner API",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers
app.include_router(
    stations_router.router,
    prefix=f"{settings.API_V1_STR}/stations",
    tags=["Stations"]
)

app.include_router(
    routes_router,
    prefix=f"{settings.API_V1_STR}/routes",
    tags=["Route Planning"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Delhi Metro Route Planner API",
        "version": "1.0.0",
        "docs": "/docs"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
