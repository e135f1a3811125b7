import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from metro_planner.config import settings
from metro_planner.exceptions import MetroPlannerException, NoRouteFoundException
from metro_planner.stations import router as stations_router
from metro_planner.routes import router as routes_router

# Logging configuration
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Metro journey routing and fare engine API",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
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
    tags=["Journey Planning"]
)

@app.exception_handler(MetroPlannerException)
async def metro_planner_exception_handler(request: Request, exc: MetroPlannerException):
    """Map engine errors that escape an endpoint to a JSON error with their code"""
    # 404 only when both stations exist but are not connected
    if isinstance(exc, NoRouteFoundException):
        status_code = 404
    else:
        status_code = 400
    logger.warning("%s on %s: %s", exc.code, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"code": exc.code, "message": exc.message}
    )

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
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
