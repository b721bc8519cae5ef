from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from userhub.core.config import settings
from userhub.api.api import api_router
from userhub.db.init_db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database
    await init_db()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

def cors_middleware_options(origins) -> dict:
    """CORSMiddleware options; all origins are allowed when none are configured"""
    if origins:
        return {
            "allow_origins": [str(origin).rstrip("/") for origin in origins],
            "allow_credentials": True,
            "allow_methods": ["*"],
            "allow_headers": ["*"],
        }
    return {
        "allow_origins": ["*"],
        "allow_credentials": False,  # Can't use credentials with wildcard
        "allow_methods": ["*"],
        "allow_headers": ["*"],
    }


# Set up CORS middleware
app.add_middleware(CORSMiddleware, **cors_middleware_options(settings.BACKEND_CORS_ORIGINS))

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
