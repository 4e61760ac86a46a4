from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging_config import configure_logging

from app.routes import series_router
from app.routes import forecast_router
from app.routes import advisory_router

configure_logging()

app = FastAPI(title="Sales Forecast Dashboard")

origins = [
    settings.FRONTEND_BASE_URL.rstrip("/"),
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include sales series editing router
app.include_router(series_router.router)
# Include linear trend forecast router
app.include_router(forecast_router.router)
# Include AI advisory router
app.include_router(advisory_router.router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Sales Forecast Dashboard!"}
