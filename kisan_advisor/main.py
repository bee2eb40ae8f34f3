from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kisan_advisor.api.rest_routes.assistant import router as assistant_router
from kisan_advisor.api.rest_routes.crop_care import router as crop_care_router
from kisan_advisor.api.rest_routes.farmers import router as farmers_router
from kisan_advisor.api.rest_routes.finance import router as finance_router
from kisan_advisor.api.rest_routes.market import router as market_router
from kisan_advisor.api.rest_routes.news import router as news_router
from kisan_advisor.api.rest_routes.weather import router as weather_router
from kisan_advisor.core.config import settings
from kisan_advisor.core.errors import AdvisoryError
from kisan_advisor.core.logging_config import init_logging

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_logging(settings.LOG_LEVEL)
    yield


app = FastAPI(lifespan=lifespan)


@app.exception_handler(AdvisoryError)
async def advisory_error_handler(request: Request, exc: AdvisoryError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


app.include_router(crop_care_router)
app.include_router(finance_router)
app.include_router(market_router)
app.include_router(weather_router)
app.include_router(news_router)
app.include_router(assistant_router)
app.include_router(farmers_router)


@app.get("/")
async def root():
    return {"message": "Welcome to Kisan Advisor, your AI farming companion!"}
