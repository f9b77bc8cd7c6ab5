import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api import router
from .db import DATABASE_URL, make_engine, make_session_factory
from .errors import StorageUnavailable
from .gateway import AssessmentGateway
from .knowledge import KnowledgeBase, load_default

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(gateway: AssessmentGateway | None = None, knowledge: KnowledgeBase | None = None) -> FastAPI:
    if gateway is None:
        engine = make_engine(DATABASE_URL)
        gateway = AssessmentGateway(make_session_factory(engine), engine=engine)
    if knowledge is None:
        knowledge = load_default()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            app.state.gateway.initialize()
        except StorageUnavailable:
            # insights still work; saving and history answer 503
            logger.warning("Starting without database; assessments will not be saved")
        yield

    app = FastAPI(title="Health Insight API (Educational)", version="1.0.0", lifespan=lifespan)
    app.state.gateway = gateway
    app.state.knowledge = knowledge

    origins = os.getenv("ALLOW_ORIGINS", "*").split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api/health-insight")
    return app


app = create_app()
