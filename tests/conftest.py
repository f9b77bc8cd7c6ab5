import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from health_insight.db import make_engine, make_session_factory
from health_insight.gateway import AssessmentGateway
from health_insight.knowledge import load_default
from health_insight.main import create_app


@pytest.fixture
def knowledge():
    return load_default()


@pytest.fixture
def engine():
    engine = make_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def gateway(engine, session_factory):
    gw = AssessmentGateway(session_factory, engine=engine)
    gw.initialize()
    return gw


@pytest.fixture
def offline_gateway(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'missing' / 'nested' / 'health.db'}")
    yield AssessmentGateway(make_session_factory(engine), engine=engine)
    engine.dispose()


@pytest.fixture
def client(engine, session_factory, knowledge):
    app = create_app(gateway=AssessmentGateway(session_factory, engine=engine), knowledge=knowledge)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def offline_client(offline_gateway, knowledge):
    app = create_app(gateway=offline_gateway, knowledge=knowledge)
    with TestClient(app) as c:
        yield c
