import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pantry_recipes.app.api.deps import get_chat_client, get_db_session
from pantry_recipes.app.core.config import get_settings
from pantry_recipes.app.db import models
from pantry_recipes.app.db.base import Base
from pantry_recipes.app.main import create_app
from pantry_recipes.app.services.llm_client import ChatResult


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class FakeChatClient:
    def __init__(self, content: str = "", model: str = "fake-model", error: Exception | None = None):
        self.content = content
        self.model = model
        self.error = error
        self.calls = []

    async def chat(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return ChatResult(model=self.model, content=self.content)


@pytest.fixture
def chat_client():
    return FakeChatClient()


@pytest.fixture
def app(db_session, chat_client):
    app = create_app()

    def override_db():
        yield db_session

    app.dependency_overrides[get_db_session] = override_db
    app.dependency_overrides[get_chat_client] = lambda: chat_client
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def add_ingredients(db_session):
    def _add(*names):
        ingredients = [models.Ingredient(name=name) for name in names]
        db_session.add_all(ingredients)
        db_session.commit()
        return {ingredient.name: ingredient.id for ingredient in ingredients}

    return _add
