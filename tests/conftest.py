import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from factory_resolver.adapters import BlueprintAdapter, FactoryBoyAdapter, OrmAdapter
from factory_resolver.backends import BlueprintRegistry, FactoryDefinitions, ModelRegistry
from tests.unit.sample_models import Base


@pytest.fixture
def models(monkeypatch) -> ModelRegistry:
    """Fresh model registry wired into the ORM and blueprint adapters."""
    registry = ModelRegistry()
    monkeypatch.setattr(OrmAdapter, "models", registry)
    monkeypatch.setattr(BlueprintAdapter, "models", registry)
    return registry


@pytest.fixture
def definitions(monkeypatch) -> FactoryDefinitions:
    """Fresh factory definitions wired into the factory_boy adapter."""
    registry = FactoryDefinitions()
    monkeypatch.setattr(FactoryBoyAdapter, "definitions", registry)
    return registry


@pytest.fixture
def blueprints(monkeypatch) -> BlueprintRegistry:
    """Fresh blueprint registry wired into the blueprint adapter."""
    registry = BlueprintRegistry()
    monkeypatch.setattr(BlueprintAdapter, "blueprints", registry)
    return registry


@pytest.fixture
def db_session():
    """In-memory SQLite session, rolled back after each test."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
        session.rollback()
    engine.dispose()
