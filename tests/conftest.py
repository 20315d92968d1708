import os

# La app exige DATABASE_URL al importarse; en pruebas usamos SQLite en memoria
os.environ["DATABASE_URL"] = "sqlite://"

import bcrypt
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models import Cliente, Usuario


@pytest.fixture
def engine():
    """Motor SQLite en memoria compartido entre hilos (TestClient usa un threadpool)."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def customer(db_session):
    cliente = Cliente(id="cust-1", name="Evil Rabbit", email="evil@rabbit.com")
    db_session.add(cliente)
    db_session.commit()
    return cliente


@pytest.fixture
def user(db_session):
    hashed = bcrypt.hashpw(b"123456", bcrypt.gensalt(rounds=4)).decode("utf-8")
    usuario = Usuario(id="user-1", name="User", email="user@nextmail.com", password=hashed)
    db_session.add(usuario)
    db_session.commit()
    return usuario
