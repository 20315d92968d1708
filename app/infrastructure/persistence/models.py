# app/infrastructure/persistence/models.py
import uuid
from sqlalchemy import Column, Date, ForeignKey, Integer, String

from .database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Usuario(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # hash bcrypt


class Cliente(Base):
    __tablename__ = "customers"

    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    image_url = Column(String, nullable=True)


class Factura(Base):
    __tablename__ = "invoices"

    id = Column(String, primary_key=True, default=_new_id)
    customer_id = Column(String, ForeignKey("customers.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)  # en centavos
    status = Column(String, nullable=False)
    date = Column(Date, nullable=False)
