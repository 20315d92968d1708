#!/usr/bin/env python3
"""
Carga datos de ejemplo: un usuario para iniciar sesión y algunos clientes.
Ejecutar con: python3 seed_database.py
"""
import logging

import config
from app.infrastructure.auth.credentials_provider import hash_password
from app.infrastructure.persistence.database import SessionLocal, engine, Base
from app.infrastructure.persistence.models import Cliente, Usuario

logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

CUSTOMERS = [
    ("Evil Rabbit", "evil@rabbit.com"),
    ("Delba de Oliveira", "delba@oliveira.com"),
    ("Lee Robinson", "lee@robinson.com"),
    ("Michael Novotny", "michael@novotny.com"),
    ("Amy Burns", "amy@burns.com"),
]


def seed_users(db):
    if db.query(Usuario).filter(Usuario.email == "user@nextmail.com").first():
        logging.info("El usuario de ejemplo ya existe. Omitiendo.")
        return
    db.add(Usuario(name="User", email="user@nextmail.com", password=hash_password("123456")))
    logging.info("Usuario de ejemplo creado.")


def seed_customers(db):
    for name, email in CUSTOMERS:
        if not db.query(Cliente).filter(Cliente.email == email).first():
            db.add(Cliente(name=name, email=email))
    logging.info(f"{len(CUSTOMERS)} clientes revisados.")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_users(db)
        seed_customers(db)
        db.commit()
    except Exception:
        logging.error("Error al cargar los datos de ejemplo. Haciendo rollback.", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
