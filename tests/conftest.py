"""
Configuración global para todas las pruebas pytest
"""
import os

# Debe definirse antes de importar la app para no crear banco.db en disco
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db, habilitar_foreign_keys_sqlite
from app.main import app
from app.models.base import Base
from app.schemas.cliente import ClienteCreate
from app.schemas.cuenta import CuentaCreate
from app.services.cliente_service import ClienteService
from app.services.cuenta_service import CuentaService

# Base de datos SQLite en memoria, una sola conexión compartida
SQLALCHEMY_DATABASE_URL = "sqlite://"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
habilitar_foreign_keys_sqlite(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Crea las tablas para cada test y las elimina al final.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    Cliente HTTP de pruebas con la base de datos de test.
    """
    def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    with TestClient(app) as client:
        yield client

    # Limpiar overrides después del test
    app.dependency_overrides.clear()


@pytest.fixture
def sample_cliente_data():
    """
    Datos de ejemplo para crear clientes por la API.
    """
    return {
        "nombre": "Juan",
        "paterno": "Perez",
        "materno": "Mamani",
        "tipo_documento": "CI",
        "documento_identidad": "CI 1234567",
        "fecha_nacimiento": "2000-01-15",
        "genero": "M",
    }


@pytest.fixture
def create_test_cliente(db_session):
    """
    Factory function para crear clientes de prueba en la BD.
    """
    def _create_cliente(documento="CI 1234567", nombre="Juan", genero="M"):
        return ClienteService.crear(db_session, ClienteCreate(
            nombre=nombre,
            paterno="Perez",
            materno="Mamani",
            tipo_documento="CI",
            documento_identidad=documento,
            fecha_nacimiento=date(2000, 1, 15),
            genero=genero,
        ))

    return _create_cliente


@pytest.fixture
def create_test_cuenta(db_session):
    """
    Factory function para abrir cuentas de prueba.
    """
    def _create_cuenta(cliente_id, numero="LPZ-000001", saldo="0", tipo="AHORRO", moneda="BOB"):
        return CuentaService.crear_para_cliente(db_session, cliente_id, CuentaCreate(
            numero_cuenta=numero,
            tipo=tipo,
            moneda=moneda,
            saldo=Decimal(saldo),
        ))

    return _create_cuenta


@pytest.fixture
def session_factory(db_session):
    """
    Fábrica de sesiones adicionales sobre la misma base de test.
    """
    return TestingSessionLocal
