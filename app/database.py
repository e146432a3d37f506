from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
import os

load_dotenv()

SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./banco.db")


def habilitar_foreign_keys_sqlite(engine):
    """
    SQLite no aplica ON DELETE CASCADE si no se activa el pragma en cada conexión.
    """
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    # connect_args={"check_same_thread": False} es necesario solo para SQLite
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
    )
    habilitar_foreign_keys_sqlite(engine)
else:
    # Ajusta pool_size y max_overflow según tus necesidades
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        pool_size=10,          # Conexiones activas máximas en el pool
        max_overflow=20,       # Conexiones adicionales si pool_size se agota
        pool_pre_ping=True,    # Verifica conexiones antes de usarlas
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
