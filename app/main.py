from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
import logging
import os

from app.models.base import Base
from app.database import engine
from app.exceptions import NoEncontradoError, ConflictoError, SaldoInsuficienteError
from app.routes import cliente, cuenta, movimiento

# --- Carga de Variables de Entorno ---
load_dotenv()

# --- Logging ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# --- Creación de la Aplicación FastAPI ---
app = FastAPI(
    title="API Back-office Bancario",
    description="API del sistema bancario: clientes, cuentas y movimientos.",
    version="1.0.0"
)

# --- Middlewares ---
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:5174").split(",")
    if origin.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Creación de Tablas en la Base de Datos (para desarrollo) ---
Base.metadata.create_all(bind=engine)

# --- Traducción de errores de dominio a respuestas HTTP ---
@app.exception_handler(NoEncontradoError)
async def no_encontrado_handler(request: Request, exc: NoEncontradoError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

@app.exception_handler(ConflictoError)
async def conflicto_handler(request: Request, exc: ConflictoError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(SaldoInsuficienteError)
async def saldo_insuficiente_handler(request: Request, exc: SaldoInsuficienteError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

# --- Inclusión de Routers de la API ---
app.include_router(cliente.router)
app.include_router(cuenta.router)
app.include_router(movimiento.router)
