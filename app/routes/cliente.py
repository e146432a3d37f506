# app/routes/cliente.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.cliente_service import ClienteService
from ..services.cuenta_service import CuentaService

# Importa tus esquemas Pydantic
from ..schemas.cliente import ClienteCreate, ClienteUpdate, ClienteInDB, ClienteConCuentas
from ..schemas.cuenta import CuentaCreate, CuentaUpdate, CuentaInDB

router = APIRouter(
    prefix="/clientes",
    tags=["clientes"]
)

# --- Rutas de API para Clientes ---

@router.post("", response_model=ClienteInDB, status_code=status.HTTP_201_CREATED)
def create_cliente(
    cliente_data: ClienteCreate,
    db: Session = Depends(get_db),
):
    """
    Crea un nuevo cliente. El documento de identidad no puede repetirse entre clientes activos.
    """
    return ClienteService.crear(db, cliente_data)


@router.get("", response_model=List[ClienteInDB])
def read_clientes(db: Session = Depends(get_db)):
    """
    Lista los clientes activos, del más reciente al más antiguo.
    """
    return ClienteService.listar(db)


@router.get("/fix-generos")
def fix_generos(db: Session = Depends(get_db)):
    """
    Mantenimiento: normaliza géneros históricos (Masculino, Female, Other...) a M / F / Otro.
    """
    return ClienteService.normalizar_generos(db)


@router.get("/{cliente_id}", response_model=ClienteConCuentas)
def read_cliente(cliente_id: int, db: Session = Depends(get_db)):
    """
    Obtiene un cliente por su ID, incluyendo sus cuentas.
    """
    return ClienteService.obtener_con_cuentas(db, cliente_id)


@router.put("/{cliente_id}", response_model=ClienteInDB)
def update_cliente(
    cliente_id: int,
    cliente_data: ClienteUpdate,
    db: Session = Depends(get_db),
):
    return ClienteService.actualizar(db, cliente_id, cliente_data)


@router.delete("/{cliente_id}")
def delete_cliente(cliente_id: int, db: Session = Depends(get_db)):
    """
    Baja lógica del cliente. Sus cuentas no se modifican.
    """
    return ClienteService.eliminar(db, cliente_id)


# --- Cuentas por cliente ---

@router.post("/{cliente_id}/cuentas", response_model=CuentaInDB, status_code=status.HTTP_201_CREATED)
def create_cuenta(
    cliente_id: int,
    cuenta_data: CuentaCreate,
    db: Session = Depends(get_db),
):
    return CuentaService.crear_para_cliente(db, cliente_id, cuenta_data)


@router.get("/{cliente_id}/cuentas", response_model=List[CuentaInDB])
def read_cuentas_cliente(cliente_id: int, db: Session = Depends(get_db)):
    return CuentaService.listar_por_cliente(db, cliente_id)


@router.put("/cuentas/{cuenta_id}", response_model=CuentaInDB)
def update_cuenta(
    cuenta_id: int,
    cuenta_data: CuentaUpdate,
    db: Session = Depends(get_db),
):
    return CuentaService.actualizar(db, cuenta_id, cuenta_data)


@router.delete("/cuentas/{cuenta_id}")
def delete_cuenta(cuenta_id: int, db: Session = Depends(get_db)):
    return CuentaService.eliminar(db, cuenta_id)
