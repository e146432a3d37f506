from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.movimiento_service import MovimientoService
from ..schemas.movimiento import MovimientoCreate, MovimientoResponse

router = APIRouter(
    prefix="/cuentas",
    tags=["movimientos"]
)


@router.get("/{cuenta_id}/movimientos", response_model=List[MovimientoResponse])
def read_movimientos(cuenta_id: int, db: Session = Depends(get_db)):
    """
    Movimientos de la cuenta, del más reciente al más antiguo.
    """
    return MovimientoService.listar_por_cuenta(db, cuenta_id)


@router.post("/{cuenta_id}/movimientos", response_model=MovimientoResponse, status_code=status.HTTP_201_CREATED)
def create_movimiento(
    cuenta_id: int,
    movimiento: MovimientoCreate,
    db: Session = Depends(get_db),
):
    """
    Registra un depósito o retiro y actualiza el saldo de la cuenta.
    Un retiro mayor al saldo disponible se rechaza con 400 y no deja rastro.
    """
    return MovimientoService.registrar(db, cuenta_id, movimiento)
