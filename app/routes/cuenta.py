# app/routes/cuenta.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.cuenta_service import CuentaService
from ..schemas.cuenta import CuentaUpdate, CuentaInDB

router = APIRouter(
    prefix="/cuentas",
    tags=["cuentas"]
)


@router.get("/{cuenta_id}", response_model=CuentaInDB)
def read_cuenta(cuenta_id: int, db: Session = Depends(get_db)):
    return CuentaService.obtener(db, cuenta_id)


@router.put("/{cuenta_id}", response_model=CuentaInDB)
def update_cuenta(
    cuenta_id: int,
    cuenta_data: CuentaUpdate,
    db: Session = Depends(get_db),
):
    """
    Actualiza número, tipo o moneda de la cuenta. El saldo no se puede editar aquí.
    """
    return CuentaService.actualizar(db, cuenta_id, cuenta_data)


@router.delete("/{cuenta_id}")
def delete_cuenta(cuenta_id: int, db: Session = Depends(get_db)):
    """
    Elimina la cuenta y todos sus movimientos.
    """
    return CuentaService.eliminar(db, cuenta_id)
