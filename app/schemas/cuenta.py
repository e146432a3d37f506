# app/schemas/cuenta.py
from pydantic import BaseModel, Field, ConfigDict, AliasChoices
from typing import Optional
from datetime import datetime
from decimal import Decimal
from ..models.enums import TipoCuentaEnum, MonedaEnum

# --- Esquema base para Cuenta ---
class CuentaBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    numero_cuenta: str = Field(..., min_length=3, max_length=40, description="Número de cuenta, único en todo el sistema")
    tipo: TipoCuentaEnum = Field(..., description="Tipo de cuenta")
    moneda: MonedaEnum = Field(MonedaEnum.BOB, validate_default=True)

# --- Esquema para crear una Cuenta ---
class CuentaCreate(CuentaBase):
    # El frontend envía 'saldo'; clientes antiguos envían 'monto'
    saldo: Decimal = Field(
        Decimal("0"),
        ge=0,
        max_digits=14,
        decimal_places=2,
        validation_alias=AliasChoices("saldo", "monto"),
        description="Saldo inicial de la cuenta",
    )

# --- Esquema para actualizar una Cuenta ---
class CuentaUpdate(BaseModel):
    """
    Actualización parcial de una cuenta.
    El saldo no se puede modificar por esta vía: solo cambia al registrar movimientos.
    """
    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    numero_cuenta: Optional[str] = Field(None, min_length=3, max_length=40)
    tipo: Optional[TipoCuentaEnum] = None
    moneda: Optional[MonedaEnum] = None

# --- Esquema para representar una Cuenta leída de la base de datos ---
class CuentaInDB(BaseModel):
    id: int
    numero_cuenta: str
    tipo: str
    saldo: Decimal
    moneda: str
    cliente_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
