from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from typing import Optional
from decimal import Decimal

from ..models.enums import TipoMovimientoEnum

# Esquema para la creación de un movimiento
class MovimientoCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    tipo: TipoMovimientoEnum = Field(..., description="Tipo de movimiento")
    monto: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2, examples=["10.50"])
    descripcion: Optional[str] = Field(None, min_length=1, max_length=180, description="Descripción del movimiento")

    @field_validator('descripcion')
    @classmethod
    def validate_descripcion(cls, v):
        if v is not None and not v.strip():
            raise ValueError("La descripción no puede estar vacía.")
        return v

# Esquema principal para la respuesta de un movimiento
class MovimientoResponse(BaseModel):
    id: int
    tipo: str
    monto: Decimal
    descripcion: Optional[str] = None
    cuenta_id: int
    creado_en: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
