# app/schemas/cliente.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import date, datetime
from ..models.enums import GeneroEnum
from .cuenta import CuentaInDB

# --- Esquema Base para Cliente ---
class ClienteBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    nombre: str = Field(..., min_length=2, max_length=120)
    paterno: str = Field(..., min_length=2, max_length=120, description="Apellido paterno")
    materno: str = Field(..., min_length=2, max_length=120, description="Apellido materno")
    tipo_documento: str = Field(..., min_length=1, max_length=30, examples=["CI"])
    documento_identidad: str = Field(..., min_length=3, max_length=40, description="Documento de identidad, único entre clientes activos")
    fecha_nacimiento: date = Field(..., examples=["2000-01-15"])
    genero: GeneroEnum = Field(..., examples=["M"])

    @field_validator('nombre', 'paterno', 'materno', 'tipo_documento', 'documento_identidad')
    @classmethod
    def validate_string_fields(cls, v):
        if v is not None and not v.strip():
            raise ValueError("El campo no puede estar vacío.")
        return v

# --- Esquema para crear un Cliente ---
class ClienteCreate(ClienteBase):
    pass

# --- Esquema para actualizar un Cliente ---
# Todos los campos son opcionales para permitir actualizaciones parciales.
class ClienteUpdate(ClienteBase):
    nombre: Optional[str] = Field(None, min_length=2, max_length=120)
    paterno: Optional[str] = Field(None, min_length=2, max_length=120)
    materno: Optional[str] = Field(None, min_length=2, max_length=120)
    tipo_documento: Optional[str] = Field(None, min_length=1, max_length=30)
    documento_identidad: Optional[str] = Field(None, min_length=3, max_length=40)
    fecha_nacimiento: Optional[date] = None
    genero: Optional[GeneroEnum] = None

# --- Esquemas para la lectura de Cliente desde la DB ---
class ClienteInDB(BaseModel):
    id: int
    nombre: str
    paterno: str
    materno: str
    tipo_documento: str
    documento_identidad: str
    fecha_nacimiento: date
    genero: str # Puede contener valores históricos hasta correr fix-generos
    fecha_creacion: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ClienteConCuentas(ClienteInDB):
    cuentas: List[CuentaInDB] = []

    model_config = ConfigDict(from_attributes=True)
