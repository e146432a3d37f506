# app/models/cliente.py
from sqlalchemy import Column, Integer, String, Date, TIMESTAMP, Index, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .base import Base
from .enums import GeneroEnum

class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(120), nullable=False)
    paterno = Column(String(120), nullable=False)
    materno = Column(String(120), nullable=False)
    tipo_documento = Column(String(30), nullable=False)
    documento_identidad = Column(String(40), nullable=False)
    fecha_nacimiento = Column(Date, nullable=False)
    # Se guarda como texto para poder reparar valores históricos (ver normalizar_generos)
    genero = Column(String(20), nullable=False, default=GeneroEnum.M.value)
    fecha_creacion = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    deleted_at = Column(TIMESTAMP(timezone=True), nullable=True)

    # Un cliente puede tener muchas cuentas
    cuentas = relationship(
        "Cuenta",
        back_populates="cliente",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Cuenta.id.desc()",
    )

    __table_args__ = (
        # El documento solo es único entre clientes no eliminados
        Index(
            "uq_clientes_documento_activo",
            "documento_identidad",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    @property
    def eliminado(self) -> bool:
        return self.deleted_at is not None

    def __repr__(self):
        return f"<Cliente(id={self.id}, documento='{self.documento_identidad}')>"
