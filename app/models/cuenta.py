# app/models/cuenta.py
from sqlalchemy import Column, Integer, String, Numeric, TIMESTAMP, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .base import Base
from .enums import MonedaEnum

class Cuenta(Base):
    __tablename__ = "cuentas"

    id = Column(Integer, primary_key=True, index=True)
    numero_cuenta = Column(String(40), unique=True, nullable=False)
    tipo = Column(String(20), nullable=False)
    saldo = Column(Numeric(14, 2), nullable=False, default=0)
    moneda = Column(String(10), nullable=False, default=MonedaEnum.BOB.value)
    cliente_id = Column(Integer, ForeignKey("clientes.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    # Relaciones
    cliente = relationship("Cliente", back_populates="cuentas")
    movimientos = relationship(
        "Movimiento",
        back_populates="cuenta",
        cascade="all, delete-orphan", # Al borrar la cuenta se borran sus movimientos
    )

    def __repr__(self):
        return f"<Cuenta(id={self.id}, numero='{self.numero_cuenta}', saldo={self.saldo})>"
