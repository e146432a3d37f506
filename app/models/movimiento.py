from sqlalchemy import Column, Integer, String, Numeric, TIMESTAMP, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .base import Base

class Movimiento(Base):
    __tablename__ = 'movimientos'

    id = Column(Integer, primary_key=True, index=True)
    tipo = Column(String(20), nullable=False)
    monto = Column(Numeric(14, 2), nullable=False)
    descripcion = Column(String(255), nullable=True)
    cuenta_id = Column(Integer, ForeignKey('cuentas.id', ondelete='CASCADE'), nullable=False, index=True)
    creado_en = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    cuenta = relationship("Cuenta", back_populates="movimientos")
