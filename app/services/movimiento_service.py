# app/services/movimiento_service.py

from typing import List
from sqlalchemy import Numeric, func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..models.cuenta import Cuenta as DBCuenta
from ..models.movimiento import Movimiento as DBMovimiento
from ..models.enums import TipoMovimientoEnum
from ..schemas.movimiento import MovimientoCreate
from ..exceptions import BancoError, NoEncontradoError, SaldoInsuficienteError
from .cuenta_service import CuentaService
import logging

logger = logging.getLogger(__name__)


class MovimientoService:
    """
    Registro de depósitos y retiros. Es el único componente que modifica el saldo
    de una cuenta después de su apertura.
    """

    @staticmethod
    def registrar(db: Session, cuenta_id: int, movimiento_data: MovimientoCreate) -> DBMovimiento:
        """
        Registra un movimiento y ajusta el saldo en una sola transacción.

        El control de saldo y la escritura son una misma sentencia
        (UPDATE ... SET saldo = saldo - monto WHERE saldo >= monto), de modo que dos
        retiros concurrentes sobre la misma cuenta no pueden dejarla en negativo:
        el que llega segundo no afecta filas y recibe SaldoInsuficienteError.
        Si el retiro se rechaza no se guarda ningún movimiento.

        Returns:
            El movimiento creado. No incluye el saldo resultante; hay que
            consultar la cuenta para verlo.
        """
        cuenta = CuentaService.obtener(db, cuenta_id)
        monto = movimiento_data.monto
        es_retiro = movimiento_data.tipo == TipoMovimientoEnum.RETIRO

        # Redondeo a centavos en la propia sentencia: SQLite guarda Numeric como REAL
        saldo_actual = func.round(DBCuenta.saldo, 2, type_=Numeric(14, 2))
        stmt = update(DBCuenta).where(DBCuenta.id == cuenta.id)
        if es_retiro:
            stmt = stmt.where(saldo_actual >= monto).values(
                saldo=func.round(DBCuenta.saldo - monto, 2, type_=Numeric(14, 2))
            )
        else:
            stmt = stmt.values(saldo=func.round(DBCuenta.saldo + monto, 2, type_=Numeric(14, 2)))

        try:
            # 1. Control de saldo + actualización
            result = db.execute(stmt.execution_options(synchronize_session=False))
            if result.rowcount == 0:
                db.rollback()
                if es_retiro:
                    logger.warning(f"Saldo insuficiente en cuenta {cuenta_id} para retirar {monto}")
                    raise SaldoInsuficienteError("Saldo insuficiente")
                logger.warning(f"Cuenta {cuenta_id} no encontrada al registrar {movimiento_data.tipo} de {monto}")
                raise NoEncontradoError("Cuenta no encontrada")

            # 2. Registro del movimiento en la misma transacción
            db_movimiento = DBMovimiento(
                tipo=movimiento_data.tipo,
                monto=monto,
                descripcion=movimiento_data.descripcion,
                cuenta_id=cuenta.id,
            )
            db.add(db_movimiento)
            db.commit()
            db.refresh(db_movimiento)

        except BancoError:
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error registrando movimiento en cuenta {cuenta_id}: {e}")
            raise

        # El saldo en memoria quedó desactualizado por el UPDATE directo
        db.expire(cuenta)
        logger.info(f"Movimiento {db_movimiento.id} ({movimiento_data.tipo} {monto}) registrado en cuenta {cuenta_id}")
        return db_movimiento

    @staticmethod
    def listar_por_cuenta(db: Session, cuenta_id: int) -> List[DBMovimiento]:
        CuentaService.obtener(db, cuenta_id)
        return db.query(DBMovimiento).filter(
            DBMovimiento.cuenta_id == cuenta_id
        ).order_by(DBMovimiento.id.desc()).all()
