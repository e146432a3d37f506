# app/services/cuenta_service.py

from typing import Dict, List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from ..models.cuenta import Cuenta as DBCuenta
from ..schemas.cuenta import CuentaCreate, CuentaUpdate
from ..exceptions import NoEncontradoError, ConflictoError
from .cliente_service import ClienteService
import logging

logger = logging.getLogger(__name__)


class CuentaService:

    @staticmethod
    def obtener(db: Session, cuenta_id: int) -> DBCuenta:
        cuenta = db.query(DBCuenta).filter(DBCuenta.id == cuenta_id).first()
        if cuenta is None:
            raise NoEncontradoError("Cuenta no encontrada")
        return cuenta

    @staticmethod
    def numero_en_uso(db: Session, numero_cuenta: str, excluir_id: Optional[int] = None) -> bool:
        # El número de cuenta es único en todo el sistema, no por cliente
        query = db.query(DBCuenta).filter(DBCuenta.numero_cuenta == numero_cuenta)
        if excluir_id is not None:
            query = query.filter(DBCuenta.id != excluir_id)
        return query.first() is not None

    @staticmethod
    def crear_para_cliente(db: Session, cliente_id: int, cuenta_data: CuentaCreate) -> DBCuenta:
        """
        Abre una cuenta para el cliente. El saldo inicial se toma del monto enviado.
        """
        ClienteService.obtener_activo(db, cliente_id)

        if CuentaService.numero_en_uso(db, cuenta_data.numero_cuenta):
            logger.warning(f"Número de cuenta duplicado: {cuenta_data.numero_cuenta}")
            raise ConflictoError("numero_cuenta ya existe")

        try:
            nueva_cuenta = DBCuenta(**cuenta_data.model_dump(), cliente_id=cliente_id)
            db.add(nueva_cuenta)
            db.commit()
            db.refresh(nueva_cuenta)
        except IntegrityError:
            db.rollback()
            raise ConflictoError("numero_cuenta ya existe")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creando cuenta {cuenta_data.numero_cuenta} para cliente {cliente_id}: {e}")
            raise

        logger.info(f"Cuenta {nueva_cuenta.id} ({nueva_cuenta.numero_cuenta}) creada para cliente {cliente_id}")
        return nueva_cuenta

    @staticmethod
    def listar_por_cliente(db: Session, cliente_id: int) -> List[DBCuenta]:
        ClienteService.obtener_activo(db, cliente_id)
        return db.query(DBCuenta).filter(
            DBCuenta.cliente_id == cliente_id
        ).order_by(DBCuenta.id.desc()).all()

    @staticmethod
    def actualizar(db: Session, cuenta_id: int, cuenta_data: CuentaUpdate) -> DBCuenta:
        """
        Actualización parcial de número, tipo o moneda.
        CuentaUpdate no admite 'saldo': el saldo solo lo modifica MovimientoService.
        """
        cuenta = CuentaService.obtener(db, cuenta_id)
        update_data = cuenta_data.model_dump(exclude_unset=True, exclude_none=True)

        nuevo_numero = update_data.get("numero_cuenta")
        if (
            nuevo_numero
            and nuevo_numero != cuenta.numero_cuenta
            and CuentaService.numero_en_uso(db, nuevo_numero, excluir_id=cuenta.id)
        ):
            raise ConflictoError("numero_cuenta ya existe")

        try:
            for key, value in update_data.items():
                setattr(cuenta, key, value)
            db.commit()
            db.refresh(cuenta)
        except IntegrityError:
            db.rollback()
            raise ConflictoError("numero_cuenta ya existe")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error actualizando cuenta {cuenta_id}: {e}")
            raise

        return cuenta

    @staticmethod
    def eliminar(db: Session, cuenta_id: int) -> Dict[str, bool]:
        """Borrado físico; los movimientos de la cuenta se eliminan en cascada."""
        cuenta = CuentaService.obtener(db, cuenta_id)
        try:
            db.delete(cuenta)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error eliminando cuenta {cuenta_id}: {e}")
            raise

        logger.info(f"Cuenta {cuenta_id} eliminada")
        return {"ok": True}
