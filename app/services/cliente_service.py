# app/services/cliente_service.py

from datetime import datetime, timezone
from typing import Dict, List, Optional
from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from ..models.cliente import Cliente as DBCliente
from ..models.enums import GeneroEnum
from ..schemas.cliente import ClienteCreate, ClienteUpdate
from ..exceptions import NoEncontradoError, ConflictoError
import logging

logger = logging.getLogger(__name__)

# Valores históricos de género (comparados en mayúsculas y sin espacios) -> valor válido
MAPA_GENEROS = {
    GeneroEnum.M.value: ("METRO", "MASCULINO", "MALE", "M"),
    GeneroEnum.F.value: ("FEMENINO", "FEMALE", "F"),
    GeneroEnum.Otro.value: ("OTRO", "OTHER"),
}


class ClienteService:
    """Directorio de clientes: alta, consulta, edición y baja lógica."""

    @staticmethod
    def _query_activos(db: Session):
        return db.query(DBCliente).filter(DBCliente.deleted_at.is_(None))

    @staticmethod
    def obtener_activo(db: Session, cliente_id: int) -> DBCliente:
        """
        Devuelve el cliente no eliminado con ese ID.
        Lanza NoEncontradoError si no existe o fue dado de baja.
        """
        cliente = ClienteService._query_activos(db).filter(DBCliente.id == cliente_id).first()
        if cliente is None:
            raise NoEncontradoError("Cliente no encontrado")
        return cliente

    @staticmethod
    def documento_en_uso(db: Session, documento: str, excluir_id: Optional[int] = None) -> bool:
        # Los clientes eliminados no bloquean el documento
        query = ClienteService._query_activos(db).filter(DBCliente.documento_identidad == documento)
        if excluir_id is not None:
            query = query.filter(DBCliente.id != excluir_id)
        return query.first() is not None

    @staticmethod
    def crear(db: Session, cliente_data: ClienteCreate) -> DBCliente:
        if ClienteService.documento_en_uso(db, cliente_data.documento_identidad):
            logger.warning(f"Documento duplicado al crear cliente: {cliente_data.documento_identidad}")
            raise ConflictoError("documento_identidad ya existe")

        try:
            nuevo_cliente = DBCliente(**cliente_data.model_dump())
            db.add(nuevo_cliente)
            db.commit()
            db.refresh(nuevo_cliente)
        except IntegrityError:
            # Otro request registró el mismo documento entre la verificación y el commit
            db.rollback()
            raise ConflictoError("documento_identidad ya existe")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creando cliente con documento {cliente_data.documento_identidad}: {e}")
            raise

        logger.info(f"Cliente {nuevo_cliente.id} creado")
        return nuevo_cliente

    @staticmethod
    def listar(db: Session) -> List[DBCliente]:
        return ClienteService._query_activos(db).order_by(DBCliente.id.desc()).all()

    @staticmethod
    def obtener_con_cuentas(db: Session, cliente_id: int) -> DBCliente:
        cliente = ClienteService._query_activos(db).options(
            joinedload(DBCliente.cuentas)
        ).filter(DBCliente.id == cliente_id).first()
        if cliente is None:
            raise NoEncontradoError("Cliente no encontrado")
        return cliente

    @staticmethod
    def actualizar(db: Session, cliente_id: int, cliente_data: ClienteUpdate) -> DBCliente:
        """
        Actualización parcial: solo se modifican los campos enviados.
        Si cambia el documento se vuelve a validar su unicidad entre clientes activos.
        """
        cliente = ClienteService.obtener_activo(db, cliente_id)
        update_data = cliente_data.model_dump(exclude_unset=True, exclude_none=True)

        nuevo_documento = update_data.get("documento_identidad")
        if (
            nuevo_documento
            and nuevo_documento.strip() != ""
            and nuevo_documento != cliente.documento_identidad
            and ClienteService.documento_en_uso(db, nuevo_documento, excluir_id=cliente.id)
        ):
            logger.warning(f"Documento duplicado al actualizar cliente {cliente_id}: {nuevo_documento}")
            raise ConflictoError("documento_identidad ya existe")

        try:
            for key, value in update_data.items():
                setattr(cliente, key, value)
            db.commit()
            db.refresh(cliente)
        except IntegrityError:
            db.rollback()
            raise ConflictoError("documento_identidad ya existe")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error actualizando cliente {cliente_id}: {e}")
            raise

        return cliente

    @staticmethod
    def eliminar(db: Session, cliente_id: int) -> Dict[str, bool]:
        """
        Baja lógica: marca deleted_at. Sus cuentas quedan intactas.
        """
        cliente = ClienteService.obtener_activo(db, cliente_id)
        try:
            cliente.deleted_at = datetime.now(timezone.utc)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error eliminando cliente {cliente_id}: {e}")
            raise

        logger.info(f"Cliente {cliente_id} dado de baja")
        return {"ok": True}

    @staticmethod
    def normalizar_generos(db: Session) -> dict:
        """
        Reparación de datos de una sola vez: lleva los géneros escritos a mano
        ('Masculino', 'Female', ' other ', ...) al conjunto M / F / Otro.
        Recorre todos los registros, incluidos los dados de baja.
        """
        actualizados = {}
        try:
            for genero, equivalentes in MAPA_GENEROS.items():
                result = db.execute(
                    update(DBCliente)
                    .where(
                        func.upper(func.trim(DBCliente.genero)).in_(equivalentes),
                        DBCliente.genero != genero,
                    )
                    .values(genero=genero)
                    .execution_options(synchronize_session=False)
                )
                actualizados[genero] = result.rowcount
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error normalizando géneros: {e}")
            raise

        # Los objetos cargados en la sesión pueden tener el valor anterior
        db.expire_all()
        logger.info(f"Géneros normalizados: {actualizados}")
        return {"ok": True, "actualizados": actualizados}
