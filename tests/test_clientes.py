"""
PRUEBAS - Módulo Clientes
Objetivo: alta, consulta, edición y baja lógica de clientes, unicidad del
documento de identidad entre clientes activos y normalización de géneros.
"""
import pytest
from datetime import date

from app.exceptions import ConflictoError, NoEncontradoError
from app.models.cliente import Cliente as DBCliente
from app.schemas.cliente import ClienteCreate, ClienteUpdate
from app.services.cliente_service import ClienteService


class TestCrearCliente:

    def test_creacion_exitosa(self, client, sample_cliente_data):
        response = client.post("/clientes", json=sample_cliente_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["documento_identidad"] == "CI 1234567"
        assert data["fecha_nacimiento"] == "2000-01-15"
        assert data["genero"] == "M"
        assert data["fecha_creacion"] is not None

    def test_documentos_distintos_siempre_se_crean(self, client, sample_cliente_data):
        for i in range(5):
            payload = {**sample_cliente_data, "documento_identidad": f"CI 100{i}"}
            assert client.post("/clientes", json=payload).status_code == 201

        assert len(client.get("/clientes").json()) == 5

    def test_documento_duplicado(self, client, sample_cliente_data):
        client.post("/clientes", json=sample_cliente_data)

        response = client.post("/clientes", json={**sample_cliente_data, "nombre": "Otro Nombre"})

        assert response.status_code == 400
        assert response.json()["detail"] == "documento_identidad ya existe"

    def test_documento_distingue_mayusculas(self, client, sample_cliente_data):
        client.post("/clientes", json=sample_cliente_data)

        response = client.post("/clientes", json={**sample_cliente_data, "documento_identidad": "ci 1234567"})

        assert response.status_code == 201

    def test_servicio_lanza_conflicto(self, db_session, create_test_cliente):
        create_test_cliente("CI 555")

        with pytest.raises(ConflictoError):
            create_test_cliente("CI 555")

    @pytest.mark.parametrize("campo,valor", [
        ("genero", "Masculino"),
        ("nombre", "J"),
        ("documento_identidad", "12"),
        ("fecha_nacimiento", "15/01/2000"),
        ("paterno", "   "),
    ])
    def test_validacion_de_entrada(self, client, sample_cliente_data, campo, valor):
        response = client.post("/clientes", json={**sample_cliente_data, campo: valor})

        assert response.status_code == 422


class TestBajaLogicaYUnicidad:

    def test_escenario_b_documento_liberado_tras_baja(self, client, sample_cliente_data):
        """
        Crear cliente, fallar con el mismo documento, dar de baja al primero
        y volver a crear con el mismo documento.
        """
        primero = client.post("/clientes", json=sample_cliente_data).json()

        duplicado = client.post("/clientes", json=sample_cliente_data)
        assert duplicado.status_code == 400

        assert client.delete(f"/clientes/{primero['id']}").json() == {"ok": True}

        segundo = client.post("/clientes", json=sample_cliente_data)
        assert segundo.status_code == 201
        assert segundo.json()["id"] != primero["id"]

    def test_baja_no_borra_la_fila(self, client, db_session, create_test_cliente):
        cliente = create_test_cliente()

        response = client.delete(f"/clientes/{cliente.id}")

        assert response.status_code == 200
        db_cliente = db_session.query(DBCliente).filter(DBCliente.id == cliente.id).first()
        assert db_cliente is not None
        assert db_cliente.deleted_at is not None
        assert db_cliente.eliminado

    def test_cliente_eliminado_no_es_visible(self, client, create_test_cliente):
        cliente = create_test_cliente()
        client.delete(f"/clientes/{cliente.id}")

        assert client.get(f"/clientes/{cliente.id}").status_code == 404
        assert client.put(f"/clientes/{cliente.id}", json={"nombre": "Pedro"}).status_code == 404
        assert client.delete(f"/clientes/{cliente.id}").status_code == 404
        assert client.get("/clientes").json() == []

    def test_eliminar_inexistente(self, client):
        response = client.delete("/clientes/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Cliente no encontrado"

    def test_baja_conserva_las_cuentas(self, client, create_test_cliente, create_test_cuenta):
        cliente = create_test_cliente()
        cuenta = create_test_cuenta(cliente.id, saldo="50.00")

        client.delete(f"/clientes/{cliente.id}")

        response = client.get(f"/cuentas/{cuenta.id}")
        assert response.status_code == 200
        assert response.json()["cliente_id"] == cliente.id


class TestConsultarClientes:

    def test_listado_orden_descendente(self, client, create_test_cliente):
        ids = [create_test_cliente(f"CI {i}").id for i in range(3)]

        data = client.get("/clientes").json()

        assert [c["id"] for c in data] == sorted(ids, reverse=True)

    def test_listado_excluye_eliminados(self, db_session, create_test_cliente):
        activo = create_test_cliente("CI 1")
        eliminado = create_test_cliente("CI 2")
        ClienteService.eliminar(db_session, eliminado.id)

        clientes = ClienteService.listar(db_session)

        assert [c.id for c in clientes] == [activo.id]

    def test_detalle_incluye_cuentas(self, client, create_test_cliente, create_test_cuenta):
        cliente = create_test_cliente()
        create_test_cuenta(cliente.id, numero="LPZ-000001")
        create_test_cuenta(cliente.id, numero="LPZ-000002")

        response = client.get(f"/clientes/{cliente.id}")

        assert response.status_code == 200
        numeros = {c["numero_cuenta"] for c in response.json()["cuentas"]}
        assert numeros == {"LPZ-000001", "LPZ-000002"}

    def test_detalle_inexistente(self, client):
        assert client.get("/clientes/12345").status_code == 404


class TestActualizarCliente:

    def test_actualizacion_parcial(self, client, create_test_cliente):
        cliente = create_test_cliente()

        response = client.put(f"/clientes/{cliente.id}", json={"nombre": "Pedro", "genero": "Otro"})

        assert response.status_code == 200
        data = response.json()
        assert data["nombre"] == "Pedro"
        assert data["genero"] == "Otro"
        # Campos no enviados quedan igual
        assert data["paterno"] == "Perez"
        assert data["documento_identidad"] == "CI 1234567"
        assert data["fecha_nacimiento"] == "2000-01-15"

    def test_documento_de_otro_cliente_activo(self, client, create_test_cliente):
        create_test_cliente("CI 1")
        segundo = create_test_cliente("CI 2")

        response = client.put(f"/clientes/{segundo.id}", json={"documento_identidad": "CI 1"})

        assert response.status_code == 400
        assert client.get(f"/clientes/{segundo.id}").json()["documento_identidad"] == "CI 2"

    def test_mismo_documento_propio(self, db_session, create_test_cliente):
        cliente = create_test_cliente("CI 1")

        actualizado = ClienteService.actualizar(
            db_session, cliente.id, ClienteUpdate(documento_identidad="CI 1", materno="Quispe")
        )

        assert actualizado.materno == "Quispe"

    def test_documento_de_cliente_eliminado(self, db_session, create_test_cliente):
        eliminado = create_test_cliente("CI 1")
        ClienteService.eliminar(db_session, eliminado.id)
        cliente = create_test_cliente("CI 2")

        actualizado = ClienteService.actualizar(db_session, cliente.id, ClienteUpdate(documento_identidad="CI 1"))

        assert actualizado.documento_identidad == "CI 1"

    def test_inexistente(self, db_session):
        with pytest.raises(NoEncontradoError):
            ClienteService.actualizar(db_session, 999, ClienteUpdate(nombre="Pedro"))


class TestNormalizarGeneros:

    def _insertar_con_genero(self, db_session, documento, genero, eliminado=False):
        cliente = ClienteService.crear(db_session, ClienteCreate(
            nombre="Ana",
            paterno="Lopez",
            materno="Rojas",
            tipo_documento="CI",
            documento_identidad=documento,
            fecha_nacimiento=date(1990, 5, 20),
            genero="F",
        ))
        # Simula datos históricos escritos a mano
        cliente.genero = genero
        db_session.commit()
        if eliminado:
            ClienteService.eliminar(db_session, cliente.id)
        return cliente.id

    def test_mapea_valores_historicos(self, client, db_session):
        ids = {
            "Masculino": self._insertar_con_genero(db_session, "CI 1", "Masculino"),
            " male ": self._insertar_con_genero(db_session, "CI 2", " male "),
            "Femenino": self._insertar_con_genero(db_session, "CI 3", "Femenino"),
            "FEMALE": self._insertar_con_genero(db_session, "CI 4", "FEMALE"),
            "other": self._insertar_con_genero(db_session, "CI 5", "other"),
            "Otro ": self._insertar_con_genero(db_session, "CI 6", "Otro "),
        }

        response = client.get("/clientes/fix-generos")

        assert response.status_code == 200
        assert response.json() == {"ok": True, "actualizados": {"M": 2, "F": 2, "Otro": 2}}
        esperado = {
            "Masculino": "M", " male ": "M",
            "Femenino": "F", "FEMALE": "F",
            "other": "Otro", "Otro ": "Otro",
        }
        for original, cliente_id in ids.items():
            assert db_session.get(DBCliente, cliente_id).genero == esperado[original]

    def test_incluye_clientes_eliminados(self, db_session):
        cliente_id = self._insertar_con_genero(db_session, "CI 9", "Masculino", eliminado=True)

        ClienteService.normalizar_generos(db_session)

        assert db_session.get(DBCliente, cliente_id).genero == "M"

    def test_sin_filas_tambien_es_exitoso(self, client, create_test_cliente):
        create_test_cliente(genero="M")

        response = client.get("/clientes/fix-generos")

        assert response.status_code == 200
        assert response.json() == {"ok": True, "actualizados": {"M": 0, "F": 0, "Otro": 0}}

    def test_valores_desconocidos_no_se_tocan(self, db_session):
        cliente_id = self._insertar_con_genero(db_session, "CI 7", "X")

        ClienteService.normalizar_generos(db_session)

        assert db_session.get(DBCliente, cliente_id).genero == "X"
