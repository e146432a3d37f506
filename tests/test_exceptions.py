"""Tests de la jerarquía de errores de dominio."""

from app.exceptions import BancoError, ConflictoError, NoEncontradoError, SaldoInsuficienteError


class TestJerarquiaDeErrores:

    def test_todos_heredan_de_banco_error(self) -> None:
        for error in (NoEncontradoError, ConflictoError, SaldoInsuficienteError):
            assert issubclass(error, BancoError)

    def test_banco_error_es_exception(self) -> None:
        assert isinstance(BancoError("test"), Exception)

    def test_mensaje(self) -> None:
        assert str(SaldoInsuficienteError("Saldo insuficiente")) == "Saldo insuficiente"
