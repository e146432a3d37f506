"""Jerarquía de errores de dominio del back-office bancario."""


class BancoError(Exception):
    """Error base de la aplicación."""


class NoEncontradoError(BancoError):
    """El cliente o la cuenta referenciada no existe (o el cliente fue eliminado)."""


class ConflictoError(BancoError):
    """Violación de unicidad: documento de identidad o número de cuenta."""


class SaldoInsuficienteError(BancoError):
    """Retiro mayor al saldo disponible de la cuenta."""
