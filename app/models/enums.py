from enum import Enum

class GeneroEnum(str, Enum): # Usamos str, enum.Enum
    M = "M"
    F = "F"
    Otro = "Otro"


class TipoCuentaEnum(str, Enum):
    AHORRO = "AHORRO"
    CORRIENTE = "CORRIENTE"


class MonedaEnum(str, Enum):
    BOB = "BOB"
    USD = "USD"


class TipoMovimientoEnum(str, Enum):
    DEPOSITO = "DEPOSITO"
    RETIRO = "RETIRO"
