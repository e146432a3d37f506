#aqui se el __init__.py para importar las clases y funciones necesarias
from .base import Base
from .enums import GeneroEnum, TipoCuentaEnum, MonedaEnum, TipoMovimientoEnum # Importa los enums
from .cliente import Cliente # Importa el modelo Cliente
from .cuenta import Cuenta # Importa el modelo Cuenta
from .movimiento import Movimiento # Importa el modelo Movimiento
