"""
Reparación única de los géneros guardados como texto libre
('Masculino', 'Male', 'Femenino', 'Other', ...) -> M / F / Otro.

Uso: python fix_generos.py
"""
import logging

from app.database import SessionLocal
from app.services.cliente_service import ClienteService

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

db = SessionLocal()

try:
    resultado = ClienteService.normalizar_generos(db)
    for genero, cantidad in resultado["actualizados"].items():
        print(f"{genero}: {cantidad} cliente(s) actualizados")
    print("Correcciones aplicadas correctamente.")
finally:
    db.close()
