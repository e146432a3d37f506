"""Crear tablas clientes, cuentas y movimientos

Revision ID: 4b1e7c2d9a10
Revises: 
Create Date: 2026-10-19 10:12:41.118305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e7c2d9a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('clientes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(length=120), nullable=False),
        sa.Column('paterno', sa.String(length=120), nullable=False),
        sa.Column('materno', sa.String(length=120), nullable=False),
        sa.Column('tipo_documento', sa.String(length=30), nullable=False),
        sa.Column('documento_identidad', sa.String(length=40), nullable=False),
        sa.Column('fecha_nacimiento', sa.Date(), nullable=False),
        sa.Column('genero', sa.String(length=20), nullable=False),
        sa.Column('fecha_creacion', sa.TIMESTAMP(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('deleted_at', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_clientes_id'), 'clientes', ['id'], unique=False)
    op.create_index('uq_clientes_documento_activo', 'clientes', ['documento_identidad'], unique=True,
                    postgresql_where=sa.text('deleted_at IS NULL'),
                    sqlite_where=sa.text('deleted_at IS NULL'))

    op.create_table('cuentas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('numero_cuenta', sa.String(length=40), nullable=False),
        sa.Column('tipo', sa.String(length=20), nullable=False),
        sa.Column('saldo', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('moneda', sa.String(length=10), nullable=False),
        sa.Column('cliente_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['cliente_id'], ['clientes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('numero_cuenta')
    )
    op.create_index(op.f('ix_cuentas_id'), 'cuentas', ['id'], unique=False)
    op.create_index(op.f('ix_cuentas_cliente_id'), 'cuentas', ['cliente_id'], unique=False)

    op.create_table('movimientos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tipo', sa.String(length=20), nullable=False),
        sa.Column('monto', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('descripcion', sa.String(length=255), nullable=True),
        sa.Column('cuenta_id', sa.Integer(), nullable=False),
        sa.Column('creado_en', sa.TIMESTAMP(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['cuenta_id'], ['cuentas.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_movimientos_id'), 'movimientos', ['id'], unique=False)
    op.create_index(op.f('ix_movimientos_cuenta_id'), 'movimientos', ['cuenta_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_movimientos_cuenta_id'), table_name='movimientos')
    op.drop_index(op.f('ix_movimientos_id'), table_name='movimientos')
    op.drop_table('movimientos')
    op.drop_index(op.f('ix_cuentas_cliente_id'), table_name='cuentas')
    op.drop_index(op.f('ix_cuentas_id'), table_name='cuentas')
    op.drop_table('cuentas')
    op.drop_index('uq_clientes_documento_activo', table_name='clientes')
    op.drop_index(op.f('ix_clientes_id'), table_name='clientes')
    op.drop_table('clientes')
