"""create productos, reglas_precio and existencias

Revision ID: 0001
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'productos',
        sa.Column('id_producto', sa.String(36), primary_key=True),
        sa.Column('nombre', sa.String(100), nullable=False),
        sa.Column('descripcion', sa.String(500), nullable=True),
        sa.Column('categoria', sa.String(50), nullable=False),
        sa.Column('precio_base', sa.Float, nullable=False),
        sa.Column('fecha_creacion', sa.DateTime, nullable=True),
        sa.Column('fecha_actualizacion', sa.DateTime, nullable=True),
    )
    op.create_table(
        'reglas_precio',
        sa.Column('id_regla', sa.String(36), primary_key=True),
        sa.Column('categoria', sa.String(50), nullable=False),
        sa.Column('porcentaje_descuento', sa.Float, nullable=False),
        sa.Column('activa', sa.Boolean, nullable=False),
        sa.Column('descripcion', sa.String(200), nullable=True),
    )
    op.create_index('ix_reglas_precio_categoria', 'reglas_precio', ['categoria'])
    # Existencias de la fuente de inventario local
    op.create_table(
        'existencias',
        sa.Column('id_producto', sa.String(36), sa.ForeignKey('productos.id_producto'), primary_key=True),
        sa.Column('cantidad', sa.Integer, nullable=False),
        sa.Column('fecha_actualizacion', sa.DateTime, nullable=True),
    )


def downgrade() -> None:
    op.drop_table('existencias')
    op.drop_index('ix_reglas_precio_categoria', table_name='reglas_precio')
    op.drop_table('reglas_precio')
    op.drop_table('productos')
