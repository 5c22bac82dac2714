"""initial band inventory schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'roster',
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('graduation_year', sa.Integer(), nullable=False),
        sa.Column('instrument_played', sa.String(length=128), nullable=True),
        sa.PrimaryKeyConstraint('student_id'),
        sa.UniqueConstraint('full_name', 'graduation_year', name='uq_roster_name_year'),
    )
    op.create_index(op.f('ix_roster_student_id'), 'roster', ['student_id'], unique=False)
    op.create_index(op.f('ix_roster_graduation_year'), 'roster', ['graduation_year'], unique=False)

    op.create_table(
        'instruments',
        sa.Column('instrument_id', sa.Integer(), nullable=False),
        sa.Column('instrument_name', sa.String(length=128), nullable=False),
        sa.Column('instrument_number', sa.String(length=64), nullable=False),
        sa.Column('locker_number', sa.String(length=32), nullable=True),
        sa.Column('locker_code', sa.String(length=32), nullable=True),
        sa.Column('condition_notes', sa.String(length=2000), nullable=True),
        sa.PrimaryKeyConstraint('instrument_id'),
        sa.UniqueConstraint('instrument_name', 'instrument_number', name='uq_instruments_name_number'),
    )
    op.create_index(op.f('ix_instruments_instrument_id'), 'instruments', ['instrument_id'], unique=False)

    op.create_table(
        'uniforms',
        sa.Column('uniform_id', sa.Integer(), nullable=False),
        sa.Column('item_type', sa.String(length=128), nullable=False),
        sa.Column('item_number', sa.String(length=64), nullable=False),
        sa.Column('size', sa.String(length=32), nullable=True),
        sa.Column('status', sa.String(length=64), nullable=True),
        sa.PrimaryKeyConstraint('uniform_id'),
    )
    op.create_index(op.f('ix_uniforms_uniform_id'), 'uniforms', ['uniform_id'], unique=False)
    op.create_index(op.f('ix_uniforms_item_number'), 'uniforms', ['item_number'], unique=True)

    op.create_table(
        'assignments',
        sa.Column('assignment_id', sa.Integer(), nullable=False),
        sa.Column('student_fk', sa.Integer(), nullable=False),
        sa.Column('instrument_fk', sa.Integer(), nullable=True),
        sa.Column('uniform_fk', sa.Integer(), nullable=True),
        sa.Column('date_out', sa.Date(), nullable=False),
        sa.Column('date_in', sa.Date(), nullable=True),
        sa.CheckConstraint(
            'instrument_fk IS NOT NULL OR uniform_fk IS NOT NULL',
            name='ck_assignments_item_present',
        ),
        sa.ForeignKeyConstraint(['student_fk'], ['roster.student_id']),
        sa.ForeignKeyConstraint(['instrument_fk'], ['instruments.instrument_id']),
        sa.ForeignKeyConstraint(['uniform_fk'], ['uniforms.uniform_id']),
        sa.PrimaryKeyConstraint('assignment_id'),
    )
    op.create_index(op.f('ix_assignments_assignment_id'), 'assignments', ['assignment_id'], unique=False)
    op.create_index(op.f('ix_assignments_student_fk'), 'assignments', ['student_fk'], unique=False)
    op.create_index(op.f('ix_assignments_instrument_fk'), 'assignments', ['instrument_fk'], unique=False)
    op.create_index(op.f('ix_assignments_uniform_fk'), 'assignments', ['uniform_fk'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_assignments_uniform_fk'), table_name='assignments')
    op.drop_index(op.f('ix_assignments_instrument_fk'), table_name='assignments')
    op.drop_index(op.f('ix_assignments_student_fk'), table_name='assignments')
    op.drop_index(op.f('ix_assignments_assignment_id'), table_name='assignments')
    op.drop_table('assignments')
    op.drop_index(op.f('ix_uniforms_item_number'), table_name='uniforms')
    op.drop_index(op.f('ix_uniforms_uniform_id'), table_name='uniforms')
    op.drop_table('uniforms')
    op.drop_index(op.f('ix_instruments_instrument_id'), table_name='instruments')
    op.drop_table('instruments')
    op.drop_index(op.f('ix_roster_graduation_year'), table_name='roster')
    op.drop_index(op.f('ix_roster_student_id'), table_name='roster')
    op.drop_table('roster')
