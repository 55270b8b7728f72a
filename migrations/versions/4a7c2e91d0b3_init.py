"""init

Revision ID: 4a7c2e91d0b3
Revises:
Create Date: 2026-10-19 12:40:11.204518

"""

import sqlalchemy as sa
from alembic import op


revision = '4a7c2e91d0b3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), nullable=False, comment='Идентификатор категории'),
        sa.Column('name', sa.String(), nullable=False, comment='Название категории'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'criteria_type',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('is_using', sa.Boolean(), nullable=False, comment='Участвуют ли критерии этого типа в рейтинге'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'course',
        sa.Column('id', sa.Integer(), nullable=False, comment='Идентификатор курса'),
        sa.Column('name', sa.String(), nullable=False, comment='Название курса'),
        sa.Column('description', sa.String(), nullable=True, comment='Описание курса'),
        sa.Column('link', sa.String(), nullable=True, comment='Ссылка на курс'),
        sa.Column('thumbnail', sa.String(), server_default='/images/course_2.jpg', nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=True, comment='Идентификатор автора курса'),
        sa.Column(
            'pfr',
            sa.JSON(),
            nullable=True,
            comment='PFR-профиль курса: код критерия -> agreement/neutral/disagreement',
        ),
        sa.Column('status', sa.Boolean(), nullable=False, comment='Активен ли курс'),
        sa.ForeignKeyConstraint(
            ['category_id'],
            ['category.id'],
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'criteria',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(), nullable=False, comment='Код критерия в PFR-профиле'),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=False, comment='Вес критерия'),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ['type_id'],
            ['criteria_type.id'],
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )
    op.create_table(
        'evaluation',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('course_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('criteria_type', sa.Integer(), nullable=False),
        sa.Column('type', sa.Enum('PFR', 'LIKERT', name='evaluationtype', native_enum=False), nullable=False),
        sa.Column('create_ts', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['course_id'],
            ['course.id'],
        ),
        sa.ForeignKeyConstraint(
            ['criteria_type'],
            ['criteria_type.id'],
        ),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('evaluation')
    op.drop_table('criteria')
    op.drop_table('course')
    op.drop_table('criteria_type')
    op.drop_table('category')
