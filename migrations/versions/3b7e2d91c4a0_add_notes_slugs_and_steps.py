"""Add recipe ingredient notes, ingredient slugs and recipe steps

Revision ID: 3b7e2d91c4a0
Revises:
Create Date: 2026-10-17 09:12:41.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2d91c4a0'
down_revision = None
branch_labels = None
depends_on = None


def _columns(table):
    return {col['name'] for col in sa.inspect(op.get_bind()).get_columns(table)}


def upgrade():
    # Databases created before notes/slugs existed
    if 'note' not in _columns('recipe_ingredient'):
        with op.batch_alter_table('recipe_ingredient', schema=None) as batch_op:
            batch_op.add_column(sa.Column('note', sa.String(length=200), nullable=True))

    if 'slug' not in _columns('ingredient'):
        with op.batch_alter_table('ingredient', schema=None) as batch_op:
            batch_op.add_column(sa.Column('slug', sa.String(length=200), nullable=True))

    if not sa.inspect(op.get_bind()).has_table('recipe_step'):
        op.create_table(
            'recipe_step',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('recipe_id', sa.String(length=36),
                      sa.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True),
            sa.Column('step_number', sa.Integer(), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
        )


def downgrade():
    op.drop_table('recipe_step')
    with op.batch_alter_table('ingredient', schema=None) as batch_op:
        batch_op.drop_column('slug')
    with op.batch_alter_table('recipe_ingredient', schema=None) as batch_op:
        batch_op.drop_column('note')
