"""create fitness tracking schema

Revision ID: 3a7c9e2f1b04
Revises: 
Create Date: 2025-11-01 17:02:43.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e2f1b04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Uuid(), primary_key=True),
            sa.Column('email', sa.String(length=120), nullable=False, unique=True),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
        )

    if not insp.has_table('users_profiles'):
        op.create_table(
            'users_profiles',
            sa.Column('id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
            sa.Column('name', sa.Text(), nullable=False, server_default=''),
            sa.Column('goal_type', sa.String(length=20), nullable=False, server_default='maintenance'),
            sa.Column('daily_calorie_target', sa.Integer(), nullable=False, server_default='2000'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
            sa.CheckConstraint(
                "goal_type IN ('weight_loss', 'muscle_gain', 'maintenance')",
                name='ck_users_profiles_goal_type',
            ),
        )

    if not insp.has_table('food_items'):
        op.create_table(
            'food_items',
            sa.Column('id', sa.Uuid(), primary_key=True),
            sa.Column('name', sa.Text(), nullable=False),
            sa.Column('calories', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('protein', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('carbs', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('fats', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('barcode', sa.Text(), nullable=True, unique=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        )
        op.create_index('ix_food_items_barcode', 'food_items', ['barcode'])

    if not insp.has_table('meal_logs'):
        op.create_table(
            'meal_logs',
            sa.Column('id', sa.Uuid(), primary_key=True),
            sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('food_id', sa.Uuid(), sa.ForeignKey('food_items.id', ondelete='CASCADE'), nullable=False),
            sa.Column('servings', sa.Numeric(8, 2), nullable=False, server_default='1'),
            sa.Column('category', sa.String(length=20), nullable=False),
            sa.Column('logged_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
            sa.CheckConstraint(
                "category IN ('breakfast', 'lunch', 'dinner', 'snack')",
                name='ck_meal_logs_category',
            ),
        )
        op.create_index('ix_meal_logs_user_id', 'meal_logs', ['user_id'])
        op.create_index('ix_meal_logs_logged_at', 'meal_logs', ['logged_at'])

    if not insp.has_table('weight_logs'):
        op.create_table(
            'weight_logs',
            sa.Column('id', sa.Uuid(), primary_key=True),
            sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('weight', sa.Numeric(6, 2), nullable=False),
            sa.Column('date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        )
        op.create_index('ix_weight_logs_user_id', 'weight_logs', ['user_id'])
        op.create_index('ix_weight_logs_date', 'weight_logs', ['date'])

    if not insp.has_table('measurements'):
        op.create_table(
            'measurements',
            sa.Column('id', sa.Uuid(), primary_key=True),
            sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
            sa.Column('waist', sa.Numeric(6, 2), nullable=True),
            sa.Column('chest', sa.Numeric(6, 2), nullable=True),
            sa.Column('arms', sa.Numeric(6, 2), nullable=True),
            sa.Column('hips', sa.Numeric(6, 2), nullable=True),
            sa.Column('thighs', sa.Numeric(6, 2), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        )
        op.create_index('ix_measurements_user_id', 'measurements', ['user_id'])
        op.create_index('ix_measurements_date', 'measurements', ['date'])

    if not insp.has_table('ai_recommendations'):
        op.create_table(
            'ai_recommendations',
            sa.Column('id', sa.Uuid(), primary_key=True),
            sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('recommendation_text', sa.Text(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        )
        op.create_index('ix_ai_recommendations_user_id', 'ai_recommendations', ['user_id'])
        op.create_index('ix_ai_recommendations_date', 'ai_recommendations', ['date'])


def downgrade():
    # Drop in reverse dependency order
    for tbl in (
        'ai_recommendations',
        'measurements',
        'weight_logs',
        'meal_logs',
        'food_items',
        'users_profiles',
        'users',
    ):
        op.drop_table(tbl)
