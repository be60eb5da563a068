"""create learning platform schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from app.core.timestamps import (
    DROP_TRIGGER_SQL,
    POSTGRES_DROP_FUNCTION_SQL,
    POSTGRES_FUNCTION_SQL,
    trigger_sql,
)

revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TIMESTAMPED_TABLES = [
    'courses', 'modules', 'programs', 'lessons', 'teaching_groups', 'users', 'enrollments',
    'payments', 'program_completions', 'certificates', 'quizzes', 'exercises', 'discussions', 'blogs',
]

STATUS_TYPES = {
    'enrollment_status': ('active', 'pending', 'cancelled', 'completed'),
    'payment_status': ('pending', 'paid', 'failed', 'refunded'),
    'program_completion_status': ('active', 'completed', 'pending', 'cancelled'),
    'blog_status': ('created', 'in_moderation', 'published', 'archived'),
}

STANDALONE_TYPES = {
    'user_role': ('student', 'teacher', 'admin'),
    'program_type': ('certificate', 'degree', 'short_course'),
}

TYPE_COMMENTS = {
    'user_role': 'Defines possible user roles in the system',
    'enrollment_status': 'Defines possible statuses for program enrollments',
    'payment_status': 'Defines possible statuses for payments',
    'program_completion_status': 'Defines possible statuses for program completions',
    'blog_status': 'Defines possible statuses for blog posts',
    'program_type': 'Defines possible types of educational programs',
}


def _status(name):
    return sa.Enum(*STATUS_TYPES[name], name=name, create_constraint=True)


def _json():
    return sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    ]


def _deleted_at(table):
    return sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True,
                     comment=f'Soft delete timestamp to mark {table} as deleted without removing them')


def upgrade() -> None:
    conn = op.get_bind()
    is_postgres = conn.dialect.name == 'postgresql'

    if is_postgres:
        op.execute(POSTGRES_FUNCTION_SQL)
        for name, values in STANDALONE_TYPES.items():
            postgresql.ENUM(*values, name=name).create(conn, checkfirst=True)

    op.create_table(
        'courses',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, comment='The name of the course'),
        sa.Column('description', sa.Text(), nullable=True, comment='Detailed description of the course content'),
        *_timestamps(),
        _deleted_at('courses'),
        sa.PrimaryKeyConstraint('id', name='courses_pkey'),
        comment='Stores information about individual courses',
    )
    op.create_table(
        'modules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, comment='The name of the module'),
        sa.Column('description', sa.Text(), nullable=True, comment='Detailed description of the module content'),
        *_timestamps(),
        _deleted_at('modules'),
        sa.PrimaryKeyConstraint('id', name='modules_pkey'),
        comment='Stores information about modules that group related courses',
    )
    op.create_table(
        'programs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, comment='The name of the program'),
        sa.Column('price', sa.Numeric(10, 2), nullable=False, comment='The price of the program in decimal format'),
        sa.Column('program_type', sa.String(255), nullable=True,
                  comment='The type of program (certificate, degree, short_course)'),
        *_timestamps(),
        sa.CheckConstraint('price > 0', name=op.f('programs_price_check')),
        sa.PrimaryKeyConstraint('id', name='programs_pkey'),
        comment='Stores information about educational programs that students can enroll in',
    )

    op.create_table(
        'course_modules',
        sa.Column('course_id', sa.Integer(), nullable=False, comment='Foreign key reference to the courses table'),
        sa.Column('module_id', sa.Integer(), nullable=False, comment='Foreign key reference to the modules table'),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], name='course_modules_course_id_fkey'),
        sa.ForeignKeyConstraint(['module_id'], ['modules.id'], name='course_modules_module_id_fkey'),
        sa.PrimaryKeyConstraint('course_id', 'module_id', name='course_modules_pkey'),
        comment='Junction table for the many-to-many relationship between courses and modules',
    )
    op.create_index('idx_course_modules_course_id', 'course_modules', ['course_id'])
    op.create_index('idx_course_modules_module_id', 'course_modules', ['module_id'])

    op.create_table(
        'program_modules',
        sa.Column('module_id', sa.Integer(), nullable=False, comment='Foreign key reference to the modules table'),
        sa.Column('program_id', sa.Integer(), nullable=False, comment='Foreign key reference to the programs table'),
        sa.ForeignKeyConstraint(['module_id'], ['modules.id'], name='program_modules_module_id_fkey'),
        sa.ForeignKeyConstraint(['program_id'], ['programs.id'], name='program_modules_program_id_fkey'),
        sa.PrimaryKeyConstraint('module_id', 'program_id', name='program_modules_pkey'),
        comment='Junction table for the many-to-many relationship between modules and programs',
    )
    op.create_index('idx_program_modules_module_id', 'program_modules', ['module_id'])
    op.create_index('idx_program_modules_program_id', 'program_modules', ['program_id'])

    op.create_table(
        'lessons',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, comment='The name of the lesson'),
        sa.Column('content', sa.Text(), nullable=True, comment='The textual content of the lesson'),
        sa.Column('video_url', sa.String(255), nullable=True, comment='URL to the video content for the lesson'),
        sa.Column('position', sa.Integer(), nullable=True, comment='The order of the lesson within its course'),
        sa.Column('course_id', sa.Integer(), nullable=True, comment='Foreign key reference to the courses table'),
        *_timestamps(),
        _deleted_at('lessons'),
        sa.CheckConstraint('position > 0', name=op.f('lessons_position_check')),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], name='lessons_course_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='lessons_pkey'),
        comment='Stores individual learning units that make up courses',
    )
    op.create_index('idx_lessons_course_id', 'lessons', ['course_id'])

    op.create_table(
        'teaching_groups',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('slug', sa.String(100), nullable=False,
                  comment='A unique identifier for the teaching group used in URLs'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='teaching_groups_pkey'),
        sa.UniqueConstraint('slug', name='teaching_groups_slug_key'),
        comment='Stores information about teaching groups that teachers can be assigned to',
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False, comment='The name for the user account'),
        sa.Column('email', sa.String(255), nullable=False,
                  comment='The email address for the user account, must be unique'),
        sa.Column('password_hash', sa.String(255), nullable=True, comment='The hashed password for the user account'),
        sa.Column('role', sa.String(50), nullable=False,
                  comment='User role determining permissions: student, teacher, or admin'),
        sa.Column('teaching_group_id', sa.Integer(), nullable=True,
                  comment='Foreign key reference to the teaching_groups table for teachers'),
        *_timestamps(),
        _deleted_at('users'),
        sa.ForeignKeyConstraint(['teaching_group_id'], ['teaching_groups.id'], name='users_teaching_group_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='users_pkey'),
        sa.UniqueConstraint('email', name='users_email_key'),
        comment='Stores all user accounts including students, teachers, and administrators',
    )
    op.create_index('idx_users_teaching_group_id', 'users', ['teaching_group_id'])
    op.create_index('idx_users_email', 'users', ['email'])
    op.create_index('idx_users_role', 'users', ['role'])

    op.create_table(
        'enrollments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False, comment='Foreign key reference to the users table'),
        sa.Column('program_id', sa.Integer(), nullable=False, comment='Foreign key reference to the programs table'),
        sa.Column('status', _status('enrollment_status'), nullable=False,
                  comment='Current status of the enrollment: active, pending, cancelled, or completed'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='enrollments_user_id_fkey'),
        sa.ForeignKeyConstraint(['program_id'], ['programs.id'], name='enrollments_program_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='enrollments_pkey'),
        sa.UniqueConstraint('user_id', 'program_id', name='enrollments_user_id_program_id_key'),
        comment='Tracks user enrollment in educational programs',
    )
    op.create_index('idx_enrollments_user_id', 'enrollments', ['user_id'])
    op.create_index('idx_enrollments_program_id', 'enrollments', ['program_id'])
    op.create_index('idx_enrollments_status', 'enrollments', ['status'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('enrollment_id', sa.Integer(), nullable=False,
                  comment='Foreign key reference to the enrollments table'),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False, comment='The payment amount in decimal format'),
        sa.Column('status', _status('payment_status'), nullable=False,
                  comment='Current status of the payment: pending, paid, failed, or refunded'),
        sa.Column('paid_at', sa.DateTime(timezone=True), nullable=True,
                  comment='The date and time when the payment was processed'),
        *_timestamps(),
        sa.CheckConstraint('amount > 0', name=op.f('payments_amount_check')),
        sa.ForeignKeyConstraint(['enrollment_id'], ['enrollments.id'], name='payments_enrollment_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='payments_pkey'),
        comment='Tracks payment information for program enrollments',
    )
    op.create_index('idx_payments_enrollment_id', 'payments', ['enrollment_id'])
    op.create_index('idx_payments_status', 'payments', ['status'])
    op.create_index('idx_payments_paid_at', 'payments', ['paid_at'])

    op.create_table(
        'program_completions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False, comment='Foreign key reference to the users table'),
        sa.Column('program_id', sa.Integer(), nullable=False, comment='Foreign key reference to the programs table'),
        sa.Column('status', _status('program_completion_status'), nullable=False,
                  comment='Current status of the program completion: active, completed, pending, or cancelled'),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=True,
                  comment='The date and time when the user started the program'),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True,
                  comment='The date and time when the user completed the program'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='program_completions_user_id_fkey'),
        sa.ForeignKeyConstraint(['program_id'], ['programs.id'], name='program_completions_program_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='program_completions_pkey'),
        sa.UniqueConstraint('user_id', 'program_id', name='program_completions_user_id_program_id_key'),
        comment='Tracks user progress and completion of educational programs',
    )
    op.create_index('idx_program_completions_user_id', 'program_completions', ['user_id'])
    op.create_index('idx_program_completions_program_id', 'program_completions', ['program_id'])
    op.create_index('idx_program_completions_status', 'program_completions', ['status'])

    op.create_table(
        'certificates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False, comment='Foreign key reference to the users table'),
        sa.Column('program_id', sa.Integer(), nullable=False, comment='Foreign key reference to the programs table'),
        sa.Column('url', sa.String(255), nullable=False, comment='URL to access the certificate'),
        sa.Column('issued_at', sa.DateTime(timezone=True), nullable=False,
                  comment='The date and time when the certificate was issued'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='certificates_user_id_fkey'),
        sa.ForeignKeyConstraint(['program_id'], ['programs.id'], name='certificates_program_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='certificates_pkey'),
        sa.UniqueConstraint('user_id', 'program_id', name='certificates_user_id_program_id_key'),
        comment='Stores certificates issued to users upon program completion',
    )
    op.create_index('idx_certificates_user_id', 'certificates', ['user_id'])
    op.create_index('idx_certificates_program_id', 'certificates', ['program_id'])
    op.create_index('idx_certificates_issued_at', 'certificates', ['issued_at'])

    op.create_table(
        'quizzes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('lesson_id', sa.Integer(), nullable=False, comment='Foreign key reference to the lessons table'),
        sa.Column('name', sa.String(255), nullable=False, comment='The name of the quiz'),
        sa.Column('content', _json(), nullable=False,
                  comment='JSONB structure containing quiz questions and answers'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['lesson_id'], ['lessons.id'], name='quizzes_lesson_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='quizzes_pkey'),
        comment='Stores quizzes associated with lessons',
    )
    op.create_index('idx_quizzes_lesson_id', 'quizzes', ['lesson_id'])

    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('lesson_id', sa.Integer(), nullable=False, comment='Foreign key reference to the lessons table'),
        sa.Column('name', sa.String(255), nullable=False, comment='The name of the exercise'),
        sa.Column('url', sa.String(255), nullable=False, comment='URL to access the exercise content'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['lesson_id'], ['lessons.id'], name='exercises_lesson_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='exercises_pkey'),
        comment='Stores exercises associated with lessons',
    )
    op.create_index('idx_exercises_lesson_id', 'exercises', ['lesson_id'])

    op.create_table(
        'discussions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('lesson_id', sa.Integer(), nullable=False, comment='Foreign key reference to the lessons table'),
        sa.Column('text', _json(), nullable=False, comment='JSONB structure containing discussion content'),
        sa.Column('user_id', sa.Integer(), nullable=False, comment='Foreign key reference to the users table'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['lesson_id'], ['lessons.id'], name='discussions_lesson_id_fkey'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='discussions_user_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='discussions_pkey'),
        comment='Stores discussions associated with lessons',
    )
    op.create_index('idx_discussions_lesson_id', 'discussions', ['lesson_id'])
    op.create_index('idx_discussions_user_id', 'discussions', ['user_id'])

    op.create_table(
        'blogs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False, comment='Foreign key reference to the users table'),
        sa.Column('name', sa.String(255), nullable=False, comment='The name of the blog'),
        sa.Column('content', sa.Text(), nullable=False, comment='The content of the blog'),
        sa.Column('status', _status('blog_status'), nullable=False,
                  comment='Current status of the blog: created, in_moderation, published, or archived'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='blogs_user_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='blogs_pkey'),
        comment='Stores blogs created by users',
    )
    op.create_index('idx_blogs_user_id', 'blogs', ['user_id'])
    op.create_index('idx_blogs_status', 'blogs', ['status'])

    for table in TIMESTAMPED_TABLES:
        op.execute(trigger_sql(table, conn.dialect.name))

    if is_postgres:
        for name, comment in TYPE_COMMENTS.items():
            op.execute(f"COMMENT ON TYPE {name} IS '{comment}'")


def downgrade() -> None:
    conn = op.get_bind()
    drop_trigger = DROP_TRIGGER_SQL[conn.dialect.name]
    for table in TIMESTAMPED_TABLES:
        op.execute(drop_trigger % {'table': table})

    op.drop_index('idx_blogs_status', table_name='blogs')
    op.drop_index('idx_blogs_user_id', table_name='blogs')
    op.drop_table('blogs')
    op.drop_index('idx_discussions_user_id', table_name='discussions')
    op.drop_index('idx_discussions_lesson_id', table_name='discussions')
    op.drop_table('discussions')
    op.drop_index('idx_exercises_lesson_id', table_name='exercises')
    op.drop_table('exercises')
    op.drop_index('idx_quizzes_lesson_id', table_name='quizzes')
    op.drop_table('quizzes')
    op.drop_index('idx_certificates_issued_at', table_name='certificates')
    op.drop_index('idx_certificates_program_id', table_name='certificates')
    op.drop_index('idx_certificates_user_id', table_name='certificates')
    op.drop_table('certificates')
    op.drop_index('idx_program_completions_status', table_name='program_completions')
    op.drop_index('idx_program_completions_program_id', table_name='program_completions')
    op.drop_index('idx_program_completions_user_id', table_name='program_completions')
    op.drop_table('program_completions')
    op.drop_index('idx_payments_paid_at', table_name='payments')
    op.drop_index('idx_payments_status', table_name='payments')
    op.drop_index('idx_payments_enrollment_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('idx_enrollments_status', table_name='enrollments')
    op.drop_index('idx_enrollments_program_id', table_name='enrollments')
    op.drop_index('idx_enrollments_user_id', table_name='enrollments')
    op.drop_table('enrollments')
    op.drop_index('idx_users_role', table_name='users')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_index('idx_users_teaching_group_id', table_name='users')
    op.drop_table('users')
    op.drop_table('teaching_groups')
    op.drop_index('idx_lessons_course_id', table_name='lessons')
    op.drop_table('lessons')
    op.drop_index('idx_program_modules_program_id', table_name='program_modules')
    op.drop_index('idx_program_modules_module_id', table_name='program_modules')
    op.drop_table('program_modules')
    op.drop_index('idx_course_modules_module_id', table_name='course_modules')
    op.drop_index('idx_course_modules_course_id', table_name='course_modules')
    op.drop_table('course_modules')
    op.drop_table('programs')
    op.drop_table('modules')
    op.drop_table('courses')

    if conn.dialect.name == 'postgresql':
        for name in list(STATUS_TYPES) + list(STANDALONE_TYPES):
            postgresql.ENUM(name=name).drop(conn, checkfirst=True)
        op.execute(POSTGRES_DROP_FUNCTION_SQL)
