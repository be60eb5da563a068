from enum import Enum


class UserRoleEnum(str, Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"

class EnrollmentStatusEnum(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

class PaymentStatusEnum(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"

class ProgramCompletionStatusEnum(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"

class BlogStatusEnum(str, Enum):
    CREATED = "created"
    IN_MODERATION = "in_moderation"
    PUBLISHED = "published"
    ARCHIVED = "archived"

class ProgramTypeEnum(str, Enum):
    CERTIFICATE = "certificate"
    DEGREE = "degree"
    SHORT_COURSE = "short_course"


# Database type names shared by models and migrations
USER_ROLE_TYPE = "user_role"
ENROLLMENT_STATUS_TYPE = "enrollment_status"
PAYMENT_STATUS_TYPE = "payment_status"
PROGRAM_COMPLETION_STATUS_TYPE = "program_completion_status"
BLOG_STATUS_TYPE = "blog_status"
PROGRAM_TYPE_TYPE = "program_type"

UPDATED_AT_FUNCTION = "update_updated_at_column"

# Data dictionary entries for the PostgreSQL enum types
TYPE_COMMENTS = {
    USER_ROLE_TYPE: "Defines possible user roles in the system",
    ENROLLMENT_STATUS_TYPE: "Defines possible statuses for program enrollments",
    PAYMENT_STATUS_TYPE: "Defines possible statuses for payments",
    PROGRAM_COMPLETION_STATUS_TYPE: "Defines possible statuses for program completions",
    BLOG_STATUS_TYPE: "Defines possible statuses for blog posts",
    PROGRAM_TYPE_TYPE: "Defines possible types of educational programs",
}
