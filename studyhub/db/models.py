"""Content database models (PostgreSQL).

Every translatable text field is stored as four parallel columns, one per
site locale (``_ar``, ``_en``, ``_tr``, ``_ms``), instead of a separate
translation table.
"""

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

LOCALES = ("ar", "en", "tr", "ms")


def now() -> datetime:
    """Server-local timestamp used for created_at / updated_at."""
    return datetime.now()


class Base(DeclarativeBase):
    pass


# --- Enums ---


class StudyLevel(str, enum.Enum):
    DIPLOMA = "DIPLOMA"
    BACHELOR = "BACHELOR"
    MASTER = "MASTER"
    PHD = "PHD"


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    PARTIAL_SUPERVISOR = "PARTIAL_SUPERVISOR"


class LanguageCode(str, enum.Enum):
    AR = "ar"
    EN = "en"
    TR = "tr"
    MS = "ms"


class Status(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class InquiryStatus(str, enum.Enum):
    NEW = "NEW"
    CONTACTED = "CONTACTED"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"


def _enum(enum_cls: type[enum.Enum], name: str) -> Enum:
    # Persist the value ("ar"), not the member name ("AR")
    return Enum(enum_cls, name=name, values_callable=lambda cls: [m.value for m in cls])


# --- Mixins ---


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=now)


class SeoMixin:
    meta_title_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_title_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_title_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_title_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_description_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_description_ms: Mapped[str | None] = mapped_column(Text, nullable=True)


# --- Models ---


class Country(SeoMixin, TimestampMixin, Base):
    """A study destination."""

    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_ar: Mapped[str] = mapped_column(Text)
    name_en: Mapped[str] = mapped_column(Text)
    name_tr: Mapped[str] = mapped_column(Text)
    name_ms: Mapped[str] = mapped_column(Text)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[Status] = mapped_column(_enum(Status, "status"), default=Status.ACTIVE, index=True)


class University(SeoMixin, TimestampMixin, Base):
    __tablename__ = "universities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_ar: Mapped[str] = mapped_column(Text)
    name_en: Mapped[str] = mapped_column(Text)
    name_tr: Mapped[str] = mapped_column(Text)
    name_ms: Mapped[str] = mapped_column(Text)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    country_id: Mapped[int] = mapped_column(ForeignKey("countries.id"), index=True)
    global_ranking: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    local_ranking: Mapped[int | None] = mapped_column(Integer, nullable=True)
    teaching_language_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    teaching_language_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    teaching_language_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    teaching_language_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    gallery_images: Mapped[list | None] = mapped_column(JSON, nullable=True)
    status: Mapped[Status] = mapped_column(_enum(Status, "status"), default=Status.ACTIVE, index=True)


class Major(SeoMixin, TimestampMixin, Base):
    __tablename__ = "majors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_ar: Mapped[str] = mapped_column(Text)
    name_en: Mapped[str] = mapped_column(Text)
    name_tr: Mapped[str] = mapped_column(Text)
    name_ms: Mapped[str] = mapped_column(Text)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    future_opportunities_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    future_opportunities_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    future_opportunities_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    future_opportunities_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[Status] = mapped_column(_enum(Status, "status"), default=Status.ACTIVE, index=True)


class UniversityMajor(TimestampMixin, Base):
    """A major as offered by one university (levels, tuition, duration)."""

    __tablename__ = "university_majors"
    __table_args__ = (
        UniqueConstraint("university_id", "major_id", name="university_majors_unique"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    university_id: Mapped[int] = mapped_column(
        ForeignKey("universities.id", ondelete="CASCADE"), index=True
    )
    major_id: Mapped[int] = mapped_column(ForeignKey("majors.id"), index=True)
    study_levels: Mapped[list] = mapped_column(JSON)
    tuition_fee_min: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    tuition_fee_max: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    duration_years: Mapped[int | None] = mapped_column(Integer, nullable=True)
    requirements_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    requirements_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    requirements_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    requirements_ms: Mapped[str | None] = mapped_column(Text, nullable=True)


class Article(SeoMixin, TimestampMixin, Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title_ar: Mapped[str] = mapped_column(Text)
    title_en: Mapped[str] = mapped_column(Text)
    title_tr: Mapped[str] = mapped_column(Text)
    title_ms: Mapped[str] = mapped_column(Text)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    content_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    excerpt_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    excerpt_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    excerpt_tr: Mapped[str | None] = mapped_column(Text, nullable=True)
    excerpt_ms: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    country_id: Mapped[int | None] = mapped_column(
        ForeignKey("countries.id"), nullable=True, index=True
    )
    major_id: Mapped[int | None] = mapped_column(ForeignKey("majors.id"), nullable=True, index=True)
    status: Mapped[Status] = mapped_column(_enum(Status, "status"), default=Status.ACTIVE, index=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, index=True)


class StudentInquiry(TimestampMixin, Base):
    """A lead captured from a public contact form."""

    __tablename__ = "student_inquiries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), index=True)
    phone: Mapped[str] = mapped_column(String(50))
    whatsapp: Mapped[str | None] = mapped_column(String(50), nullable=True)
    desired_country: Mapped[str | None] = mapped_column(String(255), nullable=True)
    study_level: Mapped[StudyLevel | None] = mapped_column(
        _enum(StudyLevel, "study_level"), nullable=True
    )
    desired_major: Mapped[str | None] = mapped_column(String(255), nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    source_page: Mapped[str | None] = mapped_column(String(500), nullable=True)
    language_code: Mapped[LanguageCode] = mapped_column(
        _enum(LanguageCode, "language_code"), index=True
    )
    status: Mapped[InquiryStatus] = mapped_column(
        _enum(InquiryStatus, "inquiry_status"), default=InquiryStatus.NEW, index=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class User(TimestampMixin, Base):
    """An admin panel account. Never physically deleted."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    full_name: Mapped[str] = mapped_column(String(255))
    role: Mapped[UserRole] = mapped_column(_enum(UserRole, "user_role"), index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    last_login: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)


class FAQ(TimestampMixin, Base):
    __tablename__ = "faqs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_ar: Mapped[str] = mapped_column(Text)
    question_en: Mapped[str] = mapped_column(Text)
    question_tr: Mapped[str] = mapped_column(Text)
    question_ms: Mapped[str] = mapped_column(Text)
    answer_ar: Mapped[str] = mapped_column(Text)
    answer_en: Mapped[str] = mapped_column(Text)
    answer_tr: Mapped[str] = mapped_column(Text)
    answer_ms: Mapped[str] = mapped_column(Text)
    order_index: Mapped[int] = mapped_column(Integer, default=0, index=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    status: Mapped[Status] = mapped_column(_enum(Status, "status"), default=Status.ACTIVE, index=True)


class Setting(TimestampMixin, Base):
    """Key-value site setting. ``value`` may itself hold JSON."""

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    value: Mapped[str] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
