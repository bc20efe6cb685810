"""Query building shared by every repository.

List endpoints all follow one contract: a conjunction of optional
predicates, a case-insensitive "contains" search over a set of columns,
newest-first ordering, and a total counted over the same predicates
independently of the requested page.
"""

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.models import LOCALES, Base, now
from studyhub.errors import DependencyConflict, ReferentialIntegrityError, UniquenessViolation
from studyhub.schemas.common import Page, PaginationInput

logger = logging.getLogger(__name__)


def locale_columns(model: type[Base], *bases: str) -> list:
    """``locale_columns(Country, "name")`` -> [name_ar, name_en, name_tr, name_ms]."""
    return [getattr(model, f"{base}_{locale}") for base in bases for locale in LOCALES]


def search_clause(term: str | None, columns: Iterable) -> ColumnElement | None:
    """OR of case-insensitive substring matches, or None for an empty term."""
    if term is None:
        return None
    term = term.strip()
    if not term:
        return None
    return or_(*(column.icontains(term, autoescape=True) for column in columns))


def newest_first(model: type[Base]) -> tuple:
    return model.created_at.desc(), model.id.desc()


def build_conditions(*conditions: ColumnElement | None) -> list[ColumnElement]:
    """Drop the filters that were not requested."""
    return [c for c in conditions if c is not None]


async def count_where(session: AsyncSession, model: type[Base], *conditions) -> int:
    query = select(func.count()).select_from(model)
    if conditions:
        query = query.where(*conditions)
    result = await session.execute(query)
    return result.scalar_one()


async def paginate(
    session: AsyncSession,
    model: type[Base],
    conditions: Sequence[ColumnElement],
    params: PaginationInput,
    order_by: tuple | None = None,
) -> Page:
    """Fetch one page of ``model`` rows matching every condition."""
    query: Select = select(model)
    if conditions:
        query = query.where(*conditions)
    query = query.order_by(*(order_by or newest_first(model)))
    query = query.offset(params.offset).limit(params.limit)

    result = await session.execute(query)
    rows = list(result.scalars().all())
    total = await count_where(session, model, *conditions)

    return Page(data=rows, total=total, page=params.page, limit=params.limit)


async def get_one(session: AsyncSession, model: type[Base], *conditions):
    result = await session.execute(select(model).where(*conditions))
    return result.scalar_one_or_none()


async def ensure_exists(session: AsyncSession, model: type[Base], entity_id: int) -> None:
    """Raise ReferentialIntegrityError unless ``model`` has a row with this id."""
    found = await count_where(session, model, model.id == entity_id)
    if not found:
        logger.warning(f"Rejected write: {model.__name__} with id {entity_id} not found")
        raise ReferentialIntegrityError(model.__name__, entity_id)


async def ensure_unique(
    session: AsyncSession,
    model: type[Base],
    field: str,
    value,
    exclude_id: int | None = None,
) -> None:
    """Raise UniquenessViolation if another row already holds ``value``."""
    conditions = [getattr(model, field) == value]
    if exclude_id is not None:
        conditions.append(model.id != exclude_id)
    if await count_where(session, model, *conditions):
        logger.warning(f"Rejected write: duplicate {model.__name__}.{field} '{value}'")
        raise UniquenessViolation(model.__name__, field, value)


async def flush_unique(session: AsyncSession, entity: str, field: str, value) -> None:
    """Flush pending writes, reporting a unique-constraint hit as UniquenessViolation.

    ``ensure_unique`` runs before the write, so a concurrent writer can still
    claim the value first; the database constraint then decides.
    """
    try:
        await session.flush()
    except IntegrityError as exc:
        logger.warning(f"Rejected write: {entity}.{field} '{value}' lost a uniqueness race")
        raise UniquenessViolation(entity, field, value) from exc


async def lock_row(session: AsyncSession, model: type[Base], entity_id: int):
    """Load a row with ``SELECT ... FOR UPDATE`` (a no-op lock on SQLite)."""
    result = await session.execute(
        select(model).where(model.id == entity_id).with_for_update()
    )
    return result.scalar_one_or_none()


async def guard_dependents(
    session: AsyncSession,
    entity: str,
    dependents: Iterable[tuple[str, type[Base], ColumnElement]],
) -> None:
    """Raise DependencyConflict for the first dependent table with rows.

    ``dependents`` yields ``(label, model, condition)`` triples, e.g.
    ``("universities", University, University.country_id == 3)``.
    """
    for label, model, condition in dependents:
        count = await count_where(session, model, condition)
        if count:
            logger.warning(f"Delete of {entity} blocked by {count} {label}")
            raise DependencyConflict(entity, label, count)


def apply_changes(obj: Base, changes: dict) -> Base:
    """Write the present fields onto ``obj`` and refresh ``updated_at``."""
    for name, value in changes.items():
        setattr(obj, name, value)
    obj.updated_at = now()
    return obj
