"""Apply parsed SearchFilters to an in-memory catalog."""

from collections.abc import Iterable, Mapping, Sequence

from ..core.types import CatalogEntity, SearchFilters


def matches(
    entity: CatalogEntity,
    entity_types: Sequence[str],
    filters: SearchFilters,
) -> bool:
    """Whether one entity satisfies every predicate that is set.

    Types use a superset test: each requested type must be among the
    entity's types. The legendary and mythical flags only constrain when
    requested; absent means either.
    """
    if filters.dex_number is not None and entity.id != filters.dex_number:
        return False

    name_query = filters.name_query.strip()
    if name_query and name_query.lower() not in entity.name.lower():
        return False

    if filters.types and not filters.types.issubset(entity_types):
        return False

    if filters.generation_id is not None and entity.generation_id != filters.generation_id:
        return False

    if filters.legendary and not entity.is_legendary:
        return False

    if filters.mythical and not entity.is_mythical:
        return False

    return True


def apply_filters(
    catalog: Iterable[CatalogEntity],
    types_by_entity_id: Mapping[int, Sequence[str]],
    filters: SearchFilters,
) -> list[CatalogEntity]:
    """Entities passing all predicates, in catalog order.

    Args:
        catalog: Species in display order.
        types_by_entity_id: Dex number to ordered type names. Missing ids
            have no types.
        filters: Parsed filters.

    Returns:
        Ordered subsequence of catalog.
    """
    return [
        entity
        for entity in catalog
        if matches(entity, types_by_entity_id.get(entity.id, ()), filters)
    ]
