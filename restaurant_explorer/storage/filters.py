"""
Restaurant filter criteria and the parameterized WHERE-clause builder.

Semantics (shared by every storage backend):
    - Four independent facets: neighborhood, cuisine, price range, dietary options.
    - An empty facet places no constraint.
    - Values inside a facet are OR-ed; facets are AND-ed.
    - neighborhood / cuisine / dietary options: case-insensitive substring match.
      Case folding differs per backend: `matches` uses Python's Unicode-aware
      `str.lower`, while PostgreSQL ILIKE folds according to the database's
      LC_CTYPE. Under a "C" locale only ASCII letters fold, so "nørrebro" does
      not match "NØRREBRO" there; use a UTF-8 locale (e.g. en_US.UTF-8) to keep
      both backends in agreement.
    - price range: exact match on the L/M/H code.
    - No facets at all: every restaurant matches.

The SQL builder never interpolates a value into the statement text; values only
travel as bound parameters.

LLM Prompt Example:
    "Show how to build a dynamic AND-of-ORs WHERE clause for PostgreSQL with
    psycopg placeholders so that user input can never change the SQL text."
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from ..models import PriceRange, Restaurant

# (column / Restaurant attribute, criteria field, exact match?)
_FACETS = (
    ("neighborhood", "neighborhoods", False),
    ("cuisine", "cuisines", False),
    ("price_range", "price_ranges", True),
    ("dietary_options", "dietary_options", False),
)


def _escape_like(value: str) -> str:
    """Escape LIKE metacharacters so the value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class RestaurantFilter:
    neighborhoods: Tuple[str, ...] = ()
    cuisines: Tuple[str, ...] = ()
    price_ranges: Tuple[PriceRange, ...] = ()
    dietary_options: Tuple[str, ...] = ()

    @classmethod
    def from_params(
        cls,
        neighborhood: Optional[Iterable[str]] = None,
        cuisine: Optional[Iterable[str]] = None,
        price_range: Optional[Iterable[Any]] = None,
        dietary_options: Optional[Iterable[str]] = None,
    ) -> "RestaurantFilter":
        """
        Build criteria from optional multi-value query parameters.

        Raises:
            ValueError: If a price range is not one of L, M, H.
        """
        return cls(
            neighborhoods=tuple(neighborhood or ()),
            cuisines=tuple(cuisine or ()),
            price_ranges=tuple(PriceRange(p) for p in (price_range or ())),
            dietary_options=tuple(dietary_options or ()),
        )

    def is_empty(self) -> bool:
        return not any(getattr(self, field) for _col, field, _exact in _FACETS)

    def matches(self, restaurant: Restaurant) -> bool:
        """In-memory equivalent of the SQL predicate built by `build_where_clause`."""
        for attr, field, exact in _FACETS:
            values = getattr(self, field)
            if not values:
                continue
            actual = getattr(restaurant, attr)
            if exact:
                hit = actual in values
            else:
                haystack = (actual or "").lower()
                hit = any(v.lower() in haystack for v in values)
            if not hit:
                return False
        return True


def build_where_clause(criteria: RestaurantFilter) -> Tuple[str, List[Any]]:
    """
    Translate criteria into a WHERE clause with psycopg `%s` placeholders.

    Returns:
        Tuple[str, List[Any]]: ("WHERE (...) AND (...)", params), or ("", [])
        when no facet is set.

    Example:
        >>> build_where_clause(RestaurantFilter(neighborhoods=("Nørrebro",),
        ...                                     price_ranges=(PriceRange.MEDIUM,)))
        ('WHERE (neighborhood ILIKE %s) AND (price_range = %s)', ['%Nørrebro%', 'M'])
    """
    conditions: List[str] = []
    params: List[Any] = []

    for column, field, exact in _FACETS:
        values = getattr(criteria, field)
        if not values:
            continue
        if exact:
            conditions.append("(" + " OR ".join(f"{column} = %s" for _ in values) + ")")
            params.extend(PriceRange(v).value for v in values)
        else:
            conditions.append("(" + " OR ".join(f"{column} ILIKE %s" for _ in values) + ")")
            params.extend(f"%{_escape_like(v)}%" for v in values)

    if not conditions:
        return "", []
    return "WHERE " + " AND ".join(conditions), params
