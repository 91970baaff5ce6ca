"""SoQL query construction for the SECOP II dataset."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

# Fixed filters applied to every query
DEFAULT_FILTERS: tuple[str, ...] = (
    "adjudicado = 'No'",
    "precio_base > 500000000",
    "modalidad_de_contratacion != 'Contratación directa'",
    "codigo_principal_de_categoria LIKE '%811015%'",
)

DATE_FIELD = "fecha_de_publicacion_del"

# Empty field set selects every column
ALL_FIELDS: tuple[str, ...] = ()

# Fields sent to the LLM, kept small to bound prompt size
REDUCED_FIELDS: tuple[str, ...] = (
    "id_del_proceso",
    "referencia_del_proceso",
    "entidad",
    "nombre_del_procedimiento",
    "descripci_n_del_procedimiento",
    "fecha_de_publicacion_del",
    "precio_base",
    "modalidad_de_contratacion",
    "tipo_de_contrato",
    "urlproceso",
)

FILTERED_FIELDS: tuple[str, ...] = REDUCED_FIELDS + (
    "nit_entidad",
    "departamento_entidad",
    "ciudad_entidad",
    "fase",
    "estado_del_procedimiento",
    "duracion",
    "unidad_de_duracion",
    "fecha_de_recepcion_de",
    "codigo_principal_de_categoria",
    "adjudicado",
)


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """Immutable SoQL query for one request."""

    where: str
    select: str
    order: str
    limit: int
    offset: int

    def to_params(self) -> dict[str, str | int]:
        """Render as Socrata query-string parameters."""
        return {
            "$where": self.where,
            "$select": self.select,
            "$order": self.order,
            "$limit": self.limit,
            "$offset": self.offset,
        }


def date_clause(on_date: date) -> str:
    """Publication-date predicate for records published on or after ``on_date``."""
    return f"{DATE_FIELD} >= '{on_date.isoformat()}T00:00:00.000'"


@dataclass(frozen=True)
class QueryBuilder:
    """Builds queries from a fixed filter set plus a per-request date.

    Filter values are interpolated literally. Only the date is variable and
    it is always a validated ``datetime.date``.
    """

    base_filters: tuple[str, ...] = DEFAULT_FILTERS
    order: str = "precio_base DESC"
    limit: int = 1000
    offset: int = 0

    def build_query(self, fields: Sequence[str], on_date: date) -> QuerySpec:
        """Build the query selecting ``fields`` (all when empty) from ``on_date``."""
        clauses = [*self.base_filters, date_clause(on_date)]
        return QuerySpec(
            where=" AND ".join(clauses),
            select=",".join(fields) if fields else "*",
            order=self.order,
            limit=self.limit,
            offset=self.offset,
        )


default_builder = QueryBuilder()


def build_query(fields: Sequence[str], on_date: date) -> QuerySpec:
    """Build a query with the default filters."""
    return default_builder.build_query(fields, on_date)
