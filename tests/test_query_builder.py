"""Tests for SoQL query construction."""

from datetime import date

import pytest

from app.services.query_builder import (
    ALL_FIELDS,
    DEFAULT_FILTERS,
    FILTERED_FIELDS,
    REDUCED_FIELDS,
    QueryBuilder,
    QuerySpec,
    build_query,
    date_clause,
)

DAY = date(2025, 4, 18)


class TestFieldSets:
    """Tests for the named field sets."""

    def test_all_fields_is_empty(self):
        assert ALL_FIELDS == ()

    def test_reduced_has_ten_unique_fields(self):
        assert len(REDUCED_FIELDS) == 10
        assert len(set(REDUCED_FIELDS)) == 10

    def test_filtered_has_twenty_unique_fields(self):
        assert len(FILTERED_FIELDS) == 20
        assert len(set(FILTERED_FIELDS)) == 20

    def test_reduced_is_subset_of_filtered(self):
        assert set(REDUCED_FIELDS) <= set(FILTERED_FIELDS)


class TestSelect:
    """Tests for the $select expression."""

    def test_empty_fields_selects_all(self):
        assert build_query([], DAY).select == "*"

    def test_reduced_fields_selected_in_order(self):
        query = build_query(REDUCED_FIELDS, DAY)
        assert query.select.split(",") == list(REDUCED_FIELDS)

    def test_custom_order_preserved(self):
        query = build_query(["urlproceso", "entidad"], DAY)
        assert query.select == "urlproceso,entidad"


class TestWhere:
    """Tests for the $where expression."""

    def test_contains_all_fixed_clauses(self):
        where = build_query(ALL_FIELDS, DAY).where
        for clause in DEFAULT_FILTERS:
            assert clause in where

    def test_fixed_clauses_values(self):
        where = build_query(ALL_FIELDS, DAY).where
        assert "adjudicado = 'No'" in where
        assert "precio_base > 500000000" in where
        assert "modalidad_de_contratacion != 'Contratación directa'" in where
        assert "codigo_principal_de_categoria LIKE '%811015%'" in where

    def test_date_clause_appended_last(self):
        where = build_query(ALL_FIELDS, DAY).where
        assert where.endswith("fecha_de_publicacion_del >= '2025-04-18T00:00:00.000'")

    def test_clauses_joined_with_and(self):
        where = build_query(ALL_FIELDS, DAY).where
        assert where.count(" AND ") == len(DEFAULT_FILTERS)

    def test_date_clause_helper(self):
        assert date_clause(date(2024, 1, 5)) == "fecha_de_publicacion_del >= '2024-01-05T00:00:00.000'"


class TestPaging:
    """Tests for order, limit and offset."""

    def test_defaults(self):
        query = build_query(FILTERED_FIELDS, DAY)
        assert query.order == "precio_base DESC"
        assert query.limit == 1000
        assert query.offset == 0

    def test_to_params(self):
        params = build_query(["entidad"], DAY).to_params()
        assert params == {
            "$where": build_query(["entidad"], DAY).where,
            "$select": "entidad",
            "$order": "precio_base DESC",
            "$limit": 1000,
            "$offset": 0,
        }


class TestQueryBuilder:
    """Tests for explicitly configured builders."""

    def test_custom_filters(self):
        builder = QueryBuilder(base_filters=("fase = 'Presentación de oferta'",))
        query = builder.build_query([], DAY)
        assert query.where == (
            "fase = 'Presentación de oferta' AND "
            "fecha_de_publicacion_del >= '2025-04-18T00:00:00.000'"
        )

    def test_no_filters_only_date(self):
        query = QueryBuilder(base_filters=()).build_query([], DAY)
        assert query.where == "fecha_de_publicacion_del >= '2025-04-18T00:00:00.000'"

    def test_builds_do_not_share_state(self):
        builder = QueryBuilder()
        first = builder.build_query([], date(2025, 1, 1))
        second = builder.build_query([], date(2025, 1, 2))
        assert "2025-01-01" not in second.where
        assert builder.base_filters == DEFAULT_FILTERS
        assert first.where != second.where

    def test_query_spec_is_frozen(self):
        query = build_query([], DAY)
        with pytest.raises(AttributeError):
            query.limit = 5

    def test_returns_query_spec(self):
        assert isinstance(build_query([], DAY), QuerySpec)
