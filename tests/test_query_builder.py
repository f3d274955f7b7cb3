"""Tests for filtered, paginated transaction listing."""

import datetime as dt

import pytest

from app.core.errors import ValidationError
from app.models.enums import TransactionType
from app.schemas.transaction import TransactionFilters
from app.services.query_builder import build_list_query, build_predicates, list_transactions


@pytest.fixture
def ledger(add_tx):
    """A small mixed ledger spread over two months."""
    return [
        add_tx(date="2024-01-05", type="income", category="monitoria", amount="500", budget="500"),
        add_tx(date="2024-01-10", type="expense", category="arriendo", concept="Rent January"),
        add_tx(date="2024-01-20", type="expense", category="mercado", concept="Supermercado"),
        add_tx(date="2024-02-01", type="expense", category="servicios", concept="Luz"),
        add_tx(date="2024-02-03", type="income", category="bonos", concept="parent gift"),
        add_tx(date="2024-02-03", type="expense", category="transporte", concept=None),
    ]


class TestPredicates:
    """Tests for predicate construction."""

    def test_no_filters_means_no_predicates(self):
        assert build_predicates(None) == []
        assert build_predicates(TransactionFilters()) == []

    def test_each_filter_adds_one_predicate(self):
        filters = TransactionFilters(
            type=TransactionType.expense,
            category="merc",
            start_date=dt.date(2024, 1, 1),
            end_date=dt.date(2024, 1, 31),
            search="super",
        )
        assert len(build_predicates(filters)) == 5

    def test_blank_text_filters_are_ignored(self):
        filters = TransactionFilters(category="   ", search="")
        assert filters.category is None
        assert filters.search is None
        assert build_predicates(filters) == []

    def test_filter_values_are_bound_not_inlined(self):
        filters = TransactionFilters(search="'; DROP TABLE transaction; --")
        compiled = build_list_query(filters).compile()
        assert "DROP TABLE" not in str(compiled)
        assert any("DROP TABLE" in str(v) for v in compiled.params.values())


class TestListTransactions:
    """Tests for list_transactions against a real SQLite store."""

    def test_no_filters_returns_everything_newest_first(self, session, ledger):
        page = list_transactions(session)
        assert page.total == 6
        dates = [tx.date for tx in page.rows]
        assert dates == sorted(dates, reverse=True)

    def test_same_date_rows_newest_created_first(self, session, ledger):
        page = list_transactions(session, TransactionFilters(start_date=dt.date(2024, 2, 3)))
        assert [tx.category for tx in page.rows] == ["TRANSPORTE", "BONOS"]

    def test_type_filter(self, session, ledger):
        page = list_transactions(session, TransactionFilters(type=TransactionType.income))
        assert page.total == 2
        assert all(tx.type == TransactionType.income for tx in page.rows)

    def test_category_filter_is_case_insensitive_substring(self, session, ledger):
        page = list_transactions(session, TransactionFilters(category="rcad"))
        assert [tx.category for tx in page.rows] == ["MERCADO"]

    def test_date_bounds_are_inclusive(self, session, ledger):
        filters = TransactionFilters(start_date=dt.date(2024, 1, 10), end_date=dt.date(2024, 2, 1))
        page = list_transactions(session, filters)
        assert sorted(tx.date.isoformat() for tx in page.rows) == ["2024-01-10", "2024-01-20", "2024-02-01"]

    def test_search_matches_category_or_concept(self, session, ledger):
        page = list_transactions(session, TransactionFilters(search="rent"), limit=10, offset=0)
        # "Rent January" and "parent gift" match on concept
        assert sorted(tx.category for tx in page.rows) == ["ARRIENDO", "BONOS"]

    def test_search_hits_category_too(self, session, ledger):
        page = list_transactions(session, TransactionFilters(search="Servi"))
        assert [tx.category for tx in page.rows] == ["SERVICIOS"]

    def test_filters_combine_with_and(self, session, ledger):
        filters = TransactionFilters(type=TransactionType.income, search="rent")
        page = list_transactions(session, filters)
        assert [tx.category for tx in page.rows] == ["BONOS"]

        filters = TransactionFilters(type=TransactionType.income, category="arriendo")
        assert list_transactions(session, filters).total == 0

    def test_like_wildcards_match_literally(self, session, add_tx):
        add_tx(category="ahorro", concept="100% ahorro")
        add_tx(category="cositas", concept="sin porcentaje")
        page = list_transactions(session, TransactionFilters(search="%"))
        assert [tx.category for tx in page.rows] == ["AHORRO"]
        assert list_transactions(session, TransactionFilters(search="_")).total == 0

    def test_accented_category_matches_any_case(self, session, add_tx):
        add_tx(category="educación", concept="Matrícula")
        add_tx(category="salud")

        for filters in (
            TransactionFilters(category="Educación"),
            TransactionFilters(category="ción"),
            TransactionFilters(search="educación"),
            TransactionFilters(search="EDUCACIÓN"),
        ):
            page = list_transactions(session, filters)
            assert [tx.category for tx in page.rows] == ["EDUCACIÓN"]


class TestPagination:
    """Tests for limit/offset and the total count."""

    def test_total_ignores_limit_and_offset(self, session, ledger):
        first = list_transactions(session, limit=2, offset=0)
        second = list_transactions(session, limit=2, offset=2)
        assert first.total == second.total == 6
        assert len(first.rows) == len(second.rows) == 2
        assert {tx.id for tx in first.rows}.isdisjoint({tx.id for tx in second.rows})

    def test_offset_past_the_end(self, session, ledger):
        page = list_transactions(session, limit=10, offset=50)
        assert page.rows == []
        assert page.total == 6

    def test_pages_follow_the_global_order(self, session, ledger):
        everything = [tx.id for tx in list_transactions(session).rows]
        paged = []
        for offset in range(0, 6, 4):
            paged += [tx.id for tx in list_transactions(session, limit=4, offset=offset).rows]
        assert paged == everything

    def test_filtered_total(self, session, ledger):
        page = list_transactions(session, TransactionFilters(type=TransactionType.expense), limit=1)
        assert page.total == 4
        assert len(page.rows) == 1

    def test_negative_limit_rejected(self, session):
        with pytest.raises(ValidationError) as exc_info:
            list_transactions(session, limit=-1)
        assert exc_info.value.field == "limit"

    def test_empty_store(self, session):
        page = list_transactions(session, limit=10, offset=0)
        assert page.rows == []
        assert page.total == 0
