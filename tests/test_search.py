"""
Tests for catalog search and ranking
"""
from jokoui_mcp.models.schemas.component_catalog import CatalogStore, Category
from jokoui_mcp.services.search import SearchRanker, rank, relevance

from tests.conftest import make_record


def test_no_filters_keeps_catalog_order(catalog_records):
    results = rank(catalog_records)
    assert results == catalog_records


def test_limit_truncates(catalog_records):
    assert len(rank(catalog_records, limit=3)) == 3
    assert rank(catalog_records, limit=3) == catalog_records[:3]


def test_many_records_capped_at_limit():
    records = [make_record(f"card-{i}", Category.APPLICATION) for i in range(25)]
    assert len(rank(records, limit=10)) == 10


def test_query_ranks_exact_then_partial_then_tag(catalog_records):
    results = rank(catalog_records, query="Hero")

    assert [r.id for r in results] == ["hero", "hero-section", "banner"]


def test_relevance_scores():
    hero = make_record("hero", Category.MARKETING)
    hero_section = make_record("hero-section", Category.MARKETING)
    banner = make_record("banner", Category.MARKETING, extra_tags=["hero"])

    assert relevance(hero, "HERO") == 3
    assert relevance(hero_section, "hero") == 2
    assert relevance(banner, "hero") == 1


def test_ties_keep_catalog_order():
    records = [
        make_record("zeta-button", Category.APPLICATION),
        make_record("alpha-button", Category.APPLICATION),
    ]
    results = rank(records, query="button")
    assert [r.id for r in results] == ["zeta-button", "alpha-button"]


def test_query_matches_description_case_insensitively(catalog_records):
    results = rank(catalog_records, query="APPLICATION UI")
    assert {r.category for r in results} == {Category.APPLICATION}


def test_category_filter(catalog_records):
    results = rank(catalog_records, category=Category.MARKETING)
    assert [r.id for r in results] == ["banner", "hero-section", "hero", "pricing_table"]


def test_tags_are_anded_with_substring_match(catalog_records):
    results = rank(catalog_records, tags=["HER", "market"])
    assert [r.id for r in results] == ["banner", "hero-section", "hero"]

    assert rank(catalog_records, tags=["hero", "application"]) == []


def test_filters_are_cumulative(catalog_records):
    results = rank(catalog_records, query="hero", category=Category.MARKETING, tags=["section"])
    assert [r.id for r in results] == ["hero-section"]


def test_query_without_match_is_empty(catalog_records):
    assert rank(catalog_records, query="testimonial") == []


def test_ranker_reads_store(catalog_records):
    store = CatalogStore(catalog_records)
    ranker = SearchRanker(store)

    assert ranker.search(query="pricing")[0].id == "pricing_table"

    store.replace([])
    assert ranker.search(query="pricing") == []
