import pytest

from catalog_search.models.filter_model import FilterOutcome, FilterState
from catalog_search.models.record_model import MultiGuide, PluginRecord, SingleGuide, VersionVariant
from catalog_search.services.filter_service import (
    FilterEngine, GuideStrategy, PluginStrategy, facet_match, owner_match, strategy_for,
    tag_match, title_match,
)


ACME = PluginRecord(name="Acme Plugin", owner="bob", labels=["db"], framework_versions=["5.3.1"])
FOO = PluginRecord(name="Foo", owner="alice", labels=["cache"], framework_versions=["6.0.0"])
NAMELESS = PluginRecord(name=None, owner=None, labels=[], framework_versions=["6.0.0"])
RECORDS = [ACME, FOO, NAMELESS]


@pytest.fixture
def engine():
    return FilterEngine(PluginStrategy())


# ---- predicates ----

def test_title_match_substring_is_case_insensitive():
    assert title_match("Spring Security Core", "SECURITY")
    assert not title_match("Spring Security Core", "hibernate")


def test_title_match_all_terms():
    assert title_match("Spring Security Core", "security core")
    assert title_match("Spring Security Core", "core spring")
    assert not title_match("Spring Security Core", "core zzz")


def test_title_match_none_title():
    assert not title_match(None, "anything")


def test_owner_match():
    assert owner_match("Alice", "lic")
    assert not owner_match(None, "lic")
    assert not owner_match("bob", "alice")


def test_tag_match():
    assert tag_match(["Database", "cache"], "data")
    assert not tag_match([], "data")


@pytest.mark.parametrize("versions, facet, expected", [
    (["5.3.1"], "5", True),
    (["52.0"], "5", False),
    (["5"], "5", True),
    (["4.0.0", "6.1.2"], "6", True),
    ([], "6", False),
    (["52.0"], "", True),
    ([], "", True),
])
def test_facet_match(versions, facet, expected):
    assert facet_match(versions, facet) is expected


# ---- engine ----

def test_scenario_query_only(engine):
    assert engine.match(RECORDS, "plugin") == [ACME]


def test_scenario_facet_only(engine):
    assert engine.match(RECORDS[:2], "", "6") == [FOO]


def test_scenario_no_match(engine):
    result = engine.evaluate(RECORDS, FilterState(query="zzz"))
    assert result.outcome is FilterOutcome.MATCHED
    assert result.records == []
    assert result.is_empty


def test_owner_and_label_matches(engine):
    assert engine.match(RECORDS, "alice") == [FOO]
    assert engine.match(RECORDS, "db") == [ACME]


def test_query_and_facet_are_anded(engine):
    assert engine.match(RECORDS, "plugin", "6") == []
    assert engine.match(RECORDS, "foo", "6") == [FOO]


def test_evaluate_reset_when_nothing_active(engine):
    assert engine.evaluate(RECORDS, FilterState(query="   ")).outcome is FilterOutcome.RESET


def test_evaluate_short_query_leaves_view_unchanged(engine):
    result = engine.evaluate(RECORDS, FilterState(query="p"))
    assert result.outcome is FilterOutcome.UNCHANGED
    assert result.records == []


def test_evaluate_short_query_ignored_with_facet(engine):
    result = engine.evaluate(RECORDS, FilterState(query="z", facet="6"))
    assert result.outcome is FilterOutcome.MATCHED
    assert result.query == ""
    assert result.records == [FOO, NAMELESS]


def test_evaluate_uses_mobile_query_when_primary_empty(engine):
    result = engine.evaluate(RECORDS, FilterState(query="", mobile_query=" acme "))
    assert result.records == [ACME]
    assert result.query == "acme"


def test_evaluate_is_idempotent_and_order_stable(engine):
    state = FilterState(query="o")
    state.facet = "6"
    first = engine.evaluate(RECORDS, state).records
    second = engine.evaluate(RECORDS, state).records
    assert first == second
    assert [RECORDS.index(r) for r in first] == sorted(RECORDS.index(r) for r in first)


@pytest.mark.parametrize("query", ["pl", "o ", "acme plugin", "ca", "zz", "bob"])
def test_match_returns_subsequence_without_duplicates(engine, query):
    out = engine.match(RECORDS, query)
    assert len({id(r) for r in out}) == len(out)
    positions = [next(i for i, r in enumerate(RECORDS) if r is o) for o in out]
    assert positions == sorted(positions)


def test_null_name_never_matches_query(engine):
    assert NAMELESS not in engine.match(RECORDS, "o")


# ---- guides ----

def test_guide_strategy_single_and_multi():
    gorm = SingleGuide(href="/g.html", title="GORM Basics", tags=["database"])
    sec = MultiGuide(title="Spring Security Core", versions=[
        VersionVariant("5.x", "/5.html", ["auth"]),
        VersionVariant("6.x", "/6.html", ["oauth"]),
    ])
    engine = FilterEngine(GuideStrategy())
    assert engine.match([gorm, sec], "data") == [gorm]
    assert engine.match([gorm, sec], "oauth") == [sec]
    assert engine.match([gorm, sec], "security core") == [sec]


def test_guide_strategy_ignores_facet():
    gorm = SingleGuide(href="/g.html", title="GORM Basics", tags=[])
    engine = FilterEngine(GuideStrategy())
    assert engine.evaluate([gorm], FilterState(facet="6")).outcome is FilterOutcome.RESET
    assert engine.match([gorm], "gorm", "6") == [gorm]


def test_strategy_for_unknown_kind():
    with pytest.raises(ValueError):
        strategy_for("videos")
