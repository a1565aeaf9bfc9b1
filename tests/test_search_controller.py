from catalog_search.models.filter_model import FilterOutcome
from catalog_search.ui.regions import DEFAULT, HEADING, NO_RESULTS, RESULTS

from conftest import load, plugin_page, scenario_items


def _visible(page):
    reg = page.registry
    return {name for name in (DEFAULT, RESULTS, NO_RESULTS) if reg.is_visible(name)}


def _result_names(page):
    results = page.registry.first(RESULTS)
    return [h.get_text(strip=True) for h in results.select("li.plugin .name")]


def test_initial_state_is_default(scenario_page):
    assert _visible(scenario_page) == {DEFAULT}
    assert not scenario_page.registry.is_visible(HEADING)


def test_query_shows_matching_results(scenario_page):
    scenario_page.ctx.bus.query_edited.emit("plugin")
    assert _visible(scenario_page) == {RESULTS}
    assert _result_names(scenario_page) == ["Acme Plugin"]
    heading = scenario_page.registry.first(HEADING)
    assert scenario_page.registry.is_visible(HEADING)
    assert heading.span.get_text() == '"plugin"'


def test_facet_only_filter(scenario_page):
    scenario_page.ctx.bus.facet_selected.emit("6")
    assert _result_names(scenario_page) == ["Foo"]
    assert scenario_page.registry.first(HEADING).span.get_text() == "Framework 6.x"
    selected = scenario_page.ctx.document.select("#grails-version-select option[selected]")
    assert [o["value"] for o in selected] == ["6"]


def test_query_and_facet_heading():
    page = load(plugin_page(scenario_items()), framework_label="Grails")
    page.controller.on_facet_selected("5")
    page.controller.on_query_edited("acme")
    assert page.registry.first(HEADING).span.get_text() == '"acme" + Grails 5.x'


def test_no_results_state(scenario_page):
    counts = []
    scenario_page.ctx.bus.results_changed.connect(counts.append)
    scenario_page.controller.on_query_edited("plugin")
    scenario_page.controller.on_query_edited("zzz")

    assert _visible(scenario_page) == {NO_RESULTS}
    assert not scenario_page.registry.is_visible(HEADING)
    assert scenario_page.registry.first(RESULTS).contents == []
    assert all(m.element.find_all("a") == [] for m in scenario_page.registry.pagination_mounts)
    assert counts == [1, 0]


def test_short_query_leaves_view_unchanged(scenario_page):
    scenario_page.controller.on_query_edited("plugin")
    handle = scenario_page.ctx.active_paginator
    scenario_page.controller.on_query_edited("p")
    assert scenario_page.controller.last_result.outcome is FilterOutcome.UNCHANGED
    assert _visible(scenario_page) == {RESULTS}
    assert _result_names(scenario_page) == ["Acme Plugin"]
    assert scenario_page.ctx.active_paginator is handle


def test_clearing_query_restores_default(big_page):
    big_page.controller.on_query_edited("plugin 4")
    assert _visible(big_page) == {RESULTS}

    big_page.controller.on_query_edited("")
    assert _visible(big_page) == {DEFAULT}
    assert big_page.registry.first(RESULTS).contents == []
    assert not big_page.registry.is_visible(HEADING)
    listing = big_page.registry.default_list
    assert len(listing.find_all("li", class_="plugin")) == 20
    for mount in big_page.registry.pagination_mounts:
        assert [a.get_text() for a in mount.element.find_all("a")] == ["1", "2", "3"]


def test_search_results_are_paginated(big_page):
    big_page.controller.on_query_edited("plugin")
    results = big_page.registry.first(RESULTS)
    assert len(results.select("ul.plugin-list > li.plugin")) == 20
    top = big_page.registry.pagination_mounts[0]
    big_page.ctx.events.click(top.element.find_all("a")[2])
    assert len(results.select("ul.plugin-list > li.plugin")) == 5


def test_has_value_and_clear_button(scenario_page):
    ctrl = scenario_page.controller
    ctrl.on_query_edited("acme")
    assert "has-value" in ctrl.search_box["class"]
    assert ctrl.query_input["value"] == "acme"

    assert scenario_page.ctx.events.click(ctrl.clear_button)
    assert "has-value" not in (ctrl.search_box.get("class") or [])
    assert ctrl.query_input["value"] == ""
    assert _visible(scenario_page) == {DEFAULT}


def test_mobile_query_mirrors_primary(scenario_page):
    scenario_page.ctx.bus.mobile_query_edited.emit("alice")
    assert _result_names(scenario_page) == ["Foo"]
    scenario_page.ctx.bus.query_edited.emit("acme")
    assert _result_names(scenario_page) == ["Acme Plugin"]


def test_missing_optional_inputs_are_skipped():
    html = plugin_page(scenario_items())
    html = html.replace('<input id="mobile-query" value="">', "")
    html = html.replace('id="grails-version-select"', 'id="other-select"')
    page = load(html)
    assert page.controller.mobile_input is None
    assert page.controller.facet_select is None
    page.ctx.bus.facet_selected.emit("6")
    page.ctx.bus.mobile_query_edited.emit("alice")
    assert _visible(page) == {DEFAULT}


def test_separate_pages_do_not_share_state():
    a = load(plugin_page(scenario_items()))
    b = load(plugin_page(scenario_items()))
    a.controller.on_query_edited("zzz")
    assert _visible(a) == {NO_RESULTS}
    assert _visible(b) == {DEFAULT}
    assert b.ctx.state.query == ""


# ---- guide pages ----

def test_guide_search_and_reset(guide_page):
    ctrl = guide_page.controller
    ctrl.on_query_edited("oauth")
    results = guide_page.registry.first(RESULTS)
    assert results.h2.get_text() == "Guides Filtered by: oauth"
    assert [a["href"] for a in results.select("a.grails-version")] == ["/guides/6/security.html"]
    assert _visible(guide_page) == {RESULTS}
    assert guide_page.registry.first(DEFAULT)["style"] == "display: none"

    ctrl.on_query_edited("")
    assert _visible(guide_page) == {DEFAULT}
    assert results.contents == []


def test_guide_no_results_message(guide_page):
    guide_page.controller.on_query_edited("zzz")
    results = guide_page.registry.first(RESULTS)
    assert results.h2.get_text() == "No results found"
    assert not guide_page.registry.is_visible(DEFAULT)
