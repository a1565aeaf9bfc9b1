"""
Pytest configuration and fixtures: small pre-rendered listing pages.
"""
import pytest

from catalog_search.app import build_default_context
from catalog_search.models.settings_model import SettingsModel
from catalog_search.ui.catalog_page import CatalogPage


def plugin_item(name, owner="someone", labels=(), versions=(), desc="A plugin.", with_dropdown=False):
    slug = name.lower().replace(" ", "-")
    labels_html = "".join(f'<span class="label">{l}</span>' for l in labels)
    if with_dropdown and versions:
        rest = "".join(f'<li><span class="compat">{v}</span></li>' for v in versions[1:])
        versions_html = (
            '<div class="version-dropdown">'
            f'<span class="version-current"><span class="grails-compat">{versions[0]}</span></span>'
            f"<ul>{rest}</ul></div>"
        )
    else:
        versions_html = "".join(f'<span class="grails-compat">{v}</span>' for v in versions)
    owner_html = f'<span class="owner">{owner}</span>' if owner is not None else ""
    desc_html = f'<p class="desc">{desc}</p>' if desc is not None else ""
    return (
        '<li class="plugin">'
        f'<h3 class="name"><a href="https://github.com/{owner or "x"}/{slug}">{name}</a></h3>'
        f"{desc_html}{owner_html}{labels_html}{versions_html}"
        f'<button class="copy-btn" data-coords="org.example:{slug}:1.0">Copy</button>'
        "</li>"
    )


def plugin_page(items_html):
    return f"""<!DOCTYPE html>
<html><head><title>Plugins</title></head><body>
<div class="search-box-inline">
  <input id="query" value="">
  <button class="search-clear-btn">x</button>
</div>
<input id="mobile-query" value="">
<select id="grails-version-select">
  <option value="">All versions</option>
  <option value="5">5.x</option>
  <option value="6">6.x</option>
</select>
<nav class="plugins-nav">
  <a class="nav-tab active" data-tab="all">All</a>
  <a class="nav-tab" data-tab="featured">Featured</a>
</nav>
<div id="all" class="tab-content active">
  <h3 class="all-plugins-label">All plugins</h3>
  <h3 class="search-results-label hidden">Results for <span></span></h3>
  <div class="pagination-container"></div>
  <div class="all-plugins plugins"><ul class="plugin-list">{items_html}</ul></div>
  <div class="search-results hidden"></div>
  <div class="no-results hidden">No plugins found</div>
  <div class="pagination-container bottom"></div>
</div>
<div id="featured" class="tab-content"><p>Featured</p></div>
</body></html>"""


GUIDE_PAGE = """<!DOCTYPE html>
<html><body>
<input id="query" value="">
<div class="training">Training</div>
<div class="latest-guides">Latest</div>
<div class="guide-group">
  <ul>
    <li><a class="guide" href="/guides/gorm-basics.html">GORM Basics</a><span class="tag">gorm</span><span class="tag">database</span></li>
    <li><a class="guide" href="/guides/rest-api.html">Building a REST API</a><span class="tag">rest</span></li>
    <li>
      <div class="multi-guide">
        <span class="title">Spring Security Core</span>
        <div class="align-left"><a class="grails-version" href="/guides/5/security.html">5.x</a><span class="tag">auth</span></div>
        <div class="align-left"><a class="grails-version" href="/guides/6/security.html">6.x</a><span class="tag">oauth</span></div>
      </div>
    </li>
  </ul>
</div>
<div class="tags-by-topic">Topics</div>
<div class="guides-suggestion">Suggest</div>
<div class="search-results"></div>
</body></html>"""


def scenario_items():
    return (
        plugin_item("Acme Plugin", owner="bob", labels=("db",), versions=("5.3.1",))
        + plugin_item("Foo", owner="alice", labels=("cache",), versions=("6.0.0",))
    )


def many_items(n):
    return "".join(
        plugin_item(f"Plugin {i:02d}", owner="team", labels=("bulk",), versions=("6.1.0",))
        for i in range(n)
    )


def load(html, kind=None, **settings):
    ctx = build_default_context(html, settings=SettingsModel.from_dict(settings))
    return CatalogPage(ctx, kind=kind).load()


@pytest.fixture
def scenario_page():
    return load(plugin_page(scenario_items()))


@pytest.fixture
def big_page():
    return load(plugin_page(many_items(45)))


@pytest.fixture
def guide_page():
    return load(GUIDE_PAGE)
