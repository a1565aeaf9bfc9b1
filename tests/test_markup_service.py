from bs4 import BeautifulSoup

from catalog_search.models.record_model import MultiGuide, PluginRecord, SingleGuide, VersionVariant
from catalog_search.services.markup_service import (
    filter_summary, render_guide_group, render_plugins,
)


def test_render_plugins_reinjects_markup_verbatim():
    recs = [PluginRecord(name="A", rendered_markup='<h3 class="name">A</h3>'),
            PluginRecord(name="B", rendered_markup='<h3 class="name">B</h3>')]
    html = render_plugins(recs)
    assert html == ('<ul class="plugin-list"><li class="plugin"><h3 class="name">A</h3></li>'
                    '<li class="plugin"><h3 class="name">B</h3></li></ul>')


def test_render_plugins_empty():
    assert render_plugins([]) == '<ul class="plugin-list"></ul>'


def test_render_guide_group_filters_multi_guide_versions():
    sec = MultiGuide(title="Spring Security Core", versions=[
        VersionVariant("5.x", "/5.html", ["auth"]),
        VersionVariant("6.x", "/6.html", ["oauth"]),
    ])
    soup = BeautifulSoup(render_guide_group([sec], "oauth"), "html.parser")
    assert soup.h2.get_text() == "Guides Filtered by: oauth"
    assert [a["href"] for a in soup.select("a.grails-version")] == ["/6.html"]

    soup = BeautifulSoup(render_guide_group([sec], "security"), "html.parser")
    assert len(soup.select("a.grails-version")) == 2


def test_render_guide_group_single_guide_escapes_text():
    g = SingleGuide(href="/g.html", title="<GORM> & friends", tags=["db"])
    html = render_guide_group([g], "gorm")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one("a.guide").get_text() == "<GORM> & friends"
    assert "&lt;GORM&gt;" in html
    assert soup.select_one("span.tag")["style"] == "display: none"


def test_filter_summary():
    assert filter_summary("spring", "", "Framework") == '"spring"'
    assert filter_summary("", "6", "Framework") == "Framework 6.x"
    assert filter_summary("spring", "5", "Grails") == '"spring" + Grails 5.x'
    assert filter_summary("", "", "Framework") == ""
