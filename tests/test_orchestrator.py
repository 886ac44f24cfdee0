import pytest
from lxml import etree

import parsing.markup
import pipeline.orchestrator
import pipeline.stages
from models.config import CleanConfig
from parsing.errors import ParseFailure
from pipeline import run

ALL_OFF = CleanConfig(
    beautify=False,
    normalize_text=False,
    remove_empty_tags=False,
    remove_br_tags=False,
    fix_punctuation=False,
)

EXAMPLE_HTML = """<div class="container" style="background: red;" data-id="123" custom-attr="value">
  <h1 class="title" style="color: blue;" data-track="header" id="main-title">Hello World</h1>
  <p class="text-lg" style="margin: 10px;" data-section="content" lang="en">
    This is a <a href="https://example.com" class="link" target="_blank" rel="noopener" onclick="track()">sample link</a> with some text.<br />
    This line has a break.<br>
    Another line with break.
  </p>
  <span>
    by phone at
    <bdt>+43 6643279880</bdt>
    ,
  </span>
  <p>Contact us at <bdt>email@example.com</bdt> , or call us at ( 555 ) 123-4567 .</p>
  <bdt>
    <span>
      <span>
        <span>
          <bdt></bdt>
        </span>
      </span>
    </span>
  </bdt>
  <form action="/submit" method="post" class="form">
    <div class="form-group">
      <label for="username" class="label">Username:</label><br/>
      <input type="text" name="username" id="username" placeholder="Enter username" required class="input" data-validate="true" />
    </div>
    <div class="empty-wrapper">
      <div class="another-empty">
        <span></span>
      </div>
    </div>
    <button type="submit" id="submit-btn" class="btn btn-primary" onclick="submit()" data-action="submit" disabled>Submit</button>
  </form>
  <img src="/image.jpg" alt="Sample image" width="300" height="200" class="responsive" style="border: 1px solid #ccc;" />
  <div role="button" tabindex="0" aria-label="Interactive element" class="interactive" custom-role="special">Accessible content</div>
</div>"""


def test_default_config_strips_and_beautifies():
    result = run('<div class="c" data-id="1"><p style="x" onclick="f()">Hi</p></div>')

    assert result.cleaned_markup == "<div>\n  <p>Hi</p>\n</div>"
    assert result.stats.styling == ["class", "style"]
    assert result.stats.data_attributes == ["data-id"]
    assert result.stats.event_handlers == ["onclick"]
    assert result.stats.preserved == []
    assert result.stats.unknown == []
    assert result.skipped_stages == []


def test_lone_empty_element_disappears():
    assert run("<span></span>").cleaned_markup == ""
    assert run("<span></span>", CleanConfig(beautify=False)).cleaned_markup == ""


def test_punctuation_fix_on_plain_text():
    assert run("word , next .").cleaned_markup == "word, next."
    config = ALL_OFF.model_copy(update={"fix_punctuation": True})
    assert run("word , next .", config).cleaned_markup == "word, next."


def test_line_breaks_removed_when_enabled():
    config = ALL_OFF.model_copy(update={"remove_br_tags": True})
    result = run("<p>A</p><br><BR /><br  /><p>B</p>", config)
    assert result.cleaned_markup == "<p>A</p><p>B</p>"
    # Disabled by default.
    assert "<br>" in run("<p>A<br>B</p>").cleaned_markup


def test_implicitly_closed_list_items_are_siblings():
    result = run("<ul><li>one<li>two</ul>")
    assert result.cleaned_markup == "<ul>\n  <li>one</li>\n  <li>two</li>\n</ul>"


def test_all_stages_off_only_strips():
    result = run('<div class="c">\n  <p title="t" foo="1">Hi  there</p>\n</div>', ALL_OFF)
    assert result.cleaned_markup == '<div>\n  <p title="t">Hi  there</p>\n</div>'
    assert result.stats.unknown == ["foo"]


def test_blank_input_short_circuits(monkeypatch):
    def explode(markup):
        raise AssertionError("parser must not run for blank input")

    monkeypatch.setattr(pipeline.orchestrator, "parse_fragment", explode)
    result = run("  \n\t ")
    assert result.cleaned_markup == ""
    assert result.stats.model_dump() == {
        "preserved": [],
        "styling": [],
        "unknown": [],
        "data_attributes": [],
        "event_handlers": [],
        "preserved_count": 0,
        "removed_count": 0,
    }


def test_unparseable_input_raises_parse_failure(monkeypatch):
    def reject(*args, **kwargs):
        raise etree.ParserError("garbage")

    monkeypatch.setattr(parsing.markup, "document_fromstring", reject)
    with pytest.raises(ParseFailure):
        run("<div>x</div>")


def test_failing_stage_falls_back_to_its_input(monkeypatch):
    def broken(nodes, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(pipeline.stages, "beautify_nodes", broken)
    result = run('<div class="c"><p>Hi</p></div>')
    assert result.cleaned_markup == "<div><p>Hi</p></div>"
    assert result.skipped_stages == ["beautify"]
    assert result.stats.styling == ["class"]


def test_later_stages_still_run_after_a_failure(monkeypatch):
    def broken(nodes):
        raise RuntimeError("boom")

    monkeypatch.setattr(pipeline.stages, "normalize_text", broken)
    result = run("<div>\n  <span></span>\n  <p>Hi .</p>\n</div>")
    assert result.skipped_stages == ["normalize_text"]
    assert result.cleaned_markup == "<div>\n  <p>Hi.</p>\n</div>"


def test_reference_example_end_to_end():
    result = run(EXAMPLE_HTML)
    out = result.cleaned_markup

    for removed in ("class=", "style=", "data-", "onclick", "custom-attr", "custom-role"):
        assert removed not in out
    assert '<a href="https://example.com" target="_blank" rel="noopener">sample link</a>' in out
    assert '<img src="/image.jpg" alt="Sample image" width="300" height="200">' in out
    assert (
        '<input type="text" name="username" id="username" '
        'placeholder="Enter username" required="">'
    ) in out
    assert '<button type="submit" id="submit-btn" disabled="">Submit</button>' in out
    assert "<span></span>" not in out
    assert "<bdt></bdt>" not in out
    assert "<bdt>+43 6643279880</bdt>" in out
    assert "<bdt>email@example.com</bdt>" in out
    assert ", or call us at (555) 123-4567." in out
    assert result.skipped_stages == []

    stats = result.stats
    assert stats.preserved == [
        "action", "alt", "aria-label", "disabled", "for", "height", "href", "id",
        "lang", "method", "name", "placeholder", "rel", "required", "role", "src",
        "tabindex", "target", "type", "width",
    ]
    assert stats.styling == ["class", "style"]
    assert stats.data_attributes == [
        "data-action", "data-id", "data-section", "data-track", "data-validate",
    ]
    assert stats.event_handlers == ["onclick"]
    assert stats.unknown == ["custom-attr", "custom-role"]
    assert stats.removed_count == 10


def test_runs_are_independent():
    first = run('<p class="a">x</p>')
    second = run('<p id="b">y</p>')
    assert first.stats.styling == ["class"]
    assert second.stats.styling == []
    assert second.stats.preserved == ["id"]
