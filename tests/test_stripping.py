from parsing.classify import classify, AttributeCategory
from parsing.markup import parse_fragment, serialize
from parsing.stripping import strip_attributes
from parsing.tree import iter_elements


def test_strip_keeps_only_preserved_attributes():
    nodes = parse_fragment(
        '<div class="c" data-id="1"><p style="x" onclick="f()" lang="en">Hi</p></div>'
    )
    stats = strip_attributes(nodes)

    assert serialize(nodes) == '<div><p lang="en">Hi</p></div>'
    assert stats.preserved == ["lang"]
    assert stats.styling == ["class", "style"]
    assert stats.data_attributes == ["data-id"]
    assert stats.event_handlers == ["onclick"]
    assert stats.unknown == []


def test_every_remaining_attribute_is_preserved():
    nodes = parse_fragment(
        '<form action="/s" method="post" class="f" x-foo="1">'
        '<input type="text" aria-describedby="h" data-v="1" bgcolor="red" onfocus="g()">'
        '<button id="b" role="button" custom="y">Go</button></form>'
    )
    strip_attributes(nodes)
    for el in iter_elements(nodes):
        for name in el.attrs:
            assert classify(name) is AttributeCategory.PRESERVED


def test_stats_are_deduplicated_and_sorted():
    nodes = parse_fragment(
        '<p class="a" id="x"><span class="b" id="y" title="t" foo="1" bar="2"></span></p>'
        '<p class="c" foo="3"></p>'
    )
    stats = strip_attributes(nodes)
    assert stats.preserved == ["id", "title"]
    assert stats.styling == ["class"]
    assert stats.unknown == ["bar", "foo"]
    assert stats.preserved_count == 2
    assert stats.removed_count == 3


def test_attribute_values_survive_stripping():
    nodes = parse_fragment('<a href="https://example.com?a=1&amp;b=2" class="x">l</a>')
    strip_attributes(nodes)
    assert nodes[0].attrs == {"href": "https://example.com?a=1&b=2"}
