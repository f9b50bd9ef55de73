"""Tests renderer rich text — règles par défaut, assets, liens, surcharges, tolérance."""
import pytest

from tempo_site.rich_text import (
    DEFAULT_RENDER_NODE, Document, Node, NodeType, RenderOptions,
    build_render_node, render_rich_text,
)


# ── Helpers ──────────────────────────────────────────────────────────────────

def text(value, marks=()):
    return {"nodeType": "text", "value": value, "marks": [{"type": m} for m in marks], "data": {}}


def node(node_type, *content, data=None):
    return {"nodeType": node_type, "data": data or {}, "content": list(content)}


def doc(*content):
    return {"nodeType": "document", "data": {}, "content": list(content)}


def asset(title=None, description=None, url=None, content_type=None, with_file=True):
    fields = {}
    if title is not None:
        fields["title"] = title
    if description is not None:
        fields["description"] = description
    if with_file:
        fields["file"] = {"url": url, "contentType": content_type}
    return node("embedded-asset-block", data={"target": {"sys": {"id": "a1", "type": "Asset"}, "fields": fields}})


# ── Document absent ──────────────────────────────────────────────────────────

def test_none_returns_empty():
    assert render_rich_text(None) == ""


def test_empty_document_returns_empty():
    assert render_rich_text(doc()) == ""


def test_non_dict_document_returns_empty():
    assert render_rich_text("pas un document") == ""


# ── Blocs ────────────────────────────────────────────────────────────────────

def test_paragraph():
    assert render_rich_text(doc(node("paragraph", text("hi")))) == "<p>hi</p>"


def test_heading_level_3():
    assert render_rich_text(doc(node("heading-3", text("Title")))) == "<h3>Title</h3>"


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
def test_all_heading_levels(level):
    html = render_rich_text(doc(node(f"heading-{level}", text("T"))))
    assert html == f"<h{level}>T</h{level}>"


def test_ordered_list_preserves_order():
    d = doc(node("ordered-list",
                 node("list-item", text("a")),
                 node("list-item", text("b"))))
    assert render_rich_text(d) == "<ol><li>a</li><li>b</li></ol>"


def test_unordered_list():
    d = doc(node("unordered-list", node("list-item", node("paragraph", text("x")))))
    assert render_rich_text(d) == "<ul><li><p>x</p></li></ul>"


def test_quote():
    assert render_rich_text(doc(node("blockquote", node("paragraph", text("q"))))) == \
        "<blockquote><p>q</p></blockquote>"


def test_hr_ignores_children():
    assert render_rich_text(doc(node("hr", text("ignored")))) == "<hr />"


def test_top_level_nodes_concatenated_without_separator():
    d = doc(node("paragraph", text("a")), node("hr"), node("paragraph", text("b")))
    assert render_rich_text(d) == "<p>a</p><hr /><p>b</p>"


def test_table_defaults():
    d = doc(node("table", node("table-row",
                               node("table-header-cell", node("paragraph", text("h"))),
                               node("table-cell", node("paragraph", text("c"))))))
    assert render_rich_text(d) == "<table><tr><th><p>h</p></th><td><p>c</p></td></tr></table>"


# ── Texte + marks ────────────────────────────────────────────────────────────

def test_text_is_escaped():
    assert render_rich_text(doc(node("paragraph", text("a < b & c")))) == "<p>a &lt; b &amp; c</p>"


def test_quotes_escaped_as_entities():
    assert render_rich_text(doc(node("paragraph", text("it's \"ok\"")))) == \
        "<p>it&#39;s &quot;ok&quot;</p>"


def test_bold_mark():
    assert render_rich_text(doc(node("paragraph", text("x", ["bold"])))) == "<p><b>x</b></p>"


def test_marks_applied_in_order():
    html = render_rich_text(doc(node("paragraph", text("x", ["bold", "italic"]))))
    assert html == "<p><i><b>x</b></i></p>"


def test_unknown_mark_passthrough():
    assert render_rich_text(doc(node("paragraph", text("x", ["glow"])))) == "<p>x</p>"


# ── Hyperlien ────────────────────────────────────────────────────────────────

def test_external_hyperlink():
    d = doc(node("paragraph", node("hyperlink", text("go"), data={"uri": "https://example.com"})))
    assert render_rich_text(d) == \
        '<p><a href="https://example.com" target="_blank" rel="noopener noreferrer">go</a></p>'


def test_http_hyperlink_is_external():
    d = doc(node("hyperlink", text("go"), data={"uri": "http://example.com"}))
    assert 'target="_blank"' in render_rich_text(d)


def test_internal_hyperlink():
    d = doc(node("hyperlink", text("go"), data={"uri": "/internal"}))
    assert render_rich_text(d) == '<a href="/internal">go</a>'


def test_hyperlink_without_uri():
    d = doc(node("hyperlink", text("go")))
    assert render_rich_text(d) == '<a href="">go</a>'


# ── Asset embarqué ───────────────────────────────────────────────────────────

def test_image_asset_with_title():
    d = doc(asset(title="Logo", url="//images.ctfassets.net/x.png", content_type="image/png"))
    assert render_rich_text(d) == (
        '<figure><img src="https://images.ctfassets.net/x.png" alt="Logo" loading="lazy" />'
        '<figcaption>Logo</figcaption></figure>'
    )


def test_image_asset_alt_prefers_description():
    d = doc(asset(title="Logo", description="Company logo",
                  url="//images.ctfassets.net/x.png", content_type="image/png"))
    assert 'alt="Company logo"' in render_rich_text(d)


def test_image_asset_without_title_has_no_figcaption():
    d = doc(asset(url="//images.ctfassets.net/x.png", content_type="image/jpeg"))
    assert render_rich_text(d) == \
        '<figure><img src="https://images.ctfassets.net/x.png" alt="" loading="lazy" /></figure>'


def test_non_image_asset_download_link():
    d = doc(asset(title="Brochure", url="//assets.ctfassets.net/brochure.pdf", content_type="application/pdf"))
    assert render_rich_text(d) == '<a href="https://assets.ctfassets.net/brochure.pdf" download>Brochure</a>'


def test_non_image_asset_default_label():
    d = doc(asset(url="//assets.ctfassets.net/f.zip", content_type="application/zip"))
    assert render_rich_text(d) == '<a href="https://assets.ctfassets.net/f.zip" download>Download file</a>'


def test_asset_without_file_renders_empty():
    d = doc(node("paragraph", text("a")), asset(title="Logo", with_file=False), node("paragraph", text("b")))
    assert render_rich_text(d) == "<p>a</p><p>b</p>"


def test_unresolved_asset_link_renders_empty():
    d = doc(node("embedded-asset-block",
                 data={"target": {"sys": {"type": "Link", "linkType": "Asset", "id": "x"}}}))
    assert render_rich_text(d) == ""


def test_asset_without_target_renders_empty():
    assert render_rich_text(doc(node("embedded-asset-block"))) == ""


def test_asset_built_from_generic_node():
    target = {"fields": {"title": "Logo", "file": {"url": "//x/y.png", "contentType": "image/png"}}}
    d = Document(content=[Node(node_type=NodeType.EMBEDDED_ASSET, data={"target": target})])
    assert render_rich_text(d) == \
        '<figure><img src="https://x/y.png" alt="Logo" loading="lazy" /><figcaption>Logo</figcaption></figure>'


def test_generic_asset_node_with_bad_target_renders_empty():
    d = Document(content=[Node(node_type=NodeType.EMBEDDED_ASSET, data={"target": {"fields": {"file": {"url": 3}}}})])
    assert render_rich_text(d) == ""


# ── Surcharges ───────────────────────────────────────────────────────────────

def _sample():
    return doc(
        node("paragraph", text("p")),
        node("heading-2", text("h")),
        node("unordered-list", node("list-item", text("i"))),
        node("hyperlink", text("l"), data={"uri": "/x"}),
    )


def test_paragraph_override_isolated():
    default = render_rich_text(_sample())
    custom = render_rich_text(_sample(), {"render_node": {
        "paragraph": lambda n, next_: f'<p class="lead">{next_(n.content)}</p>',
    }})
    assert custom.startswith('<p class="lead">p</p>')
    assert custom.replace('<p class="lead">', "<p>") == default


def test_override_with_enum_key():
    opts = RenderOptions(render_node={NodeType.HEADING_2: lambda n, next_: "H"})
    assert render_rich_text(doc(node("heading-2", text("x"))), opts) == "H"


def test_override_for_unknown_tag():
    d = doc(node("callout", text("note")))
    assert render_rich_text(d) == ""
    html = render_rich_text(d, {"render_node": {"callout": lambda n, next_: f"<aside>{next_(n.content)}</aside>"}})
    assert html == "<aside>note</aside>"


def test_mark_override():
    html = render_rich_text(doc(node("paragraph", text("x", ["bold"]))),
                            {"render_mark": {"bold": lambda t: f"<strong>{t}</strong>"}})
    assert html == "<p><strong>x</strong></p>"


def test_overrides_do_not_mutate_defaults():
    before = dict(DEFAULT_RENDER_NODE)
    build_render_node({"paragraph": lambda n, next_: ""})
    render_rich_text(_sample(), {"render_node": {"paragraph": lambda n, next_: ""}})
    assert dict(DEFAULT_RENDER_NODE) == before
    assert render_rich_text(doc(node("paragraph", text("p")))) == "<p>p</p>"


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_RENDER_NODE["paragraph"] = lambda n, next_: ""


# ── Tolérance + pureté ───────────────────────────────────────────────────────

def test_unknown_node_renders_empty():
    d = doc(node("paragraph", text("a")), node("embedded-entry-inline"), node("mystery", text("z")))
    assert render_rich_text(d) == "<p>a</p>"


def test_malformed_children_skipped():
    d = doc(node("paragraph", "junk", None, text("ok"), 42))
    assert render_rich_text(d) == "<p>ok</p>"


def test_content_not_a_list():
    assert render_rich_text({"nodeType": "document", "content": "oops"}) == ""


def test_accepts_parsed_document():
    d = Document.model_validate(doc(node("paragraph", text("hi"))))
    assert render_rich_text(d) == "<p>hi</p>"


def test_idempotent():
    d = Document.model_validate(_sample())
    opts = {"render_node": {"paragraph": lambda n, next_: f"[{next_(n.content)}]"}}
    assert render_rich_text(d, opts) == render_rich_text(d, opts)
    assert render_rich_text(d) == render_rich_text(d)
