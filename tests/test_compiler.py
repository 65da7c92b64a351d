"""
End-to-end tests for the compile entry point.
"""

import logging

from spell import compile
from spell.compiler import SpellCompiler


CARD_DOCUMENT = "\n".join([
    "<!DOCTYPE html>",
    "<html>",
    "\t<head>",
    '\t\t<meta name="viewport" content="width=device-width,initial-scale=1.0"></meta>',
    "\t</head>",
    "\t<body>",
    '\t\t<div id="x" class="card">Hello</div>',
    "\t</body>",
    "</html>",
])


class TestCompile:
    def test_card_document(self, options):
        assert compile('div.card(id="x").\n\tHello', options) == CARD_DOCUMENT

    def test_default_options(self):
        assert compile('div.card(id="x").\n\tHello') == CARD_DOCUMENT

    def test_spaces_and_tabs_compile_the_same(self, options):
        assert compile("ul\n    li one\n    li two", options) == compile("ul\n\tli one\n\tli two", options)

    def test_meta_moves_to_head(self, options):
        html = compile("div\n\tmeta(charset=utf-8)\n\tp text", options)
        head = html[html.index("<head>"):html.index("</head>")]
        body = html[html.index("<body>"):]
        assert head.index('name="viewport"') < head.index("charset=utf-8")
        assert "charset" not in body
        assert html.count("<meta") == 2

    def test_script_text_is_not_markdown(self, options):
        html = compile("script.\n\tconst x = a * b * c", options)
        assert "<script>/* compiled */const x = a * b * c</script>" in html

    def test_script_extension_conversion(self, ts_options):
        compiler = SpellCompiler(ts_options)
        html = compiler.compile('script(src="app.ts")')
        assert '<script src="app.js"></script>' in html
        assert compiler.script_sources == ['"app.ts"']

    def test_components(self, options):
        source = "\n".join([
            "card(@).card",
            "\th2 Title",
            "card(@)",
            "\tp Body",
        ])
        html = compile(source, options)
        assert '<div class="card">\n\t\t\t<h2>Title</h2>\n\t\t\t<p>Body</p>\n\t\t</div>' in html

    def test_forward_reference_is_literal(self, options):
        html = compile("card\ncard(@).x", options)
        assert "<card></card>" in html
        assert 'class="x"' not in html

    def test_calls_are_independent(self, options):
        source = "box(@).b\nbox(@)"
        assert compile(source, options) == compile(source, options)

    def test_failure_returns_empty_string(self, options, caplog):
        with caplog.at_level(logging.ERROR, logger="spell.compiler"):
            assert compile("div\n\tp(a=1\nspan", options) == ""
        assert "Tried compiling" in caplog.text
        assert "Unmatched nest" in caplog.text

    def test_failure_resets_script_sources(self, ts_options):
        compiler = SpellCompiler(ts_options)
        compiler.compile("script(src=a.ts)")
        assert compiler.compile("p(") == ""
        assert compiler.script_sources == []

    def test_compile_file(self, tmp_path, options):
        path = tmp_path / "index.spl"
        path.write_text('div.card(id="x").\n\tHello')
        assert SpellCompiler(options).compile_file(path) == CARD_DOCUMENT
