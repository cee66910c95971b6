"""Tests for the inline and reverse conversion pipelines."""

import pytest

from ..core.extractor import (
    inline_css,
    inline_css_external,
    inline_css_to_tree,
    reverse_css,
    reverse_css_external,
    reverse_css_internal,
)
from ..utils.error import NetworkError
from ..utils.html import is_valid_url, load_stylesheet, parse_html

class TestInlinePipeline:
    """Tests for the forward pipeline."""

    def test_inline_document(self, sample_html):
        dom = inline_css_to_tree(sample_html)

        assert dom.find('div', class_='header')['style'] == 'color:blue;font-size:24px'
        assert dom.find('div', class_='content')['style'] == 'padding:20px'
        first, second = dom.find_all('p')
        assert first['style'] == 'line-height:1.5'
        assert second['style'] == 'margin:0;line-height:1.5'
        assert dom.find('a').get('style') is None

    def test_preserved_rules_in_single_head_block(self, sample_html):
        dom = inline_css_to_tree(sample_html)
        styles = dom.find_all('style')

        assert len(styles) == 1
        assert styles[0].parent.name == 'head'
        css = styles[0].get_text()
        assert '@media print' in css
        assert 'a:hover' in css
        assert css.index('@media print') < css.index('a:hover')
        assert '.content p' not in css

    def test_no_style_block_without_preserved_rules(self):
        html = '<html><head><style>p { color: red }</style></head><body><p>x</p></body></html>'
        dom = inline_css_to_tree(html)
        assert dom.find('style') is None
        assert dom.find('p')['style'] == 'color:red'

    def test_fragment_without_head(self):
        html = inline_css('<style>a:hover { color: red }</style><a>x</a>')
        assert html.startswith('<style>')
        assert html.endswith('<a>x</a>')

    def test_unparsed_pseudo_rule_survives(self):
        html = inline_css(
            '<html><head><style>:is(h1,h2):hover { color: red }</style></head>'
            '<body><h1>x</h1></body></html>'
        )
        assert '<style>\n:is(h1,h2):hover { color: red }\n</style>' in html
        assert '<h1>x</h1>' in html

    def test_inline_css_returns_text(self, sample_html):
        html = inline_css(sample_html)
        assert isinstance(html, str)
        assert 'style="padding:20px"' in html

    def test_document_without_css(self):
        assert inline_css('<p>x</p>') == '<p>x</p>'

    def test_several_style_blocks_applied_in_order(self):
        html = (
            '<head><style>p { color: red; margin: 0 }</style>'
            '<style>p { color: blue }</style></head><p>x</p>'
        )
        dom = inline_css_to_tree(html)
        assert dom.find('p')['style'] == 'color:blue;margin:0'

    def test_external(self, sample_html):
        result = inline_css_external(sample_html, 'out.css')

        assert '@media print' in result.css
        assert 'a:hover' in result.css
        dom = parse_html(result.html)
        assert dom.find('style') is None
        link = dom.find('link')
        assert link['rel'] == 'stylesheet'
        assert link['href'] == 'out.css'
        assert link.parent.name == 'head'

    def test_external_without_preserved_rules(self):
        html, css = inline_css_external('<style>p { color: red }</style><p>x</p>')
        assert css == ''
        assert html == '<p style="color:red">x</p>'

class TestLinkedStylesheets:
    """Tests for loading <link rel="stylesheet"> targets."""

    page = (
        '<html><head><link rel="stylesheet" href="main.css">'
        '<style>p { margin: 0 }</style></head>'
        '<body><p>x</p></body></html>'
    )

    def test_relative_link_against_url_base(self, fake_web):
        fake_web.pages['https://example.com/site/main.css'] = 'p { color: red }'
        dom = inline_css_to_tree(self.page, base='https://example.com/site/index.html')

        assert fake_web.requested == ['https://example.com/site/main.css']
        # style blocks are applied before linked sheets
        assert dom.find('p')['style'] == 'margin:0;color:red'
        assert dom.find('link') is not None

    def test_document_url_is_default_base(self, fake_web):
        fake_web.pages['https://example.com/index.html'] = self.page
        fake_web.pages['https://example.com/main.css'] = 'p { color: red }'

        html = inline_css('https://example.com/index.html')

        assert fake_web.requested == [
            'https://example.com/index.html',
            'https://example.com/main.css',
        ]
        assert '<p style="margin:0;color:red">x</p>' in html

    def test_absolute_link(self, fake_web):
        fake_web.pages['https://cdn.example.com/a.css'] = 'p { color: red }'
        html = '<link rel="stylesheet" href="https://cdn.example.com/a.css"><p>x</p>'
        dom = inline_css_to_tree(html)
        assert dom.find('p')['style'] == 'color:red'

    def test_missing_remote_stylesheet(self, fake_web):
        with pytest.raises(NetworkError):
            inline_css(self.page, base='https://example.com/')

    def test_missing_document(self, fake_web):
        with pytest.raises(NetworkError):
            inline_css('https://example.com/missing.html')

    def test_local_directory_base(self, tmp_path):
        (tmp_path / 'main.css').write_text('p { color: red }', encoding='utf-8')
        dom = inline_css_to_tree(self.page, base=str(tmp_path))
        assert dom.find('p')['style'] == 'margin:0;color:red'

    def test_missing_local_file_is_skipped(self, tmp_path):
        dom = inline_css_to_tree(self.page, base=str(tmp_path))
        assert dom.find('p')['style'] == 'margin:0'

    def test_relative_link_without_base_is_skipped(self, fake_web):
        dom = inline_css_to_tree(self.page)
        assert dom.find('p')['style'] == 'margin:0'
        assert fake_web.requested == []

    def test_non_stylesheet_links_ignored(self, fake_web):
        dom = inline_css_to_tree('<link rel="icon" href="https://example.com/favicon.ico"><p>x</p>')
        assert dom.find('link')['rel'] == 'icon'
        assert dom.find('p').get('style') is None
        assert fake_web.requested == []

    def test_load_stylesheet_absolute_href_ignores_base(self, fake_web, tmp_path):
        fake_web.pages['https://example.com/a.css'] = 'a { color: red }'
        assert load_stylesheet('https://example.com/a.css', str(tmp_path)) == 'a { color: red }'

class TestReversePipeline:
    """Tests for the reverse pipeline."""

    page = (
        '<html><head><style>.x { color: red; }</style></head>'
        '<body><p style="margin:0">a</p></body></html>'
    )

    def test_reverse_merges_existing_styles_first(self):
        dom = reverse_css(self.page)
        styles = dom.find_all('style')

        assert len(styles) == 1
        assert styles[0].parent.name == 'head'
        assert styles[0].get_text().strip() == (
            '.x { color: red; }\n\n.auto-style-1 {\n  margin:0;\n}'
        )
        assert dom.find('p')['class'] == 'auto-style-1'
        assert not dom.find('p').has_attr('style')

    def test_reverse_document(self, inline_styled_html):
        dom = reverse_css(inline_styled_html)
        css = dom.find('style').get_text()
        assert 'body {\n  margin:0;\n}' in css
        assert '.card span {\n  font-weight:bold;\n}' in css
        assert dom.find(style=True) is None

    def test_reverse_without_styles(self):
        assert reverse_css_internal('<p>x</p>') == '<p>x</p>'

    def test_reverse_internal_text(self):
        html = reverse_css_internal('<p class="a" style="color:red">x</p>')
        assert html.startswith('<style>')
        assert '.a {\n  color:red;\n}' in html
        assert html.endswith('<p class="a">x</p>')

    def test_reverse_external(self):
        result = reverse_css_external(self.page, 'site.css')

        assert result.css == '.x { color: red; }\n\n.auto-style-1 {\n  margin:0;\n}'
        dom = parse_html(result.html)
        assert dom.find('style') is None
        assert dom.find('link')['href'] == 'site.css'

    def test_reverse_external_without_css(self):
        html, css = reverse_css_external('<p>x</p>')
        assert css == ''
        assert html == '<p>x</p>'

    def test_reverse_from_url(self, fake_web):
        fake_web.pages['https://example.com/'] = '<p style="color:red">x</p>'
        html = reverse_css_internal('https://example.com/')
        assert 'class="auto-style-1"' in html

class TestIsValidUrl:
    """Tests for is_valid_url."""

    @pytest.mark.parametrize('url', [
        'http://example.com',
        'https://example.com/page.html',
        '  https://example.com/  ',
    ])
    def test_valid(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize('url', [
        '<p>x</p>',
        'styles.css',
        'ftp://example.com/a.css',
        'https://',
        '',
    ])
    def test_invalid(self, url):
        assert not is_valid_url(url)
