# Path: tests/unit/test_formatters.py
"""
Unit Tests for Result Formatters

Tests each output mode and the formatter registry.
"""

import io

import pytest

from unifind.models.names_list import Category, CharacterRecord, SearchResult
from unifind.output.formatters import (
    CategoryFormatter,
    CodePointFormatter,
    DetailFormatter,
    FormatterRegistry,
    GlyphFormatter,
    VerboseFormatter,
)
from unifind.output.formatters.text_formatters import quote


BASIC_LATIN = Category(name='Basic Latin', start='0000', end='007F')
GREEK = Category(name='Greek', start='0370', end='03FF')


@pytest.fixture
def result():
    return SearchResult(
        query='capital',
        records=[
            CharacterRecord(0x0391, ('greek capital letter alpha',), GREEK,
                            'Uppercase Greek alphabet'),
            CharacterRecord(0x0041, ('latin capital letter a', 'x (latin small letter a - 0061)'),
                            BASIC_LATIN, 'Uppercase Latin alphabet'),
        ],
    )


class TestTextFormatters:
    """Test output of each mode."""

    def test_glyph(self, result):
        assert GlyphFormatter().format_result(result) == ['Α', 'A']

    def test_code(self, result):
        assert CodePointFormatter().format_result(result) == ['U+0391', 'U+0041']

    def test_code_beyond_bmp(self):
        record = CharacterRecord(0x1F600, ('grinning face',), Category('Emoticons', '1F600', '1F64F'))

        assert CodePointFormatter().format_result(SearchResult('grin', [record])) == ['U+1F600']

    def test_verbose(self, result):
        assert VerboseFormatter().format_result(result) == [
            'Α greek capital letter alpha',
            'A latin capital letter a',
        ]

    def test_detail(self, result):
        lines = DetailFormatter().format_result(result)

        assert lines[1] == (
            'A name="latin capital letter a" category="Basic Latin" '
            'subcategory="Uppercase Latin alphabet" from="0000" to="007F"'
        )

    def test_detail_escapes_quotes(self):
        record = CharacterRecord(0x0022, ('quotation mark "',), BASIC_LATIN)

        line = DetailFormatter().format_result(SearchResult('quot', [record]))[0]

        assert 'name="quotation mark \\""' in line
        assert 'subcategory=""' in line

    def test_categories_sorted_distinct(self, result):
        result.records.append(CharacterRecord(0x0042, ('latin capital letter b',), BASIC_LATIN))

        assert CategoryFormatter().format_result(result) == ['Basic Latin', 'Greek']

    def test_quote_keeps_non_ascii(self):
        assert quote('café') == '"café"'


class TestWriteResult:
    """Test writing to a stream."""

    def test_lines_newline_terminated(self, result):
        stream = io.StringIO()

        count = CodePointFormatter().write_result(result, stream)

        assert count == 2
        assert stream.getvalue() == 'U+0391\nU+0041\n'

    def test_empty_result_writes_nothing(self):
        stream = io.StringIO()

        assert GlyphFormatter().write_result(SearchResult('x'), stream) == 0
        assert stream.getvalue() == ''


class TestFormatterRegistry:
    """Test registry lookup."""

    @pytest.mark.parametrize('name,formatter_class', [
        ('glyph', GlyphFormatter),
        ('code', CodePointFormatter),
        ('verbose', VerboseFormatter),
        ('detail', DetailFormatter),
        ('categories', CategoryFormatter),
    ])
    def test_every_mode_registered(self, name, formatter_class):
        assert isinstance(FormatterRegistry.get(name), formatter_class)

    def test_unknown_mode(self):
        assert FormatterRegistry.get('xml') is None

    def test_register_new_mode(self):
        class UpperGlyphFormatter(GlyphFormatter):
            @property
            def format_name(self):
                return 'upper'

        try:
            FormatterRegistry.register(UpperGlyphFormatter)
            assert isinstance(FormatterRegistry.get('upper'), UpperGlyphFormatter)
        finally:
            FormatterRegistry._formatters.pop('upper', None)
