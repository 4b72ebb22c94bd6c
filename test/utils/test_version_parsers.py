import json

import pytest
from service_tagger.utils.version_parsers import (
    JsonVersionParser,
    PatternVersionParser,
    get_version_parser,
)

WELL_FORMED = [
    ({"name": "ui", "version": "2.3.1", "private": True}, "2.3.1"),
    ({"version": "0.0.1"}, "0.0.1"),
    ({"name": "ui", "version": "1.0.0-beta.1", "scripts": {"build": "vite"}}, "1.0.0-beta.1"),
    ({"name": "ui", "private": True}, ""),
    ({"name": "ui", "scripts": {"version": "npm run changelog"}, "version": "2.3.1"}, "2.3.1"),
    ({"name": "ui", "workspaces": [{"version": "9.9.9"}], "notes": "say \"version\": \"0.0.0\""}, ""),
]


@pytest.fixture(params=[JsonVersionParser, PatternVersionParser], ids=["json", "pattern"])
def parser(request):
    return request.param()


@pytest.mark.parametrize("document,expected", WELL_FORMED)
def test_parsers_agree_on_well_formed_documents(parser, document, expected):
    assert parser.parse(json.dumps(document, indent=2)) == expected
    assert parser.parse(json.dumps(document)) == expected


def test_parsers_return_empty_for_empty_text(parser):
    assert parser.parse("") == ""


def test_json_parser_rejects_malformed_document():
    assert JsonVersionParser().parse('{"version": "1.2.3",}') == ""


def test_pattern_parser_reads_malformed_document():
    assert PatternVersionParser().parse('{"version": "1.2.3",}') == "1.2.3"


def test_pattern_parser_skips_nested_version_keys():
    text = '{"name":"ui","scripts":{"version":"npm run changelog"},"version":"2.3.1"}'
    assert PatternVersionParser().parse(text) == "2.3.1"


def test_json_parser_ignores_non_string_version():
    assert JsonVersionParser().parse('{"version": 3}') == ""
    assert JsonVersionParser().parse('["version", "1.2.3"]') == ""


@pytest.mark.parametrize("name,expected", [
    ("json", JsonVersionParser),
    ("pattern", PatternVersionParser),
    (" JSON ", JsonVersionParser),
])
def test_get_version_parser(name, expected):
    assert isinstance(get_version_parser(name), expected)


def test_get_version_parser_default_is_json():
    assert isinstance(get_version_parser(), JsonVersionParser)


def test_get_version_parser_unknown():
    with pytest.raises(ValueError, match="Unknown metadata parser 'yaml'"):
        get_version_parser("yaml")
