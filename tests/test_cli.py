import json

import pytest
import responses

from favifind.cli import main

PAGE = "http://example.com/index.html"

HTML = """<html><head>
<link rel="icon" href="/favicon.png">
<link rel="apple-touch-icon" href="/touch.png" type="image/png">
</head><body></body></html>"""


def _serve_page(rsps, body=HTML, status=200):
    rsps.add(responses.GET, PAGE, body=body, status=status, content_type="text/html")
    rsps.add(responses.GET, "http://example.com/manifest.json", status=404)
    rsps.add(responses.GET, "http://example.com/favicon.ico", status=404)
    rsps.add(responses.GET, "http://example.com/apple-touch-icon.png", status=404)


def test_table_output(capsys):
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _serve_page(rsps)
        status = main([PAGE])
    out = capsys.readouterr().out
    assert status == 0
    assert out.splitlines() == [
        "  1: http://example.com/favicon.png [image/png]",
        "  2: http://example.com/touch.png [image/png]",
    ]


def test_json_output(capsys):
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _serve_page(rsps)
        status = main(["-json", PAGE])
    out = capsys.readouterr().out
    assert status == 0
    data = json.loads(out)
    assert [item["url"] for item in data] == [
        "http://example.com/favicon.png",
        "http://example.com/touch.png",
    ]
    assert all(item["mimetype"] == "image/png" for item in data)
    assert all(item["extension"] == "png" for item in data)


def test_json_output_empty_list(capsys):
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _serve_page(rsps, body="<html></html>")
        status = main(["--json", PAGE])
    assert status == 0
    assert json.loads(capsys.readouterr().out) == []


def test_version(capsys):
    assert main(["-version"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("favicon ")
    assert out.splitlines()[1].startswith("built: ")


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    err = capsys.readouterr().err
    assert err.startswith("usage: favicon <url>")


def test_help_flag_prints_usage(capsys):
    assert main(["-h", PAGE]) == 0
    captured = capsys.readouterr()
    assert "retrieve, favicons for URL" in captured.err
    assert captured.out == ""


def test_invalid_url(capsys):
    assert main(["ftp://Example.com"]) == 1
    err = capsys.readouterr().err
    assert err.strip() == 'invalid URL: "ftp://example.com"'


def test_http_error_is_reported(capsys):
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        _serve_page(rsps, status=404)
        status = main([PAGE])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.err.startswith("[404]")
    assert captured.out == ""


def test_unknown_flag_exits_with_two(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-bogus", PAGE])
    assert excinfo.value.code == 2
    assert "usage: favicon <url>" in capsys.readouterr().err