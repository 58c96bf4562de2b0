import pytest

from labkit import adder


@pytest.mark.parametrize(
    "query, expected",
    [
        ("3&4", (3, 4)),
        ("x&5", (0, 5)),
        (" 12abc&-7", (12, -7)),
        ("1&2&3", (1, 2)),
    ],
)
def test_parse_query(query, expected):
    assert adder.parse_query(query) == expected


def test_parse_query_without_separator():
    with pytest.raises(ValueError):
        adder.parse_query("15")


def test_render_content_worked_example():
    content = adder.render_content(1, 2)
    assert content.startswith("Welcome to add.com: THE Internet addition portal.\r\n<p>")
    assert "The answer is: 1 + 2 = 3\r\n<p>" in content
    assert content.endswith("Thanks for visiting!\r\n")


def test_build_response_headers_and_length():
    response = adder.build_response("10&20")
    headers, body = response.split("\r\n\r\n", 1)
    lines = headers.split("\r\n")
    assert lines[0] == "Connection: close"
    assert lines[2] == "Content-type: text/html"
    assert lines[1] == f"Content-length: {len(body)}"
    assert body == adder.render_content(10, 20)


def test_build_response_without_query_uses_zeros():
    response = adder.build_response(None)
    assert response.endswith(adder.render_content(0, 0))


def test_main_reads_query_string(monkeypatch, capsys):
    monkeypatch.setenv("QUERY_STRING", "5&6")
    assert adder.main([]) == 0
    assert capsys.readouterr().out == adder.build_response("5&6")


def test_main_without_query_string(monkeypatch, capsys):
    monkeypatch.delenv("QUERY_STRING", raising=False)
    assert adder.main() == 0
    assert capsys.readouterr().out == adder.build_response(None)