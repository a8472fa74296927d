import pytest

from cname_finder.errors import ConfigError
from cname_finder.validation import (
    clean_line,
    dedupe_names,
    normalize,
    parse_duration,
    parse_names,
    strip_scheme,
    validate_runtime_constraints,
)


def test_normalize_strips_one_trailing_dot() -> None:
    assert normalize("a.example.") == normalize("a.example") == "a.example"
    assert normalize("  a.example.  ") == "a.example"
    assert normalize("a.example..") == "a.example."


def test_strip_scheme() -> None:
    assert strip_scheme("https://a.example/") == "a.example"
    assert strip_scheme("http://a.example") == "a.example"
    assert strip_scheme(" a.example/ ") == "a.example"
    assert strip_scheme("ftp://a.example") == "ftp://a.example"
    assert strip_scheme("HTTPS://Shop.Example/") == "Shop.Example"


def test_clean_line_filters_blank_and_comments() -> None:
    assert clean_line("") is None
    assert clean_line("   ") is None
    assert clean_line("# comment") is None
    assert clean_line("  #indented comment") is None
    assert clean_line("https://") is None
    assert clean_line(" HTTPS://Shop.Example/ ") == "shop.example"


def test_parse_names_keeps_order_and_duplicates() -> None:
    lines = ["a.example", "", "# comment", "b.example", "a.example\n"]
    assert parse_names(lines) == ["a.example", "b.example", "a.example"]


def test_dedupe_names_keeps_first_occurrence() -> None:
    assert dedupe_names(["b.example", "a.example", "b.example.", "a.example"]) == [
        "b.example",
        "a.example",
    ]


@pytest.mark.parametrize(
    ("value", "seconds"),
    [
        ("5s", 5.0),
        ("500ms", 0.5),
        ("1m", 60.0),
        ("1.5s", 1.5),
        ("2", 2.0),
        ("1h", 3600.0),
        ("1m30s", 90.0),
        ("1h2m3.5s", 3723.5),
        ("250us", 0.00025),
        ("1500000ns", 0.0015),
    ],
)
def test_parse_duration(value: str, seconds: float) -> None:
    assert parse_duration(value) == pytest.approx(seconds)


@pytest.mark.parametrize("value", ["", "fast", "5 seconds", "-1s", "1d", "1m30", "s5", "1m 30s"])
def test_parse_duration_rejects_garbage(value: str) -> None:
    with pytest.raises(ConfigError):
        parse_duration(value)


def test_validate_runtime_constraints_rejects_invalid_values() -> None:
    with pytest.raises(ConfigError):
        validate_runtime_constraints(output="out.txt", timeout=5.0, workers=0)
    with pytest.raises(ConfigError):
        validate_runtime_constraints(output="out.txt", timeout=0, workers=1)
    with pytest.raises(ConfigError):
        validate_runtime_constraints(output=" ", timeout=5.0, workers=1)


def test_validate_runtime_constraints_accepts_defaults() -> None:
    validate_runtime_constraints(output="cnames.txt", timeout=5.0, workers=1)
