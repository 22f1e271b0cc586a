import pytest

from app.services.exclusions import parse_exclusions


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, set()),
        ("", set()),
        ("<@123> <@!456>", {"123", "456"}),
        ("111, 222;333  444", {"111", "222", "333", "444"}),
        ("<@1>,@alice bob", {"1", "alice", "bob"}),
        (["<@9>", "10", None], {"9", "10"}),
        (42, {"42"}),
    ],
)
def test_parse_exclusions(raw, expected):
    assert parse_exclusions(raw) == expected
