"""Tests for phone number normalization (###-###-####)."""


from organizer.domain.phone import digits_only, is_formatted_phone, normalize_phone


def test_normalize_plain_digits_returns_formatted():
    assert normalize_phone("1234567890") == "123-456-7890"
    assert normalize_phone("6035550101") == "603-555-0101"


def test_normalize_preformatted_round_trips():
    assert normalize_phone("603-555-0101") == "603-555-0101"


def test_normalize_strips_separators_and_spaces():
    assert normalize_phone("(603) 555 0101") == "603-555-0101"
    assert normalize_phone("  603.555.0101  ") == "603-555-0101"


def test_normalize_wrong_digit_count_returns_none():
    assert normalize_phone("abc123") is None
    assert normalize_phone("123-abc-7890") is None
    assert normalize_phone("123-456-789") is None
    assert normalize_phone("123-456-78901") is None
    assert normalize_phone("+1 603 555 0101") is None


def test_normalize_empty_returns_none():
    assert normalize_phone(None) is None
    assert normalize_phone("") is None
    assert normalize_phone("   ") is None


def test_digits_only():
    assert digits_only("1a2b-3 c") == "123"


def test_digits_only_drops_non_ascii_digits():
    assert digits_only("\u0661\u0662\u0663") == ""
    assert digits_only("12\uff133") == "123"
    assert normalize_phone("\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669\u0660") is None


def test_is_formatted_phone():
    assert is_formatted_phone("123-456-7890")
    assert not is_formatted_phone("1234567890")
    assert not is_formatted_phone("123-456-7890\n")
    assert not is_formatted_phone("")
