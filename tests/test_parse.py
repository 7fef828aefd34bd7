import pytest

from sici import InvalidModeError, InvalidSiciError, Sici, SiciParseError, UnsupportedVersionError


def test_parse_serial_item(lax_sici):
    result = lax_sici.parse("0066-4200(1990)25<>1.0.TX;2-S")

    assert result == (True, True)
    assert lax_sici.item.issn == "0066-4200"
    assert lax_sici.item.chronology == "1990"
    assert lax_sici.item.enumeration == "25"
    assert not lax_sici.item.has("volume")
    assert lax_sici.contribution.is_empty()
    assert lax_sici.control.csi == "1"
    assert lax_sici.control.dpi == "0"
    assert lax_sici.control.mfi == "TX"
    assert lax_sici.control.version == "2"
    assert lax_sici.parsed_string == "0066-4200(1990)25<>1.0.TX;2-S"


@pytest.mark.parametrize(
    "raw",
    [
        "0095-4403(199502/03)21:3<12:WATIIB>2.0.TX;2-J",
        "1064-3923(199505)6:5<>1.0.TX;2-U",
        "0000-0000(1999)1:2:+<>1.0.TX;2-Z",
        "0361-526X<737:TIMSA:7>3.0.TX;2-6",
    ],
)
def test_published_and_assembled_sicis_round_trip(lax_sici, raw):
    assert lax_sici.parse(raw) == (True, True)
    assert lax_sici.to_string() == raw


def test_parse_splits_volume_issue_and_contribution(lax_sici):
    lax_sici.parse("0095-4403(199502/03)21:3<12:WATIIB>2.0.TX;2-J")

    assert lax_sici.item.chronology == "199502/03"
    assert lax_sici.item.volume == "21"
    assert lax_sici.item.issue == "3"
    assert not lax_sici.item.has("enumeration")
    assert lax_sici.contribution.location == "12"
    assert lax_sici.contribution.title_code == "WATIIB"
    assert not lax_sici.contribution.has("local_number")


def test_parse_supplement_marker(lax_sici):
    lax_sici.parse("0000-0000(1999)1:2:+<>1.0.TX;2-Z")

    assert lax_sici.item.suppl_or_idx == "+"


def test_parse_contribution_variants():
    local_only = Sici()
    local_only.parse("1234-5678<::7>3.0.ZU;2-0")
    assert local_only.contribution.local_number == "7"
    assert not local_only.contribution.has("title_code")

    title_first = Sici()
    title_first.parse("1234-5679<:ABC:9>2.0.ZU;2-")
    assert title_first.contribution.title_code == "ABC"
    assert title_first.contribution.local_number == "9"
    assert not title_first.contribution.has("location")

    location_only = Sici()
    location_only.parse("1234-5679<A1B2>2.0.ZU;2-")
    assert location_only.contribution.location == "A1B2"


def test_missing_check_character_breaks_round_trip_only():
    sici = Sici()
    sici.item.issn = "1234-5679"

    valid, round_trip = sici.parse("1234-5679<:ABC>2.0.ZU;2-")

    assert valid is True
    assert round_trip is False
    assert sici.to_string() == "1234-5679<:ABC>2.0.ZU;2-H"


@pytest.mark.parametrize(
    "raw, expected, problems",
    [
        ("0361-526X(2011)17:3/4<60-61:AAAAAA>2.0.ZU;2-", (True, False), None),
        (
            "0361-5265(2011)17:3/4<60-61:AAAAAA>2.0.ZU;2-",
            (False, False),
            {"item": {"issn": ["check digit mismatch (expected X)"]}},
        ),
    ],
)
def test_contribution_with_page_range(lax_sici, raw, expected, problems):
    assert lax_sici.parse(raw) == expected
    assert lax_sici.list_problems() == problems
    assert lax_sici.item.volume == "17"
    assert lax_sici.item.issue == "3/4"
    assert lax_sici.contribution.location == "60-61"
    assert lax_sici.contribution.title_code == "AAAAAA"
    assert lax_sici.control.csi == "2"


def test_regenerated_check_character_for_page_range(lax_sici):
    lax_sici.parse("0361-526X(2011)17:3/4<60-61:AAAAAA>2.0.ZU;2-")

    assert lax_sici.to_string() == "0361-526X(2011)17:3/4<60-61:AAAAAA>2.0.ZU;2-0"


def test_truncated_control_segment_is_tolerated(lax_sici):
    result = lax_sici.parse("0066-4200(1990)25<>1.")

    assert result == (True, False)
    assert lax_sici.control.csi == "1"
    assert not lax_sici.control.has("dpi")
    assert lax_sici.control.mfi == "ZU"


def test_single_trailing_mfi_character_is_skipped(lax_sici):
    lax_sici.parse("<>1.0.T")

    assert not lax_sici.control.has("mfi")
    assert lax_sici.control.dpi == "0"


def test_wrong_check_character_is_not_an_error(lax_sici):
    assert lax_sici.parse("0066-4200(1990)25<>1.0.TX;2-X") == (True, False)


def test_lax_mode_reports_empty_input(lax_sici):
    assert lax_sici.parse("") == (False, None)
    assert lax_sici.parsed_string is None


def test_lax_mode_rejects_unsupported_version_before_tokenizing(lax_sici):
    assert lax_sici.parse("0066-4200(1990)25<>1.0.TX;3-S") == (False, None)
    assert not lax_sici.item.has("issn")


def test_version_without_check_character_is_recorded(lax_sici):
    valid, round_trip = lax_sici.parse("0066-4200(1990)25<>1.0.TX;3-")

    assert (valid, round_trip) == (False, False)
    assert lax_sici.control.version == "3"
    assert "version" in lax_sici.list_problems()["control"]


def test_reparse_overwrites_parsed_string(lax_sici):
    lax_sici.parse("0066-4200(1990)25<>1.0.TX;2-S")
    lax_sici.reset()
    lax_sici.parse("1064-3923(199505)6:5<>1.0.TX;2-U")

    assert lax_sici.parsed_string == "1064-3923(199505)6:5<>1.0.TX;2-U"
    assert lax_sici.item.issn == "1064-3923"
    assert not lax_sici.item.has("enumeration")


def test_strict_mode_rejects_empty_input(strict_sici):
    with pytest.raises(SiciParseError):
        strict_sici.parse("")


def test_strict_mode_rejects_unsupported_version(strict_sici):
    with pytest.raises(UnsupportedVersionError) as excinfo:
        strict_sici.parse("0066-4200(1990)25<>1.0.TX;1-S")

    assert excinfo.value.version == "1"
    assert strict_sici.parsed_string is None
    assert not strict_sici.item.has("issn")
    assert strict_sici.contribution.is_empty()


def test_strict_mode_rejects_invalid_sici(strict_sici):
    with pytest.raises(InvalidSiciError) as excinfo:
        strict_sici.parse("0361-5265(2011)17:3/4<60-61:AAAAAA>2.0.ZU;2-")

    assert excinfo.value.problems == {"item": {"issn": ["check digit mismatch (expected X)"]}}
    assert strict_sici.item.issn == "0361-5265"


def test_strict_mode_accepts_valid_sici(strict_sici):
    assert strict_sici.parse("0066-4200(1990)25<>1.0.TX;2-S") == (True, True)


@pytest.mark.parametrize("mode, expected", [(" STRICT ", "strict"), ("L a x", "lax"), ("lax", "lax")])
def test_mode_is_normalized(mode, expected):
    assert Sici(mode=mode).mode == expected


@pytest.mark.parametrize("mode", ["", "loose", None])
def test_unknown_mode_is_rejected(mode):
    with pytest.raises(InvalidModeError):
        Sici(mode=mode)


def test_checkchar_matches_serialised_form():
    sici = Sici()
    sici.parse("0066-4200(1990)25<>1.0.TX;2-S")

    assert sici.checkchar() == "S"
    assert str(sici) == "0066-4200(1990)25<>1.0.TX;2-S"


def test_non_ascii_digit_in_control_segment_is_a_problem_not_a_crash(lax_sici):
    valid, round_trip = lax_sici.parse("0066-4200(1990)25<>².0.TX;2-S")

    assert (valid, round_trip) == (False, False)
    assert lax_sici.control.csi == "²"
    assert lax_sici.list_problems() == {
        "control": {"csi": ["value not in allowed range (1|2|3)"]}
    }
