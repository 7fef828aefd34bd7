from sici import Sici
from sici.report import render_report


def test_report_for_clean_parse():
    sici = Sici()
    _, round_trip = sici.parse("0066-4200(1990)25<>1.0.TX;2-S")

    report = render_report(sici, round_trip=round_trip)

    assert report.splitlines()[0] == "SICI Validation Report"
    assert "Input: 0066-4200(1990)25<>1.0.TX;2-S" in report
    assert "Valid: yes" in report
    assert "Round trip: yes" in report
    assert "Check character: ok" in report
    assert "No problems detected." in report


def test_report_lists_problems_and_check_character_mismatch():
    sici = Sici()
    _, round_trip = sici.parse("0361-5265(2011)17:3/4<60-61:AAAAAA>2.0.ZU;2-")

    report = render_report(sici, round_trip=round_trip)

    assert "Valid: no" in report
    assert "Round trip: no" in report
    assert "Check character: mismatch (expected S)" in report
    assert "[ERROR] item-issn: check digit mismatch (expected X) -> 0361-5265" in report


def test_report_for_assembled_sici_has_no_parse_details():
    sici = Sici()
    sici.item.issn = "1234-5678"
    sici.contribution.local_number = "7"

    report = render_report(sici)

    assert "Canonical: 1234-5678<::7>3.0.ZU;2-0" in report
    assert "Input:" not in report
    assert "Round trip" not in report


def test_issues_and_dict_expose_problems():
    sici = Sici()
    sici.contribution.title_code = "ABCDEFGHIJ"

    issues = sici.issues()
    data = sici.to_dict()

    assert [issue.code for issue in issues] == ["contribution-title-code"]
    assert issues[0].context == "ABCDEFGHIJ"
    assert data["valid"] is False
    assert data["segments"]["contribution"] == {"title_code": "ABCDEFGHIJ"}
    assert data["segments"]["control"]["csi"] == 2
    assert data["problems"] == {
        "contribution": {"title_code": ["contains more than 6 characters"]}
    }
