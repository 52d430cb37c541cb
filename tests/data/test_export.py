import csv
import datetime as dt
import io
import re

from survey_dashboard.data import export
from survey_dashboard.data.filters import filter_responses

HEADER = "Date,Satisfaction,Area for Improvement,Recommendation Score,Comments"


def _records(document):
    return list(csv.reader(io.StringIO(document)))


def test_empty_export_is_exactly_the_header():
    assert export.responses_to_csv([]) == HEADER


def test_header_comes_first_and_rows_follow_input_order(sample_responses):
    document = export.responses_to_csv(sample_responses)
    records = _records(document)

    assert document.split("\n")[0] == HEADER
    assert len(records) == len(sample_responses) + 1
    assert [row[4] for row in records[1:]] == [r.comments for r in sample_responses]


def test_no_trailing_newline(sample_responses):
    assert not export.responses_to_csv(sample_responses).endswith("\n")


def test_first_row_fields(sample_responses):
    document = export.responses_to_csv(sample_responses)

    assert document.split("\n")[1] == (
        '"Jul 15, 2023, 02:35 PM",5,"Shipping",9,'
        '"Great products, but shipping took longer than expected."'
    )


def test_embedded_double_quotes_are_doubled(make_response):
    document = export.responses_to_csv([make_response(comments='He said "great"')])

    assert document.split("\n")[1].endswith(',"He said ""great"""')


def test_empty_comment_is_still_quoted(make_response):
    document = export.responses_to_csv([make_response(comments="")])

    assert document.split("\n")[1].endswith(',""')


def test_comment_with_comma_and_newline_stays_one_record(make_response):
    comment = "Fast, friendly\nwould buy again"
    document = export.responses_to_csv([make_response(comments=comment)])
    records = _records(document)

    assert len(records) == 2
    assert records[1][4] == comment


def test_improvement_label_is_humanized_with_raw_fallback(make_response):
    document = export.responses_to_csv(
        [
            make_response(improvement="website_ux"),
            make_response(improvement="gift_wrapping"),
        ]
    )
    records = _records(document)

    assert records[1][2] == "Website Experience"
    assert records[2][2] == "gift_wrapping"


def test_numeric_columns_are_written_bare(make_response):
    line = export.responses_to_csv([make_response(satisfaction=3, recommendation=10)]).split("\n")[1]

    assert ",3," in line
    assert ",10," in line


def test_malformed_values_pass_through(make_response):
    response = make_response(date="not-a-date", satisfaction=9)
    records = _records(export.responses_to_csv([response]))

    assert records[1][0] == "not-a-date"
    assert records[1][1] == "9"


def test_export_of_filtered_subset(sample_responses):
    subset = filter_responses(sample_responses, 5, "")
    records = _records(export.responses_to_csv(subset))

    assert len(records) == 4
    assert [row[1] for row in records[1:]] == ["5", "5", "5"]


def test_display_timezone_is_applied(sample_responses):
    records = _records(export.responses_to_csv(sample_responses[:1], tz="Asia/Tokyo"))

    assert records[1][0] == "Jul 15, 2023, 11:35 PM"


def test_csv_bytes_are_utf8(make_response):
    data = export.responses_to_csv_bytes([make_response(comments="Café was great ☕")])

    assert isinstance(data, bytes)
    assert "Café was great ☕" in data.decode("utf-8")


def test_export_file_name_uses_iso_date():
    assert export.export_file_name(dt.date(2024, 1, 2)) == "survey_responses_2024-01-02.csv"


def test_export_file_name_defaults_to_today():
    assert re.fullmatch(r"survey_responses_\d{4}-\d{2}-\d{2}\.csv", export.export_file_name())


def test_csv_mime_type():
    assert export.CSV_MIME == "text/csv; charset=utf-8"
