from advisor.services.catalog_loader import (
    LoadStatus,
    load_file,
    load_records,
    load_text,
    parse_line,
)


def test_parse_line_trims_fields():
    assert parse_line(" CSCI101 , Intro to Programming ,CSCI100 ") == [
        "CSCI101",
        "Intro to Programming",
        "CSCI100",
    ]


def test_parse_line_splits_on_every_comma():
    assert parse_line('CSCI300,"Algorithms, Part I",CSCI200') == [
        "CSCI300",
        '"Algorithms',
        'Part I"',
        "CSCI200",
    ]


def test_parse_line_keeps_quotes_in_title():
    assert parse_line('CSCI300,"Honors" Seminar,CSCI200') == [
        "CSCI300",
        '"Honors" Seminar',
        "CSCI200",
    ]


def test_load_normalizes_codes_and_prereqs():
    result = load_records(["csci-101,Programming, csci 100 ,MATH201"])

    assert result.status == LoadStatus.LOADED
    course = result.catalog.get("CSCI101")
    assert course.title == "Programming"
    assert course.prereqs == ("CSCI100", "MATH201")


def test_comments_and_blank_lines_are_not_reported():
    result = load_text("# header\n\n   \n  # indented comment\nCSCI100,Intro\n")

    assert result.loaded == 1
    assert result.skipped == []


def test_invalid_lines_are_skipped_and_reported():
    lines = [
        "CSCI100,Intro",
        "JUSTACODE",
        "---,No Code",
        "CSCI101,Programming,CSCI100",
    ]
    result = load_records(lines)

    assert result.loaded == 2
    assert [(s.line_number, s.reason) for s in result.skipped] == [
        (2, "malformed"),
        (3, "empty code"),
    ]
    assert result.skipped[1].text == "---,No Code"


def test_empty_prereqs_are_dropped_and_duplicates_kept():
    result = load_records(["CSCI200,Data Structures,,CSCI101, - ,CSCI101"])

    assert result.catalog.get("CSCI200").prereqs == ("CSCI101", "CSCI101")


def test_last_write_wins():
    result = load_records(
        [
            "CSCI100,Old Title,MATH100",
            "csci 100,New Title",
        ]
    )

    assert result.loaded == 1
    course = result.catalog.get("CSCI100")
    assert course.title == "New Title"
    assert course.prereqs == ()


def test_no_valid_entries_is_empty_not_error():
    result = load_text("# only comments\nbad line\n")

    assert result.status == LoadStatus.EMPTY
    assert result.ok
    assert result.loaded == 0
    assert len(result.skipped) == 1


def test_load_file_strips_bom(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_bytes("CSCI100,Intro\nCSCI101,Programming,CSCI100\n".encode("utf-8-sig"))

    result = load_file(path)

    assert sorted(result.catalog.codes()) == ["CSCI100", "CSCI101"]


def test_load_file_bom_survives_plain_utf8_decoding(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_bytes("CSCI100,Intro\n".encode("utf-8-sig"))

    result = load_file(path, encoding="utf-8")

    assert result.catalog.codes() == ["CSCI100"]


def test_missing_file_is_source_unavailable(tmp_path):
    result = load_file(tmp_path / "missing.csv")

    assert result.status == LoadStatus.SOURCE_UNAVAILABLE
    assert not result.ok
    assert result.catalog is None
    assert result.error


def test_undecodable_file_is_source_unavailable(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_bytes(b"CSCI100,\xff\xfe broken\n")

    result = load_file(path)

    assert result.status == LoadStatus.SOURCE_UNAVAILABLE


def test_sample_catalog_loads(sample_path):
    result = load_file(sample_path)

    assert result.status == LoadStatus.LOADED
    assert result.loaded == 8
    assert result.skipped == []


def test_records_split_only_on_newline():
    result = load_text("CSCI100,Intro\x85Programming\nCSCI101,Data Structures\r\nbad\n")

    assert result.catalog.get("CSCI100").title == "Intro\x85Programming"
    assert result.catalog.get("CSCI101").title == "Data Structures"
    assert [(s.line_number, s.reason) for s in result.skipped] == [(3, "malformed")]
