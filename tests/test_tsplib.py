import pytest

from anneal import parse_tsp_file, read_solutions, list_tsp_files, instance_key


def test_parse_square(square_file):
    inst = parse_tsp_file(square_file)
    assert inst.name == "square"
    assert inst.ids == [1, 2, 3, 4]
    assert inst.coords == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def test_parse_skips_malformed_lines_and_stops_at_eof(tmp_path):
    path = tmp_path / "messy.tsp"
    path.write_text(
        "NAME: messy\n"
        "1 5 5\n"
        "NODE_COORD_SECTION\n"
        "1 1.5 2.5\n"
        "two 3 4\n"
        "\n"
        "3 7\n"
        "4 8e1 -9 extra\n"
        "EOF\n"
        "5 100 100\n"
    )
    inst = parse_tsp_file(path)
    assert inst.ids == [1, 4]
    assert inst.coords == [(1.5, 2.5), (80.0, -9.0)]


def test_parse_without_section_is_empty(tmp_path):
    path = tmp_path / "empty.tsp"
    path.write_text("NAME: empty\nEOF\n")
    assert parse_tsp_file(path).n_cities() == 0


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        parse_tsp_file(tmp_path / "nope.tsp")


def test_read_solutions(tmp_path):
    path = tmp_path / "solutions.txt"
    path.write_text(
        "square: 40.0\n"
        "berlin52.tsp : 7542\n"
        "garbage line\n"
        "bad: value\n"
        "\n"
    )
    assert read_solutions(path) == {"square": 40.0, "berlin52": 7542.0}


def test_instance_key_strips_extension():
    assert instance_key("square.tsp") == "square"
    assert instance_key("/data/set/a280.tsp") == "a280"
    assert instance_key("plain") == "plain"


def test_list_tsp_files_is_sorted_and_filtered(tmp_path):
    for name in ("b.tsp", "a.tsp", "solutions.txt", "c.opt.tour"):
        (tmp_path / name).write_text("")
    assert [p.rsplit("/", 1)[-1] for p in list_tsp_files(tmp_path)] == ["a.tsp", "b.tsp"]


def test_parse_tolerates_non_utf8_bytes(tmp_path):
    path = tmp_path / "gr4.tsp"
    path.write_bytes(
        b"NAME : gr4\n"
        b"COMMENT : Gr\xf6tschel\n"
        b"NODE_COORD_SECTION\n"
        b"1 0 0\n"
        b"2 10 0\n"
        b"3 10 10\n"
        b"4 0 10\n"
        b"EOF\n"
    )
    inst = parse_tsp_file(path)
    assert inst.ids == [1, 2, 3, 4]
    assert inst.tour_length([0, 1, 2, 3]) == pytest.approx(40.0)


def test_read_solutions_tolerates_non_utf8_bytes(tmp_path):
    path = tmp_path / "solutions.txt"
    path.write_bytes(b"# r\xe9f\nsquare: 40.0\n")
    assert read_solutions(path) == {"square": 40.0}
