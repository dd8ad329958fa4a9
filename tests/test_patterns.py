import io

import pytest

from dsakit import patterns as p

SIZES = [1, 2, 3, 5, 7]


def rows(text):
    return text.split("\n")[:-1]


def test_pyramid_pinned():
    assert p.pyramid(3) == "  *  \n *** \n*****\n"


def test_hollow_square_pinned():
    assert p.hollow_square(3) == "***\n* *\n***\n"


def test_letter_pyramid_pinned():
    assert p.letter_pyramid(3) == "  A  \n ABA \nABCBA\n"


@pytest.mark.parametrize("n", SIZES)
def test_square_shape(n):
    lines = rows(p.square(n))
    assert len(lines) == n
    assert all(line.count("*") == n for line in lines)


@pytest.mark.parametrize("n", SIZES)
def test_right_triangle_grows(n):
    assert [line.count("*") for line in rows(p.right_triangle(n))] == list(range(1, n + 1))


@pytest.mark.parametrize("n", SIZES)
def test_inverted_triangle_mirrors_right_triangle(n):
    assert rows(p.inverted_triangle(n)) == rows(p.right_triangle(n))[::-1]


@pytest.mark.parametrize("n", [1, 3, 6, 9])
def test_number_triangle_rows_are_prefixes(n):
    lines = rows(p.number_triangle(n))
    assert len(lines) == n
    assert all(b.startswith(a) and len(b) == len(a) + 1 for a, b in zip(lines, lines[1:]))


@pytest.mark.parametrize("n", [1, 3, 6, 9])
def test_inverted_number_triangle_mirrors(n):
    assert rows(p.inverted_number_triangle(n)) == rows(p.number_triangle(n))[::-1]


@pytest.mark.parametrize("n", [1, 4, 9])
def test_repeated_number_triangle(n):
    lines = rows(p.repeated_number_triangle(n))
    assert [set(line) for line in lines] == [{str(i)} for i in range(1, n + 1)]
    assert [len(line) for line in lines] == list(range(1, n + 1))


@pytest.mark.parametrize("n", SIZES)
def test_pyramid_symmetric_and_even_width(n):
    lines = rows(p.pyramid(n))
    assert all(line == line[::-1] and len(line) == 2 * n - 1 for line in lines)


@pytest.mark.parametrize("n", SIZES)
def test_inverted_pyramid_shrinks_to_blank_row(n):
    lines = rows(p.inverted_pyramid(n))
    assert len(lines) == n + 1
    assert [line.count("*") for line in lines[:-1]] == list(range(2 * n - 1, 0, -2))
    assert lines[-1].strip() == ""
    assert all(line == line[::-1] for line in lines)


@pytest.mark.parametrize("n", SIZES)
def test_diamond_joins_halves(n):
    assert p.diamond(n) == p.pyramid(n) + p.inverted_pyramid(n)


@pytest.mark.parametrize("n", SIZES)
def test_half_diamond_counts(n):
    counts = [len(line) for line in rows(p.half_diamond(n))]
    assert counts == list(range(1, n + 1)) + list(range(n - 1, 0, -1))


@pytest.mark.parametrize("n", SIZES)
def test_binary_triangle_alternates(n):
    lines = rows(p.binary_triangle(n))
    for i, line in enumerate(lines):
        assert len(line) == i + 1
        assert line[0] == ("1" if i % 2 == 0 else "0")
        assert all(a != b for a, b in zip(line, line[1:]))


@pytest.mark.parametrize("n", [1, 3, 5, 9])
def test_number_crown_symmetric(n):
    lines = rows(p.number_crown(n))
    assert all(line == line[::-1] and len(line) == 2 * n for line in lines)


@pytest.mark.parametrize("n", SIZES)
def test_floyd_triangle_counts_up(n):
    lines = rows(p.floyd_triangle(n))
    numbers = [int(x) for line in lines for x in line.split()]
    assert numbers == list(range(1, n * (n + 1) // 2 + 1))
    assert [len(line.split()) for line in lines] == list(range(1, n + 1))


@pytest.mark.parametrize("n", SIZES)
def test_letter_triangles(n):
    lines = rows(p.letter_triangle(n))
    assert all(line.split()[0] == "A" and len(line.split()) == i + 1 for i, line in enumerate(lines))
    assert rows(p.reverse_letter_triangle(n)) == lines[::-1]


@pytest.mark.parametrize("n", SIZES)
def test_repeated_letter_triangle(n):
    lines = rows(p.repeated_letter_triangle(n))
    assert all(set(line) == {chr(ord("A") + i)} and len(line) == i + 1 for i, line in enumerate(lines))


@pytest.mark.parametrize("n", SIZES)
def test_letter_pyramid_symmetric(n):
    lines = rows(p.letter_pyramid(n))
    assert all(line == line[::-1] and len(line) == 2 * n - 1 for line in lines)


def test_trailing_letter_triangle_ends_with_e():
    lines = rows(p.trailing_letter_triangle(5))
    assert all(line.split()[-1] == "E" and len(line.split()) == i + 1 for i, line in enumerate(lines))
    assert lines[-1].split()[0] == "A"


@pytest.mark.parametrize("n", SIZES)
def test_symmetric_void_shape(n):
    lines = rows(p.symmetric_void(n))
    assert len(lines) == 2 * n
    assert all(line == line[::-1] and len(line) == 2 * n for line in lines)


@pytest.mark.parametrize("n", [2, 3, 5])
def test_hollow_square_border(n):
    lines = rows(p.hollow_square(n))
    assert lines[0] == lines[-1] == "*" * n
    assert all(line[0] == line[-1] == "*" and line[1:-1].strip() == "" for line in lines[1:-1])


def test_main_with_sizes(capsys):
    assert p.main(["--pattern", "pyramid", "3"]) == 0
    assert capsys.readouterr().out == p.pyramid(3) + "\n"


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n2\n"))
    p.main([])
    assert capsys.readouterr().out == p.hollow_square(1) + "\n" + p.hollow_square(2) + "\n"


def test_main_missing_size_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1"))
    with pytest.raises(SystemExit):
        p.main([])