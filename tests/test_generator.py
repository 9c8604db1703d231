from collections import Counter

import pytest

from stringsorts.generator import (
    CHARACTERS,
    SIZES,
    STRING_COUNT,
    StringGenerator,
)


def test_same_seed_gives_same_strings():
    first = StringGenerator(7).random_strings(50)
    second = StringGenerator(7).random_strings(50)
    assert len(first) == 50
    assert all(10 <= len(s) <= 200 for s in first)
    assert all(set(s) <= set(CHARACTERS) for s in first)
    assert first == second
    assert StringGenerator(8).random_strings(50) != first


def test_random_string_respects_bounds_and_alphabet():
    gen = StringGenerator(1)
    for _ in range(200):
        s = gen.random_string(3, 8)
        assert 3 <= len(s) <= 8
        assert set(s) <= set(CHARACTERS)


def test_random_string_default_bounds():
    gen = StringGenerator(2)
    lengths = [len(gen.random_string()) for _ in range(300)]
    assert min(lengths) >= 10
    assert max(lengths) <= 200


def test_random_strings_default_count():
    strings = StringGenerator(3).random_strings()
    assert len(strings) == STRING_COUNT == 3000


def test_reverse_sorted_is_descending_permutation():
    gen = StringGenerator(4)
    base = gen.random_strings(100)
    result = gen.reverse_sorted(base)
    assert result == sorted(base)[::-1]
    assert Counter(result) == Counter(base)


def test_almost_sorted_is_close_to_sorted():
    gen = StringGenerator(5)
    base = gen.random_strings(500)
    result = gen.almost_sorted(base)
    assert Counter(result) == Counter(base)
    misplaced = sum(a != b for a, b in zip(result, sorted(base)))
    assert misplaced <= 60


def test_almost_sorted_small_inputs():
    gen = StringGenerator(6)
    assert gen.almost_sorted([]) == []
    assert gen.almost_sorted(["x"]) == ["x"]


def test_save_variants_writes_every_size(tmp_path):
    gen = StringGenerator(8)
    data = gen.random_strings()
    written = gen.save_variants(tmp_path, "random", data)
    assert len(written) == len(SIZES) == 30
    for size, path in zip(SIZES, written):
        assert path == tmp_path / "random" / f"random_{size}.txt"
        lines = path.read_text(encoding="utf-8").split("\n")
        assert lines[0] == str(size)
        assert lines[1 : size + 1] == data[:size]
        assert lines[-1] == ""
        assert len(lines) == size + 2


def test_save_variants_rejects_short_data(tmp_path):
    with pytest.raises(ValueError):
        StringGenerator(9).save_variants(tmp_path, "random", ["a", "b"])


def test_generate_all_creates_three_variants(tmp_path):
    StringGenerator(10).generate_all(tmp_path)
    for folder in ("random", "reverse_sort", "almost_sort"):
        files = sorted((tmp_path / folder).iterdir())
        assert len(files) == 30
    rev = (tmp_path / "reverse_sort" / "reverse_sort_3000.txt").read_text(encoding="utf-8")
    rev_lines = rev.split("\n")[1:-1]
    rnd = (tmp_path / "random" / "random_3000.txt").read_text(encoding="utf-8")
    rnd_lines = rnd.split("\n")[1:-1]
    assert rev_lines == sorted(rnd_lines, reverse=True)