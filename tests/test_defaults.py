import logging
import random

from responder.defaults import (
    FALLBACK_RESPONSE,
    DefaultResponsePool,
    load_default_responses,
    parse_default_responses,
)


def write(tmp_path, text, name="default.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="ascii")
    return path


def test_records_split_on_blank_lines(tmp_path):
    path = write(tmp_path, "one\n\ntwo a\n  two b  \n\n")

    assert load_default_responses(path) == ["\none", "\ntwo a\ntwo b"]


def test_whitespace_only_line_does_not_end_record():
    assert parse_default_responses(["hello", "   ", "world", ""]) == ["\nhello\nworld"]
    assert parse_default_responses(["hello", "   ", ""]) == ["\nhello"]


def test_leading_blank_lines_are_ignored():
    assert parse_default_responses(["", "", "one", ""]) == ["\none"]


def test_unterminated_last_record_is_dropped(tmp_path):
    assert load_default_responses(write(tmp_path, "one\n\ntwo\n")) == ["\none"]
    assert load_default_responses(write(tmp_path, "one\n\ntwo")) == ["\none"]


def test_flush_at_eof_keeps_last_record(tmp_path):
    path = write(tmp_path, "one\n\ntwo\n")

    assert load_default_responses(path, flush_at_eof=True) == ["\none", "\ntwo"]


def test_missing_file_falls_back(tmp_path, caplog):
    missing = tmp_path / "default.txt"

    with caplog.at_level(logging.ERROR):
        responses = load_default_responses(missing)

    assert responses == [FALLBACK_RESPONSE]
    assert f"Unable to open {missing}" in caplog.text


def test_empty_and_blank_files_fall_back(tmp_path):
    assert load_default_responses(write(tmp_path, "")) == [FALLBACK_RESPONSE]
    assert load_default_responses(write(tmp_path, "\n\n   \n\n")) == [FALLBACK_RESPONSE]
    assert load_default_responses(write(tmp_path, "never terminated")) == [FALLBACK_RESPONSE]


def test_custom_fallback(tmp_path):
    pool = DefaultResponsePool(tmp_path / "missing.txt", fallback="Say again?")

    assert pool.responses() == ["Say again?"]
    assert len(pool) == 1


def test_pick_is_reproducible_with_seed(tmp_path):
    path = write(tmp_path, "a\n\nb\n\nc\n\nd\n\n")
    pool = DefaultResponsePool(path)

    first = [pool.pick(random.Random(42)) for _ in range(3)]
    rng_a, rng_b = random.Random(7), random.Random(7)
    run_a = [pool.pick(rng_a) for _ in range(20)]
    run_b = [pool.pick(rng_b) for _ in range(20)]

    assert first[0] == first[1] == first[2]
    assert run_a == run_b
    for index, response in run_a:
        assert 0 <= index < 4
        assert pool.responses()[index] == response
