import datetime
import random

import pytest
from click.testing import CliRunner

from markovbot import config
from markovbot.markov_chain import Chain
from markovbot.markov_chain.generate import (
    GenerationError,
    generate_post,
    main,
    next_post_delay,
    trim_to_sentence,
)


@pytest.mark.parametrize("text, expected", [
    ("Hello world. And then", "Hello world."),
    ("Is it? Yes! Maybe. trailing", "Is it? Yes! Maybe."),
    ("  padded.", "padded."),
    ("no ending at all", ""),
    ("", ""),
    (".", ""),
])
def test_trim_to_sentence(text, expected):
    assert trim_to_sentence(text) == expected


def test_generate_post_returns_sentence():
    chain = Chain(2)
    chain.build("It was a dark night. The end came")
    post = generate_post(chain, 30, random.Random(3))
    assert post == "It was a dark night."


def test_generate_post_empty_chain():
    with pytest.raises(GenerationError):
        generate_post(Chain(2), 30, random.Random(0))


def test_generate_post_gives_up_without_sentence():
    chain = Chain(1)
    chain.build("never any punctuation")
    with pytest.raises(GenerationError, match="3 attempts"):
        generate_post(chain, 10, random.Random(0), max_tries=3)


def test_generate_post_raw_skips_trimming():
    chain = Chain(1)
    chain.build("never any punctuation")
    assert generate_post(chain, 10, random.Random(0), trim=False) == "never any punctuation"


def test_next_post_delay_in_bounds():
    rng = random.Random(99)
    for _ in range(200):
        delay = next_post_delay(rng)
        assert isinstance(delay, datetime.timedelta)
        assert config.MIN_POST_DELAY <= delay.total_seconds() < config.MAX_POST_DELAY


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("Hello world.\n", encoding='utf-8')
    return path


def test_cli_prints_posts(corpus_file):
    result = CliRunner().invoke(main, ['--corpus', str(corpus_file), '--seed', '1', '--count', '3'])
    assert result.exit_code == 0
    assert result.output.count("Hello world.") == 3


def test_cli_schedule(corpus_file):
    result = CliRunner().invoke(main, ['--corpus', str(corpus_file), '--seed', '1', '--count', '2', '--schedule'])
    assert result.exit_code == 0
    post_lines = [line for line in result.output.splitlines() if line.endswith("] Hello world.")]
    assert len(post_lines) == 2


def test_cli_raw(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("no sentence ending here\n", encoding='utf-8')
    result = CliRunner().invoke(main, ['--corpus', str(path), '--seed', '5', '--raw', '--prefix', '1'])
    assert result.exit_code == 0
    assert "no sentence ending here" in result.output


def test_cli_fails_without_sentence(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("no sentence ending here\n", encoding='utf-8')
    result = CliRunner().invoke(main, ['--corpus', str(path), '--seed', '5', '--max-tries', '2'])
    assert result.exit_code == 1
    assert "2 attempts" in result.output


def test_cli_missing_corpus(tmp_path):
    result = CliRunner().invoke(main, ['--corpus', str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_cli_rejects_zero_prefix(corpus_file):
    result = CliRunner().invoke(main, ['--corpus', str(corpus_file), '--prefix', '0'])
    assert result.exit_code == 2


def test_cli_invalid_utf8_corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_bytes(b"Hello \xff world.\n")
    result = CliRunner().invoke(main, ['--corpus', str(path), '--seed', '1'])
    assert result.exit_code == 0
    assert "Hello � world." in result.output
