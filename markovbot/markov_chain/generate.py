import datetime
import logging
import re
import sys
from pathlib import Path

import click

from .. import config
from ..utils import seed_random, setup_logging
from .train import build_chain, load_corpus

SENTENCE_RE = re.compile(r'^(.+[.!?])')


class GenerationError(RuntimeError):
    pass


def trim_to_sentence(text):
    """Keeps the longest leading run of text that ends a sentence."""
    match = SENTENCE_RE.match(text)
    if not match:
        return ""
    return match.group(1).strip()


def generate_post(chain, num_words, rng, max_tries=config.DEFAULT_MAX_TRIES, trim=True):
    if not chain.chain:
        raise GenerationError("Chain is empty. Build it from a corpus first.")

    for attempt in range(1, max_tries + 1):
        text = chain.generate(num_words, rng)
        if trim:
            text = trim_to_sentence(text)
        else:
            text = text.strip()
        if text:
            logging.debug(f"Generated post on attempt {attempt}")
            return text
    raise GenerationError(f"No usable text after {max_tries} attempts")


def next_post_delay(rng):
    seconds = rng.randrange(config.MIN_POST_DELAY, config.MAX_POST_DELAY)
    return datetime.timedelta(seconds=seconds)


@click.command()
@click.option('--corpus', type=click.Path(dir_okay=False, path_type=Path), default=config.CORPUS_PATH,
              show_default=True, help="Path to the training corpus file.")
@click.option('--words', 'num_words', type=click.IntRange(min=0), default=config.DEFAULT_NUM_WORDS,
              show_default=True, help="Maximum number of words per post.")
@click.option('--prefix', 'prefix_len', type=click.IntRange(min=1), default=config.DEFAULT_PREFIX_LEN,
              show_default=True, help="Prefix length in words.")
@click.option('--count', type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of posts to generate.")
@click.option('--max-tries', type=click.IntRange(min=1), default=config.DEFAULT_MAX_TRIES,
              show_default=True, help="Attempts per post at producing a complete sentence.")
@click.option('--seed', type=int, default=None, help="Seed for a reproducible run.")
@click.option('--raw', is_flag=True, help="Do not trim output to the last complete sentence.")
@click.option('--schedule', is_flag=True, help="Show when each post would go out.")
@click.option('--verbose', '-v', is_flag=True, help="Enable debug logging.")
def main(corpus, num_words, prefix_len, count, max_tries, seed, raw, schedule, verbose):
    """
    Builds a Markov chain from CORPUS and prints randomly generated posts.
    """
    setup_logging(verbose)

    try:
        chunks = load_corpus(corpus)
    except FileNotFoundError:
        click.secho(f"Error: Corpus file not found at {corpus}", fg='red')
        sys.exit(1)

    rng = seed_random(seed)
    chain = build_chain(chunks, prefix_len, progress=verbose)

    when = datetime.datetime.now()
    for i in range(count):
        try:
            post = generate_post(chain, num_words, rng, max_tries=max_tries, trim=not raw)
        except GenerationError as e:
            click.secho(f"Error: {e}", fg='red')
            sys.exit(1)

        if schedule:
            click.echo(f"[{when:%Y-%m-%d %H:%M:%S}] {post}")
            delay = next_post_delay(rng)
            logging.info(f"post {i + 1} / {count}, next in {delay}")
            when += delay
        else:
            click.echo(post)


if __name__ == '__main__':
    main()
