import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from .. import config
from ..utils import setup_logging
from .markov_chain import Chain


def load_corpus(corpus_path):
    """Reads the corpus and splits it into line-delimited chunks."""
    corpus_path = Path(corpus_path)
    with open(corpus_path, 'r', encoding='utf-8', errors='replace') as f:
        content = f.read().strip()
    chunks = content.split('\n')
    logging.info(f"Loaded {len(chunks)} chunks from {corpus_path}")
    return chunks


def build_chain(chunks, prefix_len=config.DEFAULT_PREFIX_LEN, progress=True):
    # Each chunk is built separately so the prefix window resets per line
    chain = Chain(prefix_len)
    for chunk in tqdm(chunks, desc="Building chain", disable=not progress):
        chain.build(chunk)
    logging.info(f"Built chain (prefix {prefix_len}) from {len(chunks)} chunks")
    return chain


def summarize(chain):
    return {
        'prefixes': len(chain.chain),
        'suffixes': sum(len(suffixes) for suffixes in chain.chain.values()),
        'words': len(chain.words),
    }


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build a Markov chain from a text corpus and report its size.")
    parser.add_argument('--corpus', type=Path, default=config.CORPUS_PATH,
                        help="Path to the training corpus file.")
    parser.add_argument('--prefix', type=positive_int, default=config.DEFAULT_PREFIX_LEN,
                        help="Prefix length in words.")
    args = parser.parse_args(argv)

    setup_logging()

    if not args.corpus.exists():
        print(f"Error: Corpus file not found at {args.corpus}")
        return 1

    chain = build_chain(load_corpus(args.corpus), args.prefix)
    stats = summarize(chain)
    print(f"Prefixes: {stats['prefixes']}")
    print(f"Suffixes: {stats['suffixes']}")
    print(f"Distinct words: {stats['words']}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
