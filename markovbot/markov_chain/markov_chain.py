import random


class Prefix:
    """A fixed-width window over the most recent words of a sequence."""

    def __init__(self, prefix_len=2):
        if prefix_len < 1:
            raise ValueError(f"prefix_len must be at least 1, got {prefix_len}")
        # All-empty window marks the start of a sequence
        self._words = [""] * prefix_len

    def __str__(self):
        return " ".join(self._words)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __repr__(self):
        return f"Prefix({self._words!r})"

    def shift(self, word):
        # Drop the first word and append the new one, keeping the length fixed
        self._words[:-1] = self._words[1:]
        self._words[-1] = word


def _as_text(chunk):
    if isinstance(chunk, (bytes, bytearray)):
        return chunk.decode('utf-8', errors='replace')
    if isinstance(chunk, str):
        return chunk
    raise TypeError(f"expected str or bytes, got {type(chunk).__name__}")


def tokenize(source):
    """
    Yields whitespace-delimited tokens from a string, bytes, a text or binary
    stream, or an iterable of tokens. Bytes are decoded as UTF-8.
    """
    if isinstance(source, (str, bytes, bytearray)):
        yield from _as_text(source).split()
        return
    # Streams yield lines, other iterables yield tokens
    for chunk in source:
        yield from _as_text(chunk).split()


class Chain:
    def __init__(self, prefix_len=2):
        if prefix_len < 1:
            raise ValueError(f"prefix_len must be at least 1, got {prefix_len}")
        self.prefix_len = prefix_len
        self.chain = {}
        self.words = set()

    def build(self, source):
        """Reads tokens from source and records every (prefix, suffix) pair."""
        # Tokenize up front so a bad source leaves the chain untouched
        tokens = list(tokenize(source))
        prefix = Prefix(self.prefix_len)
        for token in tokens:
            self.words.add(token)
            self.chain.setdefault(str(prefix), []).append(token)
            prefix.shift(token)

    def generate(self, n, rng=None):
        """
        Returns a string of at most n words sampled from the chain.

        Stops early when the current prefix has no recorded suffixes.
        Suffixes are chosen uniformly from the recorded list, so a word seen
        three times after a prefix is three times as likely as one seen once.
        """
        if rng is None:
            rng = random.Random()

        prefix = Prefix(self.prefix_len)
        result = []
        for _ in range(n):
            choices = self.chain.get(str(prefix))
            if not choices:
                break
            next_word = rng.choice(choices)
            result.append(next_word)
            prefix.shift(next_word)
        return " ".join(result)

    def words_list(self):
        return list(self.words)
