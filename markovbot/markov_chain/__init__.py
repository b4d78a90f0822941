from .markov_chain import Chain, Prefix, tokenize
