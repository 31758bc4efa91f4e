from swisp.reader.parser import tokenize, read_from, atom, parse

__all__ = ["tokenize", "read_from", "atom", "parse"]
