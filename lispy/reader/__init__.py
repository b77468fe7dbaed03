from lispy.reader.parser import tokenize, parse, parse_all, TokenStream

__all__ = ["tokenize", "parse", "parse_all", "TokenStream"]
