import re

from nltk.tokenize import WhitespaceTokenizer

WHITESPACE = re.compile("\\s+")


def norm(text) -> str:
    if text is None:
        return ""
    return re.sub(WHITESPACE, " ", str(text)).strip()


def norm_lower(text) -> str:
    return norm(text).lower()


def last_name_of(full_name) -> str:
    tokens = WhitespaceTokenizer().tokenize(norm(full_name))
    return tokens[-1] if tokens else ""
