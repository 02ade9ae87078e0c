"""Tokenizers and filters referenced by custom analyzers.

Only the component names end up in an analyzer definition, so each
component is a small immutable value carrying its name. Filters come in two
kinds: token filters rewrite the token stream, char filters rewrite the raw
text before tokenization.
"""

import msgspec


class Tokenizer(msgspec.Struct, frozen=True):
    """A named component that splits text into tokens."""

    name: str


class AnalyzerFilter(msgspec.Struct, frozen=True):
    """Base for the filters an analyzer applies."""

    name: str


class TokenFilter(AnalyzerFilter, frozen=True):
    """A filter applied to the token stream."""


class CharFilter(AnalyzerFilter, frozen=True):
    """A filter applied to the raw text before tokenization."""


# Built-in tokenizers
STANDARD_TOKENIZER = Tokenizer("standard")
WHITESPACE_TOKENIZER = Tokenizer("whitespace")
KEYWORD_TOKENIZER = Tokenizer("keyword")
LETTER_TOKENIZER = Tokenizer("letter")
LOWERCASE_TOKENIZER = Tokenizer("lowercase")
PATTERN_TOKENIZER = Tokenizer("pattern")
UAX_URL_EMAIL_TOKENIZER = Tokenizer("uax_url_email")
PATH_HIERARCHY_TOKENIZER = Tokenizer("path_hierarchy")
CLASSIC_TOKENIZER = Tokenizer("classic")
THAI_TOKENIZER = Tokenizer("thai")
NGRAM_TOKENIZER = Tokenizer("ngram")
EDGE_NGRAM_TOKENIZER = Tokenizer("edge_ngram")

# Built-in token filters
LOWERCASE_FILTER = TokenFilter("lowercase")
UPPERCASE_FILTER = TokenFilter("uppercase")
ASCII_FOLDING_FILTER = TokenFilter("asciifolding")
TRIM_FILTER = TokenFilter("trim")
PORTER_STEM_FILTER = TokenFilter("porter_stem")
KSTEM_FILTER = TokenFilter("kstem")
REVERSE_FILTER = TokenFilter("reverse")
UNIQUE_FILTER = TokenFilter("unique")
STOP_FILTER = TokenFilter("stop")
SNOWBALL_FILTER = TokenFilter("snowball")
SHINGLE_FILTER = TokenFilter("shingle")
WORD_DELIMITER_FILTER = TokenFilter("word_delimiter")

# Built-in char filters
HTML_STRIP_CHAR_FILTER = CharFilter("html_strip")

BUILTIN_TOKENIZERS = {
    t.name: t
    for t in (
        STANDARD_TOKENIZER,
        WHITESPACE_TOKENIZER,
        KEYWORD_TOKENIZER,
        LETTER_TOKENIZER,
        LOWERCASE_TOKENIZER,
        PATTERN_TOKENIZER,
        UAX_URL_EMAIL_TOKENIZER,
        PATH_HIERARCHY_TOKENIZER,
        CLASSIC_TOKENIZER,
        THAI_TOKENIZER,
        NGRAM_TOKENIZER,
        EDGE_NGRAM_TOKENIZER,
    )
}

BUILTIN_TOKEN_FILTERS = {
    f.name: f
    for f in (
        LOWERCASE_FILTER,
        UPPERCASE_FILTER,
        ASCII_FOLDING_FILTER,
        TRIM_FILTER,
        PORTER_STEM_FILTER,
        KSTEM_FILTER,
        REVERSE_FILTER,
        UNIQUE_FILTER,
        STOP_FILTER,
        SNOWBALL_FILTER,
        SHINGLE_FILTER,
        WORD_DELIMITER_FILTER,
    )
}

BUILTIN_CHAR_FILTERS = {HTML_STRIP_CHAR_FILTER.name: HTML_STRIP_CHAR_FILTER}


def tokenizer(name: str) -> Tokenizer:
    """Get a built-in tokenizer by name, or reference a custom one."""
    return BUILTIN_TOKENIZERS.get(name) or Tokenizer(name)


def token_filter(name: str) -> TokenFilter:
    """Get a built-in token filter by name, or reference a custom one."""
    return BUILTIN_TOKEN_FILTERS.get(name) or TokenFilter(name)


def char_filter(name: str) -> CharFilter:
    """Get a built-in char filter by name, or reference a custom one."""
    return BUILTIN_CHAR_FILTERS.get(name) or CharFilter(name)
