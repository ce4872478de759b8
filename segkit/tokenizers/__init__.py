"""Span tokenizers built on the segmentation engines."""
from .api import StringTokenizer, TokenizerI
from .legality_principle import LegalitySyllableTokenizer
from .simple import CharTokenizer, LineTokenizer, SpaceTokenizer, TabTokenizer, line_tokenize
from .util import align_tokens, regexp_span_tokenize, spans_to_relative, string_span_tokenize

__all__ = [
    "TokenizerI", "StringTokenizer",
    "LegalitySyllableTokenizer",
    "SpaceTokenizer", "TabTokenizer", "CharTokenizer", "LineTokenizer", "line_tokenize",
    "string_span_tokenize", "regexp_span_tokenize", "spans_to_relative", "align_tokens",
]
