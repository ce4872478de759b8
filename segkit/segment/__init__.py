"""UAX #29 boundary engines: grapheme clusters, words, sentences."""
from .grapheme import RuleState, is_boundary, iter_grapheme_spans, segment_graphemes
from .sentence import iter_sentence_spans, segment_sentences
from .spans import Segmentation, Span
from .word import iter_word_spans, segment_words

__all__ = [
    "RuleState", "is_boundary", "iter_grapheme_spans", "segment_graphemes",
    "iter_word_spans", "segment_words", "iter_sentence_spans", "segment_sentences",
    "Segmentation", "Span",
]
