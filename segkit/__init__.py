"""segkit: Unicode text segmentation (UAX #29) for NLP pipelines."""
from segkit.errors import DecodeError, MismatchError, SegmentationError
from segkit.probability import FreqDist, UniformProbDist
from segkit.segment.grapheme import graphemes, segment_graphemes
from segkit.segment.sentence import segment_sentences, sentences
from segkit.segment.spans import Segmentation, Span
from segkit.segment.word import segment_words, unicode_words
from segkit.unicode.properties import RULES_VERSION, UNICODE_VERSION, BreakProperty, property_of

__version__ = "0.1.0"

__all__ = [
    "segment_graphemes", "segment_words", "segment_sentences",
    "graphemes", "unicode_words", "sentences",
    "property_of", "BreakProperty", "UNICODE_VERSION", "RULES_VERSION",
    "Segmentation", "Span",
    "SegmentationError", "DecodeError", "MismatchError",
    "FreqDist", "UniformProbDist",
]
