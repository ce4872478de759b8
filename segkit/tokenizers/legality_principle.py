"""Syllabification by the Legality Principle with Onset Maximization.

A syllable onset is legal only if it also occurs as a word onset in the
language, so "admit" splits as "ad-mit" because "dm" never starts an English
word. Among legal onsets the longest is preferred. Legal onsets are learned
from a list of words; vowels default to English but can be any alphabet,
including IPA.

Words are walked by grapheme cluster, so combining marks stay with their
base letter.

References:
  - Daniel Kahn, Syllable-based generalizations in English phonology, MIT, 1976.
  - Susan Bartlett et al., On the Syllabification of Phonemes, HLT-NAACL 2009.
"""
from typing import Iterable, Iterator

from segkit.probability import FreqDist
from segkit.segment.grapheme import graphemes
from segkit.tokenizers.api import TokenizerI

VOWELS = "aeiouy"


class LegalitySyllableTokenizer(TokenizerI):
    """Split single words into syllables.

    >>> lp = LegalitySyllableTokenizer(["won", "der", "ful", "sen", "ten", "ce"])
    >>> lp.tokenize("wonderful")
    ['won', 'der', 'ful']
    """

    def __init__(self, tokenized_source_text: Iterable[str], vowels: str = VOWELS,
                 legal_frequency_threshold: float = 0.001):
        self.vowels = vowels
        self.legal_frequency_threshold = legal_frequency_threshold
        self.legal_onsets = self.find_legal_onsets(tokenized_source_text)

    def _is_vowel(self, cluster: str) -> bool:
        return cluster[0].lower() in self.vowels

    def onset(self, word: str) -> str:
        """Consonant clusters before the first vowel; empty if word starts with one."""
        head = []
        for cluster in graphemes(word):
            if self._is_vowel(cluster):
                break
            head.append(cluster)
        return "".join(head).lower()

    def find_legal_onsets(self, words: Iterable[str]) -> set[str]:
        """Onsets whose relative frequency in words exceeds the threshold."""
        onsets = FreqDist(self.onset(word) for word in words)
        return {onset for onset in onsets if onsets.freq(onset) > self.legal_frequency_threshold}

    def tokenize(self, token: str) -> list[str]:
        """Syllables of a single word, scanning right to left."""
        if not token:
            return []
        syllables = []
        syllable: list[str] = []
        current_onset = ""
        vowel = onset = False
        for cluster in reversed(graphemes(token)):
            lower = cluster.lower()
            if not vowel:
                syllable.append(cluster)
                vowel = self._is_vowel(cluster)
            elif lower + current_onset in self.legal_onsets:
                syllable.append(cluster)
                current_onset = lower + current_onset
                onset = True
            elif self._is_vowel(cluster) and not onset:
                syllable.append(cluster)
                current_onset = lower + current_onset
            else:
                syllables.append(syllable)
                syllable = [cluster]
                current_onset = ""
                onset = False
                vowel = self._is_vowel(cluster)
        syllables.append(syllable)
        return ["".join(reversed(s)) for s in reversed(syllables)]

    def span_tokenize(self, s: str) -> Iterator[tuple[int, int]]:
        start = 0
        for syllable in self.tokenize(s):
            yield start, start + len(syllable)
            start += len(syllable)
