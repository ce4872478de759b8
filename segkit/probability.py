"""Frequency and probability distributions over segmented samples.

FreqDist counts how often each sample (a word, a grapheme cluster, an onset)
occurs. ProbDistI is the interface for distributions that map samples to
probabilities; UniformProbDist and RandomProbDist are the analytic ones.
"""
import math
import random
from abc import ABC, abstractmethod
from collections import Counter, defaultdict
from typing import Hashable, Iterable

# Below this difference (in log2 space) the smaller term of a sum is dropped.
_ADD_LOGS_MAX_DIFF = math.log(1e-30, 2)


def add_logs(logx: float, logy: float) -> float:
    """Return log2(2**logx + 2**logy) without overflowing."""
    if logx < logy + _ADD_LOGS_MAX_DIFF:
        return logy
    if logy < logx + _ADD_LOGS_MAX_DIFF:
        return logx
    base = min(logx, logy)
    return base + math.log(2 ** (logx - base) + 2 ** (logy - base), 2)


def sum_logs(logs: Iterable[float]) -> float:
    total = -math.inf
    for value in logs:
        total = add_logs(total, value) if total != -math.inf else value
    return total


class FreqDist(Counter):
    """A frequency distribution for the outcomes of an experiment.

    >>> fd = FreqDist(["apple", "banana", "apple", "apple", "pineapple"])
    >>> fd.N(), fd.B()
    (5, 3)
    >>> sorted(fd.hapaxes())
    ['banana', 'pineapple']
    """

    def N(self) -> int:
        """Total number of outcomes recorded."""
        return sum(self.values())

    def B(self) -> int:
        """Number of bins (distinct samples) with a non-zero count."""
        return len(self)

    def add(self, sample: Hashable, count: int = 1) -> "FreqDist":
        self[sample] += count
        return self

    def hapaxes(self) -> list:
        """Samples that occur exactly once."""
        return [sample for sample, count in self.items() if count == 1]

    def r_Nr(self, bins: int | None = None) -> dict[int, int]:
        """Map each frequency r to Nr, the number of samples seen r times.

        When bins is given, Nr[0] is the number of the bins never seen.
        """
        nr = defaultdict(int)
        for count in self.values():
            nr[count] += 1
        nr[0] = bins - self.B() if bins is not None else 0
        return nr

    def Nr(self, r: int, bins: int | None = None) -> int:
        return self.r_Nr(bins)[r]

    def freq(self, sample: Hashable) -> float:
        n = self.N()
        if n == 0:
            return 0.0
        return self[sample] / n

    def max(self):
        """The most frequent sample; ties are broken by first insertion."""
        if not self:
            raise ValueError("A FreqDist must have at least one sample before max is defined")
        return self.most_common(1)[0][0]

    def __add__(self, other):
        return self.__class__(super().__add__(other))

    def __sub__(self, other):
        return self.__class__(super().__sub__(other))

    def __or__(self, other):
        return self.__class__(super().__or__(other))

    def __and__(self, other):
        return self.__class__(super().__and__(other))

    def __repr__(self):
        return f"<FreqDist with {self.B()} samples and {self.N()} outcomes>"


class ProbDistI(ABC):
    """A probability distribution for the outcomes of an experiment."""

    SUM_TO_ONE = True

    @abstractmethod
    def prob(self, sample) -> float:
        """Probability of sample, in [0, 1]."""

    @abstractmethod
    def max(self):
        """The sample with the greatest probability."""

    @abstractmethod
    def samples(self) -> list:
        """All samples with non-zero probability."""

    def logprob(self, sample) -> float | None:
        """Base 2 log of prob(sample); None when the probability is zero."""
        p = self.prob(sample)
        return math.log(p, 2) if p != 0 else None

    def discount(self) -> float:
        return 0.0

    def generate(self, rng: random.Random | None = None):
        """Draw one sample with probability prob(sample)."""
        rng = rng or random
        p = rng.random()
        samples = self.samples()
        for sample in samples:
            p -= self.prob(sample)
            if p <= 0:
                return sample
        # Rounding can leave p slightly above zero.
        return rng.choice(samples)


class UniformProbDist(ProbDistI):
    """Equal probability for each of a fixed set of samples, zero elsewhere.

    >>> pd = UniformProbDist(["a", "b", "c", "d"])
    >>> pd.prob("a"), pd.prob("z")
    (0.25, 0.0)
    """

    def __init__(self, samples: Iterable):
        self._samples = list(dict.fromkeys(samples))
        if not self._samples:
            raise ValueError("A uniform probability distribution must have at least one sample")
        self._sampleset = frozenset(self._samples)
        self._prob = 1.0 / len(self._samples)

    def prob(self, sample) -> float:
        return self._prob if sample in self._sampleset else 0.0

    def max(self):
        return self._samples[0]

    def samples(self) -> list:
        return list(self._samples)

    def __repr__(self):
        return f"<UniformProbDist with {len(self._samples)} samples>"


class RandomProbDist(ProbDistI):
    """Random probabilities for a fixed set of samples, normalised to sum to one."""

    def __init__(self, samples: Iterable, seed: int | None = None):
        samples = list(dict.fromkeys(samples))
        if not samples:
            raise ValueError("A probability distribution must have at least one sample")
        rng = random.Random(seed)
        weights = [rng.random() for _ in samples]
        total = sum(weights)
        self._probs = {sample: w / total for sample, w in zip(samples, weights)}

    def prob(self, sample) -> float:
        return self._probs.get(sample, 0.0)

    def max(self):
        return max(self._probs, key=self._probs.get)

    def samples(self) -> list:
        return list(self._probs)

    def __repr__(self):
        return f"<RandomProbDist with {len(self._probs)} samples>"
