"""
Lexical emotion classifier.

Scores a passage sentence by sentence against the emotion lexicons, with
intensifier boosting, diffuse negation, a recency bias toward later sentences
and a boost for sentences containing a contrastive transition word. The result
is a normalized multi-emotion blend plus a bodily-intensity scalar.
"""

import logging
import re
from typing import Dict, List, Mapping

from emotropy.emotions import lexicon
from emotropy.emotions.contracts import BlendEntry, ClassificationResult
from emotropy.emotions.tags import EmotionTag

logger = logging.getLogger(__name__)

BLEND_THRESHOLD = 0.16
INTENSIFIER_MULTIPLIER = 1.6
NEGATION_SPILL = 0.2
TRANSITION_BOOST = 1.3
LOOKBEHIND = 2

BODILY_BASE = 0.8
BODILY_SCALE = 0.7
BODILY_MAX = 2.2

DEFAULT_TAG = EmotionTag.IDLE

_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
_TOKEN = re.compile(r"\w+")


def split_sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def tokenize(sentence: str) -> List[str]:
    return _TOKEN.findall(sentence.lower())


class EmotionClassifier:
    """
    Turns free text into a :class:`ClassificationResult`.

    The word tables are injectable so that tests (or alternative vocabularies)
    can run the same scoring rules over a smaller lexicon. An instance holds no
    per-call state; ``classify`` is pure.
    """

    def __init__(
        self,
        lexicons: Mapping[EmotionTag, Mapping[str, float]] = lexicon.LEXICONS,
        bodily_lexicon: Mapping[str, float] = lexicon.BODILY_LEXICON,
        negations=lexicon.NEGATION_WORDS,
        intensifiers=lexicon.INTENSIFIERS,
        transitions=lexicon.TRANSITION_WORDS,
        blend_threshold: float = BLEND_THRESHOLD,
    ):
        self.lexicons = lexicons
        self.bodily_lexicon = bodily_lexicon
        self.negations = negations
        self.intensifiers = intensifiers
        self.transitions = transitions
        self.blend_threshold = blend_threshold

    def idle_result(self) -> ClassificationResult:
        """The fixed result for empty input."""
        return ClassificationResult(
            dominant=DEFAULT_TAG,
            confidence=0.5,
            blend=[BlendEntry(tag=DEFAULT_TAG, weight=1.0)],
            bodily=1.0,
            raw_score_total=0.0,
        )

    def classify(self, text: str) -> ClassificationResult:
        if not isinstance(text, str) or not text.strip():
            return self.idle_result()

        sentences = split_sentences(text)
        totals: Dict[EmotionTag, float] = {tag: 0.0 for tag in self.lexicons}
        bodily_total = 0.0
        bodily_weight = 0.0

        for index, sentence in enumerate(sentences):
            scores, bodily_sum, bodily_count, has_transition = self._score_sentence(tokenize(sentence))

            # Later sentences describe the current state better than earlier ones.
            position_weight = 1.0 + index / len(sentences)
            boost = TRANSITION_BOOST if has_transition else 1.0
            final_weight = position_weight * boost

            for tag, score in scores.items():
                totals[tag] += score * final_weight

            if bodily_count > 0:
                bodily_total += (bodily_sum / bodily_count) * final_weight
                bodily_weight += final_weight

        bodily = 1.0
        if bodily_weight > 0:
            bodily = min(BODILY_MAX, BODILY_BASE + (bodily_total / bodily_weight) * BODILY_SCALE)

        raw_total = sum(totals.values())
        if raw_total == 0:
            logger.debug("No lexicon match in %d sentence(s).", len(sentences))
            return ClassificationResult(
                dominant=DEFAULT_TAG,
                confidence=0.0,
                blend=[BlendEntry(tag=DEFAULT_TAG, weight=1.0)],
                bodily=bodily,
                raw_score_total=0.0,
                scores=totals,
            )

        # sorted() is stable, so ties keep lexicon order.
        shares = sorted(
            ((tag, score / raw_total) for tag, score in totals.items()),
            key=lambda item: item[1],
            reverse=True,
        )
        dominant, confidence = shares[0]

        kept = [(tag, share) for tag, share in shares if share >= self.blend_threshold]
        kept_total = sum(share for _, share in kept)
        blend = [BlendEntry(tag=tag, weight=share / kept_total) for tag, share in kept]
        if not blend:
            blend = [BlendEntry(tag=dominant, weight=1.0)]

        return ClassificationResult(
            dominant=dominant,
            confidence=confidence,
            blend=blend,
            bodily=bodily,
            raw_score_total=raw_total,
            scores=totals,
        )

    def _score_sentence(self, tokens: List[str]):
        scores = {tag: 0.0 for tag in self.lexicons}
        bodily_sum = 0.0
        bodily_count = 0
        has_transition = False

        for i, token in enumerate(tokens):
            if token in self.transitions:
                has_transition = True

            previous = tokens[max(0, i - LOOKBEHIND):i]
            negated = any(word in self.negations for word in previous)
            intensified = any(word in self.intensifiers for word in previous)
            multiplier = INTENSIFIER_MULTIPLIER if intensified else 1.0

            for tag, table in self.lexicons.items():
                if token not in table:
                    continue
                weight = table[token] * multiplier
                if negated:
                    # A negated emotion leaks a little into every other emotion.
                    for other in scores:
                        if other is not tag:
                            scores[other] += weight * NEGATION_SPILL
                else:
                    scores[tag] += weight

            if token in self.bodily_lexicon:
                bodily_sum += self.bodily_lexicon[token]
                bodily_count += 1

        return scores, bodily_sum, bodily_count, has_transition


_default_classifier = EmotionClassifier()


def classify(text: str) -> ClassificationResult:
    """Classifies ``text`` with the built-in lexicons."""
    return _default_classifier.classify(text)
