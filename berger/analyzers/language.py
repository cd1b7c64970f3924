"""Dominant-language detection over inbox subject lines.

Each subject is scored against per-language sets of common function words.
Subjects are stride-sampled to bound the cost; the sampling is deterministic,
so results are reproducible.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from berger.envelope import Envelope

# The minimum number of subjects to detect, when the inbox has that many.
SAMPLE_FLOOR = 50

_WORD = re.compile(r"[^\W\d_]+")

# Common function words per ISO 639-3 language code.
_FUNCTION_WORDS: dict[str, frozenset[str]] = {
    "eng": frozenset(
        "the a an and or of to in on at for with from by is are was were be been "
        "will would can could this that these those it its you your we our they "
        "their he she his her please thank thanks have has not all new next".split()
    ),
    "fra": frozenset(
        "le la les un une des du de et ou à au aux en dans pour par sur avec sans "
        "est sont sera été ce cette ces que qui vous votre vos nous notre nos il "
        "elle ils leur merci bonjour pas plus ne se sa son ses avons avez".split()
    ),
    "deu": frozenset(
        "der die das den dem des ein eine einer und oder zu im in auf für mit von "
        "ist sind war wird werden nicht sie wir ihr ihre unser bitte danke ich "
        "es auch bei nach aus".split()
    ),
    "spa": frozenset(
        "el la los las un una unos unas y o de del en con por para es son fue "
        "será que se su sus nuestro nuestra usted gracias por favor muy pero "
        "al lo como".split()
    ),
    "ita": frozenset(
        "il lo la i gli le un una e o di del della dei in con per su è sono "
        "sarà che si suo sua nostro nostra grazie non più anche come".split()
    ),
    "por": frozenset(
        "o a os as um uma e ou de do da dos das em no na com por para é são "
        "será que se seu sua nosso nossa obrigado você não mais como".split()
    ),
    "nld": frozenset(
        "de het een en of van in op voor met is zijn was wordt niet wij we u uw "
        "onze ons dank bedankt ook bij naar dat die".split()
    ),
}


@dataclass(frozen=True)
class LanguageShare:
    """One detected language (ISO 639-3) and its share of detected subjects."""

    language: str
    share: float


def detect_language(text: str) -> str | None:
    """The ISO 639-3 code of the language ``text`` reads as, or ``None``.

    ``None`` is returned when no known function word occurs. Ties go to the
    language with the lower code.
    """
    words = _WORD.findall(text.lower())
    if not words:
        return None
    scores = {
        language: sum(word in vocabulary for word in words)
        for language, vocabulary in _FUNCTION_WORDS.items()
    }
    best_language, best_score = min(
        scores.items(), key=lambda item: (-item[1], item[0])
    )
    return best_language if best_score > 0 else None


def detect_languages(inbox: Iterable[Envelope]) -> list[LanguageShare]:
    """Each detected language's share of a stride sample of subjects.

    The most common language comes first; ties are broken by language code.
    """
    envelopes = list(inbox)
    if not envelopes:
        return []
    total = len(envelopes)
    target = total if total <= SAMPLE_FLOOR else max(total // 10, SAMPLE_FLOOR)
    stride = max(total // target, 1)

    counts = Counter(
        language
        for language in (detect_language(e.subject) for e in envelopes[::stride])
        if language is not None
    )
    detected = sum(counts.values())
    if detected == 0:
        return []
    shares = [
        LanguageShare(language=language, share=count / detected)
        for language, count in counts.items()
    ]
    shares.sort(key=lambda share: (-share.share, share.language))
    return shares