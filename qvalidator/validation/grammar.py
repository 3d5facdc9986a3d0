"""
Grammatical variation detection.

Catches same-content questions whose surface grammar differs: reordered
tokens once tense/frequency markers are dropped, active vs passive voice,
and "from PLACE" vs the place's demonym. Inputs are normalized strings.

Precision over recall: a false duplicate silently blocks a legitimate
question, a missed one only costs the player a turn.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# tense/voice markers and frequency adverbs, ignored for reordering
TENSE_MARKERS = frozenset({
    "do", "does", "did", "will", "would", "have", "has", "had", "been", "being",
    "currently", "now", "still", "today", "every", "most", "all",
})

PRESENT_MARKERS = frozenset({"currently", "now", "still", "today", "presently"})
PAST_MARKERS = frozenset({"previously", "formerly", "former", "once", "ever", "ago"})

REORDER_THRESHOLD = 0.7


@dataclass(frozen=True)
class GrammarMatch:
    """Why two questions were judged grammatical variants."""

    kind: str  # "reordering", "voice", "origin"
    detail: str


def _jaccard(a: set[str], b: set[str]) -> float:
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


# ============ Tense shift ============

def detect_tense_shift(norm_a: str, norm_b: str) -> bool:
    """Same content, one asked in the present and the other in the past.

    Not a duplicate: "currently active" and "formerly active" have
    different answers for a retired player.
    """
    words_a, words_b = set(norm_a.split()), set(norm_b.split())

    shifted = (
        (words_a & PRESENT_MARKERS and words_b & PAST_MARKERS)
        or (words_b & PRESENT_MARKERS and words_a & PAST_MARKERS)
    )
    if not shifted:
        return False

    drop = TENSE_MARKERS | PRESENT_MARKERS | PAST_MARKERS
    content_a = {t for t in words_a - drop if len(t) > 2}
    content_b = {t for t in words_b - drop if len(t) > 2}
    return bool(content_a) and content_a == content_b


# ============ Reordering ============

def _canonical_tokens(norm: str) -> set[str]:
    return {t for t in norm.split() if t not in TENSE_MARKERS and len(t) > 2}


def _check_reordering(norm_a: str, norm_b: str) -> Optional[GrammarMatch]:
    if detect_tense_shift(norm_a, norm_b):
        return None

    canon_a = _canonical_tokens(norm_a)
    canon_b = _canonical_tokens(norm_b)
    score = _jaccard(canon_a, canon_b)

    if score > REORDER_THRESHOLD:
        return GrammarMatch(
            kind="reordering",
            detail=f"'{' '.join(sorted(canon_a))}' ~ '{' '.join(sorted(canon_b))}' ({score:.2f})",
        )
    return None


# ============ Active / passive ============

# lemma -> (active forms, passive participle)
_VERB_FORMS: dict[str, tuple[tuple[str, ...], str]] = {
    "serve": (("serve", "serves", "served", "serving"), "served"),
    "use": (("use", "uses", "used", "using"), "used"),
    "play": (("play", "plays", "played", "playing"), "played"),
    "lead": (("lead", "leads", "led", "leading"), "led"),
    "own": (("own", "owns", "owned", "owning"), "owned"),
    "make": (("make", "makes", "made", "making"), "made"),
    "build": (("build", "builds", "built", "building"), "built"),
    "elect": (("elect", "elects", "elected", "electing"), "elected"),
    "watch": (("watch", "watches", "watched", "watching"), "watched"),
    "love": (("love", "loves", "loved", "loving"), "loved"),
    "know": (("know", "knows", "knew", "knowing"), "known"),
    "wear": (("wear", "wears", "wore", "wearing"), "worn"),
    "drive": (("drive", "drives", "drove", "driving"), "driven"),
    "eat": (("eat", "eats", "ate", "eating"), "eaten"),
    "hunt": (("hunt", "hunts", "hunted", "hunting"), "hunted"),
    "ride": (("ride", "rides", "rode", "riding"), "ridden"),
    "coach": (("coach", "coaches", "coached", "coaching"), "coached"),
    "view": (("view", "views", "viewed", "viewing"), "viewed"),
    "consider": (("consider", "considers", "considered", "considering"), "considered"),
    "invent": (("invent", "invents", "invented", "inventing"), "invented"),
}

_ACTIVE_LEMMA = {form: lemma for lemma, (forms, _) in _VERB_FORMS.items() for form in forms}
_PARTICIPLE_LEMMA = {participle: lemma for lemma, (_, participle) in _VERB_FORMS.items()}


@dataclass(frozen=True)
class _VoiceFrame:
    voice: str
    lemma: str
    agent: frozenset[str]
    patient: frozenset[str]


def _voice_frame(norm: str) -> Optional[_VoiceFrame]:
    words = norm.split()

    # passive: <patient> <participle> by <agent>
    for i in range(len(words) - 2):
        if words[i + 1] == "by" and words[i] in _PARTICIPLE_LEMMA:
            return _VoiceFrame(
                voice="passive",
                lemma=_PARTICIPLE_LEMMA[words[i]],
                agent=frozenset(words[i + 2:]),
                patient=frozenset(words[:i]),
            )

    if "by" in words:
        return None

    # active: <agent> <verb> <patient>
    for i, word in enumerate(words):
        if word in _ACTIVE_LEMMA:
            return _VoiceFrame(
                voice="active",
                lemma=_ACTIVE_LEMMA[word],
                agent=frozenset(words[:i]),
                patient=frozenset(words[i + 1:]),
            )
    return None


def _check_voice(norm_a: str, norm_b: str) -> Optional[GrammarMatch]:
    frame_a = _voice_frame(norm_a)
    frame_b = _voice_frame(norm_b)
    if frame_a is None or frame_b is None or frame_a.voice == frame_b.voice:
        return None

    # agent must be explicit on both sides, otherwise we are guessing
    if (
        frame_a.lemma == frame_b.lemma
        and frame_a.agent
        and frame_a.agent == frame_b.agent
        and frame_a.patient == frame_b.patient
    ):
        return GrammarMatch(
            kind="voice",
            detail=f"active/passive forms of '{frame_a.lemma}' by '{' '.join(sorted(frame_a.agent))}'",
        )
    return None


# ============ Origin vs demonym ============

_PLACE_FORMS: list[tuple[str, tuple[str, ...]]] = [
    ("europe", ("european",)),
    ("asia", ("asian",)),
    ("africa", ("african",)),
    ("america", ("american",)),
    ("north america", ("north american",)),
    ("south america", ("south american",)),
    ("latin america", ("latin american",)),
    ("australia", ("australian",)),
    ("india", ("indian",)),
    ("china", ("chinese",)),
    ("japan", ("japanese",)),
    ("england", ("english",)),
    ("britain", ("british",)),
    ("united kingdom", ()),
    ("france", ("french",)),
    ("germany", ("german",)),
    ("italy", ("italian",)),
    ("spain", ("spanish",)),
    ("portugal", ("portuguese",)),
    ("russia", ("russian",)),
    ("brazil", ("brazilian",)),
    ("argentina", ("argentinian", "argentine")),
    ("mexico", ("mexican",)),
    ("canada", ("canadian",)),
    ("pakistan", ("pakistani",)),
    ("bangladesh", ("bangladeshi",)),
    ("sri lanka", ("sri lankan",)),
    ("new zealand", ("new zealander",)),
    ("south africa", ("south african",)),
    ("west indies", ("west indian",)),
    ("netherlands", ("dutch",)),
    ("egypt", ("egyptian",)),
    ("israel", ("israeli",)),
    ("nigeria", ("nigerian",)),
    ("kenya", ("kenyan",)),
]

_PLACES: dict[str, str] = {}
_DEMONYMS: set[str] = set()
for _place, _demonyms in _PLACE_FORMS:
    _PLACES[_place] = _place
    for _demonym in _demonyms:
        _PLACES[_demonym] = _place
        _DEMONYMS.add(_demonym)

# words that turn a bare place name into an origin question
_ORIGIN_MARKERS = frozenset({
    "from", "born", "come", "comes", "came", "native", "originate", "originates",
    "originated", "originally", "represent", "represents", "represented", "representing",
    "hail", "hails",
})
_ORIGIN_FILLER = _ORIGIN_MARKERS | {"in", "of", "to"}


def _origin(norm: str) -> Optional[str]:
    words = norm.split()
    residual = " ".join(w for w in words if w not in _ORIGIN_FILLER)
    place = _PLACES.get(residual)
    if place is None:
        return None

    # "in africa" is a location question, "african" or "from africa" is origin
    if residual not in _DEMONYMS and not any(w in _ORIGIN_MARKERS for w in words):
        return None
    return place


def _check_origin(norm_a: str, norm_b: str) -> Optional[GrammarMatch]:
    origin_a = _origin(norm_a)
    if origin_a is None:
        return None
    if origin_a == _origin(norm_b):
        return GrammarMatch(kind="origin", detail=f"both ask about origin in {origin_a}")
    return None


def detect_variation(norm_a: str, norm_b: str) -> Optional[GrammarMatch]:
    """Return a GrammarMatch if the two normalized questions are grammatical variants."""
    if not norm_a or not norm_b:
        return None

    for check in (_check_origin, _check_voice, _check_reordering):
        match = check(norm_a, norm_b)
        if match is not None:
            logger.debug(f"grammar variation ({match.kind}): '{norm_a}' / '{norm_b}'")
            return match
    return None


__all__ = [
    "TENSE_MARKERS",
    "PRESENT_MARKERS",
    "PAST_MARKERS",
    "GrammarMatch",
    "detect_tense_shift",
    "detect_variation",
]
