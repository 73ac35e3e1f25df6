"""
Seismic Mood
============

Batch-level severity classification with a normalized intensity.

Scoring (single pass):
    age_hours = (now - occurred_at) / 3.6e6
    recency   = max(0.1, 1 - age_hours / 168)     fades over one week
    energy    = 10 ^ (0.5 * magnitude)
    score     = sum(energy * recency) + 0.5 * total_felt

Bands are checked from most to least severe. The largest magnitude among
events under 48 hours old ("recent biggest") is checked first; the score
and the raw event count are fallbacks.

The description rotates per refresh: it is chosen by hashing the current
epoch second, so repeated calls within one second agree.
"""

import logging
import math
import sys
import time
from typing import Dict, Optional, Sequence, Tuple

from quakepulse.config import MoodThresholds
from quakepulse.models.event import EnrichedEvent
from quakepulse.models.summary import Mood, MoodState
from quakepulse.numeric import safe_pow10


logger = logging.getLogger(__name__)


RECENT_WINDOW_HOURS = 48.0
RECENCY_FADE_HOURS = 168.0
RECENCY_FLOOR = 0.1
FELT_WEIGHT = 0.5

MOOD_DESCRIPTIONS: Dict[Mood, Tuple[str, ...]] = {
    Mood.SERENE: (
        "The Earth rests easy.",
        "Quiet beneath our feet.",
        "A peaceful day on our planet.",
        "The ground holds still.",
    ),
    Mood.QUIET: (
        "Gentle murmurs deep below.",
        "Small tremors, nothing more.",
        "The planet shifts in its sleep.",
        "A few whispers in the crust.",
    ),
    Mood.STIRRING: (
        "Something is building.",
        "The plates are talking.",
        "More movement than usual.",
        "Earth stretches and groans.",
    ),
    Mood.RESTLESS: (
        "The Earth is restless today.",
        "Significant activity detected.",
        "The crust won't stay still.",
        "People felt the ground move.",
    ),
    Mood.VOLATILE: (
        "A powerful event shook the planet.",
        "The Earth released enormous energy.",
        "Major seismic activity. Stay alert.",
        "Strong forces at work beneath us.",
    ),
    Mood.FIERCE: (
        "A historic-level event.",
        "Immense forces have been unleashed.",
        "The planet shuddered.",
        "Extraordinary seismic energy released.",
    ),
}

MOOD_COLORS: Dict[Mood, str] = {
    Mood.SERENE: "#60a5fa",
    Mood.QUIET: "#818cf8",
    Mood.STIRRING: "#a78bfa",
    Mood.RESTLESS: "#f59e0b",
    Mood.VOLATILE: "#ef4444",
    Mood.FIERCE: "#dc2626",
}


def string_hash(text: str) -> int:
    """Non-negative 32-bit polynomial string hash (h = 31 * h + c)."""
    h = 0
    for char in text:
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def pick_description(mood: Mood, now_ms: float) -> str:
    options = MOOD_DESCRIPTIONS[mood]
    bucket = str(int(now_ms // 1000))
    return options[string_hash(bucket) % len(options)]


def score_events(
    events: Sequence[EnrichedEvent],
    now_ms: float,
) -> Tuple[float, float]:
    """
    Accumulate the recency-weighted energy score.

    Returns:
        Tuple of (score, recent_biggest)
    """
    score = 0.0
    recent_biggest = 0.0
    total_felt = 0.0

    for event in events:
        age_hours = event.age_hours(now_ms)
        recency = max(RECENCY_FLOOR, 1.0 - age_hours / RECENCY_FADE_HOURS)
        score += safe_pow10(event.magnitude * 0.5) * recency
        total_felt += float(event.felt or 0)

        if event.magnitude > recent_biggest and age_hours < RECENT_WINDOW_HOURS:
            recent_biggest = event.magnitude

    score += total_felt * FELT_WEIGHT
    if not math.isfinite(score):
        score = sys.float_info.max
    return score, recent_biggest


def classify(
    score: float,
    recent_biggest: float,
    count: int,
    thresholds: MoodThresholds,
) -> Tuple[Mood, float]:
    """Return (mood, intensity) for a non-empty batch."""
    th = thresholds

    if recent_biggest >= th.fierce_min_mag:
        return Mood.FIERCE, min(1.0, 0.85 + recent_biggest / 50)
    if recent_biggest >= th.volatile_min_mag or score > th.volatile_min_score:
        return Mood.VOLATILE, min(1.0, 0.65 + score / 200_000)
    if recent_biggest >= th.restless_min_mag or score > th.restless_min_score:
        return Mood.RESTLESS, min(1.0, 0.45 + score / 80_000)
    if score > th.stirring_min_score or count > th.stirring_min_count:
        return Mood.STIRRING, min(1.0, 0.3 + score / 30_000)
    if count > th.quiet_min_count:
        return Mood.QUIET, min(0.3, 0.1 + count / 200)
    return Mood.SERENE, 0.05


def calculate_mood(
    events: Sequence[EnrichedEvent],
    thresholds: Optional[MoodThresholds] = None,
    now_ms: Optional[float] = None,
) -> MoodState:
    """
    Compute the mood of a batch.

    Args:
        events: Enriched events (may be empty)
        thresholds: Band thresholds
        now_ms: Evaluation time in epoch ms (defaults to now)

    Returns:
        MoodState; an empty batch is serene with zero intensity
    """
    thresholds = thresholds or MoodThresholds()

    if not events:
        return MoodState(
            mood=Mood.SERENE,
            intensity=0.0,
            description=MOOD_DESCRIPTIONS[Mood.SERENE][0],
            color=MOOD_COLORS[Mood.SERENE],
            recent_biggest=0.0,
        )

    if now_ms is None:
        now_ms = time.time() * 1000

    score, recent_biggest = score_events(events, now_ms)
    mood, intensity = classify(score, recent_biggest, len(events), thresholds)

    logger.debug(
        f"Mood: {mood.value} intensity={intensity:.2f} "
        f"score={score:.1f} recent_biggest={recent_biggest:.1f}"
    )

    return MoodState(
        mood=mood,
        intensity=max(0.0, min(1.0, intensity)),
        description=pick_description(mood, now_ms),
        color=MOOD_COLORS[mood],
        recent_biggest=recent_biggest,
    )


GREAT_CONTEXTS = (
    "An event of staggering power. The energy released could level cities "
    "and reshape landscapes. This is the planet reminding us who's in charge.",
    "Historic-class energy release. Somewhere on Earth, the ground opened and "
    "the world shook for minutes. Lives changed in seconds.",
    "The kind of earthquake that makes the news worldwide. Entire regions feel "
    "it. The ocean may have surged.",
)

MAJOR_CONTEXTS = (
    "A major earthquake. Near the epicenter, buildings cracked. People ran "
    "outside. The shaking lasted long enough to feel eternal.",
    "Strong enough to cause serious structural damage. The ground moved in "
    "ways you could see, not just feel.",
    "At this magnitude, the earthquake has a sound. A deep, guttural roar from "
    "below. People don't forget it.",
)


def emotional_context(event: EnrichedEvent, now_ms: Optional[float] = None) -> Optional[str]:
    """
    Short narrative for a single event, or None when nothing stands out.

    Large events pick one of several variants by hashing the event id, so a
    given event always reads the same. Smaller events are described by
    recency (under 1h / 6h), depth (shallow < 20 km, deep > 300 km) and
    felt reports.
    """
    if now_ms is None:
        now_ms = time.time() * 1000

    age_hours = event.age_hours(now_ms)
    very_recent = age_hours < 1
    recent = age_hours < 6
    shallow = event.depth < 20
    deep = event.depth > 300
    variant = string_hash(event.id)

    if event.magnitude >= 7.5:
        text = GREAT_CONTEXTS[variant % len(GREAT_CONTEXTS)]
        if event.tsunami:
            text += " A tsunami warning was issued. Waves may already be traveling."
        return text

    if event.magnitude >= 6:
        text = MAJOR_CONTEXTS[variant % len(MAJOR_CONTEXTS)]
        if shallow:
            text += " Being shallow makes it worse: the energy hits the surface harder."
        return text

    if event.magnitude >= 5:
        if very_recent:
            return ("This just happened. Right now, people near the epicenter are "
                    "checking on each other. Some are standing outside, hearts pounding.")
        if recent:
            return ("Felt over a wide area. Buildings shook. Objects fell off shelves. "
                    "For a few seconds, everyone stopped what they were doing.")
        return ("Strong enough to wake you from sleep. The kind of quake that makes "
                "you grab a doorframe and wonder \"is this the big one?\"")

    if event.magnitude >= 4:
        if shallow:
            return ("Shallow and noticeable. Dishes rattled, dogs barked, and for a "
                    "moment everyone looked at each other with the same question.")
        if deep:
            return ("A deep rumble from far below. You might feel a gentle, rolling "
                    "motion, eerie because it comes from so far down.")
        return ("The kind of quake that pauses conversations. Hanging lights sway. "
                "A low rumble passes through the walls.")

    felt = event.felt or 0
    if felt > 1000:
        return (f"Over {felt:,} people reported feeling this one. That's a whole "
                f"city pausing to wonder what just happened.")
    if felt > 100:
        return (f"{felt:,} people reported feeling this. Somewhere, strangers looked "
                f"at each other and shared a moment of \"did you feel that?\"")

    if event.magnitude >= 3 and very_recent:
        return ("Small but recent. Someone near the epicenter probably just felt a "
                "gentle shudder pass through their floor.")

    return None
