"""Request model and concept validation for lyric generation."""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from .exceptions import EmptyConceptError
from .styles import (
    AXES,
    AdLibIntensity,
    EmotionalTone,
    EnergyLevel,
    RegionalFlavor,
    RhymeComplexity,
    StorytellingDepth,
    StylePreset,
    VocabularyLevel,
)

logger = logging.getLogger(__name__)


def validate_concept(text: str | None) -> str:
    """Strip the concept text and ensure something is left.

    No other validation is performed: there is no length cap and no content
    filtering.

    Args:
        text: Raw concept text from the user.

    Returns:
        The stripped concept.

    Raises:
        EmptyConceptError: If the text is None, empty, or whitespace only.
    """
    concept = (text or "").strip()
    if not concept:
        raise EmptyConceptError()
    return concept


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to generate one set of lyrics.

    Instances are immutable and built fresh for every generation attempt.
    Axis fields must be members of their enum; anything else is a
    programming error and raises ``TypeError`` on construction. Use
    :meth:`from_values` to build a request from untrusted wire values.
    """

    concept: str
    explicit: bool = False
    style_preset: StylePreset = StylePreset.ERB
    rhyme_complexity: RhymeComplexity = RhymeComplexity.COMPLEX
    storytelling_depth: StorytellingDepth = StorytellingDepth.LINEAR
    emotional_tone: EmotionalTone = EmotionalTone.AGGRESSIVE
    vocabulary_level: VocabularyLevel = VocabularyLevel.BALANCED
    ad_lib_intensity: AdLibIntensity = AdLibIntensity.SPARSE
    regional_flavor: RegionalFlavor = RegionalFlavor.GLOBAL
    energy_level: EnergyLevel = EnergyLevel.MODERATE

    def __post_init__(self) -> None:
        for name, axis in AXES.items():
            value = getattr(self, name)
            if not isinstance(value, axis.enum):
                raise TypeError(
                    f"{name} must be a {axis.enum.__name__}, got {type(value).__name__}"
                )

    @classmethod
    def from_values(cls, concept: str, explicit: bool = False, **axis_values: Any):
        """Build a request, parsing axis values given as member names.

        Axes that are omitted or ``None`` fall back to their defaults.
        ``explicit`` must be a real ``bool``; strings such as ``"false"`` are
        rejected rather than coerced.

        Raises:
            ValueError: If ``explicit`` is not a bool, an axis value is
                unknown, or an unknown axis is named.
        """
        if not isinstance(explicit, bool):
            raise ValueError(f"explicit must be a bool, got {explicit!r}")

        unknown = set(axis_values) - set(AXES)
        if unknown:
            raise ValueError(f"Unknown style axes: {', '.join(sorted(unknown))}")

        parsed: dict[str, Enum] = {}
        for name, axis in AXES.items():
            raw = axis_values.get(name)
            parsed[name] = axis.default if raw is None else axis.parse(raw)
        return cls(concept=concept, explicit=explicit, **parsed)

    def axis_values(self) -> dict[str, Enum]:
        """Return the axis fields in instruction order."""
        return {name: getattr(self, name) for name in AXES}

    def describe(self) -> str:
        """Short one-line summary used in log messages (concept not included)."""
        parts = [f"{f.name}={getattr(self, f.name).name}" for f in fields(self) if f.name in AXES]
        return f"explicit={self.explicit}, " + ", ".join(parts)
