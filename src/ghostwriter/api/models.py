"""Pydantic request and response models for the Lyric Generator API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
GenerateRequest
    Payload for ``POST /api/generate`` and ``POST /api/prompt/compile`` —
    the concept, the explicit flag and one value per style axis.
GenerateResponse
    Result of a successful ``POST /api/generate``.
CompileResponse
    Result of ``POST /api/prompt/compile``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ghostwriter.core.models import GenerationRequest
from ghostwriter.core.styles import (
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


class GenerateRequest(BaseModel):
    """Request body for the ``POST /api/generate`` endpoint.

    Axis values are given as member names (``"ERB"``, ``"GOD_TIER"``...),
    case-insensitively.  Omitted axes take their defaults.

    Attributes:
        concept: What the track is about.  Must not be blank; this is
            checked by the generator, not by the schema, so that a blank
            concept yields a 400 with a friendly message.
        explicit: ``True`` for unfiltered lyrics, ``False`` for radio clean.
        style_preset: Top-level style.
        rhyme_complexity: Rhyme scheme sophistication.
        storytelling_depth: Narrative structure.
        emotional_tone: Overall mood.
        vocabulary_level: Register of the language.
        ad_lib_intensity: Amount of vocal interjections.
        regional_flavor: Dialect.
        energy_level: Delivery energy.
    """

    concept: str = Field(
        ...,
        description="Creative concept for the track.",
    )
    explicit: bool = Field(
        default=False,
        description="Allow profanity (False = radio clean).",
    )
    style_preset: StylePreset = Field(default=AXES["style_preset"].default)
    rhyme_complexity: RhymeComplexity = Field(default=AXES["rhyme_complexity"].default)
    storytelling_depth: StorytellingDepth = Field(default=AXES["storytelling_depth"].default)
    emotional_tone: EmotionalTone = Field(default=AXES["emotional_tone"].default)
    vocabulary_level: VocabularyLevel = Field(default=AXES["vocabulary_level"].default)
    ad_lib_intensity: AdLibIntensity = Field(default=AXES["ad_lib_intensity"].default)
    regional_flavor: RegionalFlavor = Field(default=AXES["regional_flavor"].default)
    energy_level: EnergyLevel = Field(default=AXES["energy_level"].default)

    @field_validator(*AXES.keys(), mode="before")
    @classmethod
    def _parse_axis(cls, value, info):
        """Accept member names in any case; reject everything else."""
        return AXES[info.field_name].parse(value)

    def to_generation_request(self) -> GenerationRequest:
        """Convert to the core request model."""
        return GenerationRequest.from_values(
            self.concept,
            self.explicit,
            **{name: getattr(self, name) for name in AXES},
        )


class GenerateResponse(BaseModel):
    """Response body for a successful ``POST /api/generate``.

    Attributes:
        lyrics: The generated lyrics.
        model_id: Model that produced them.
    """

    lyrics: str
    model_id: str


class CompileResponse(BaseModel):
    """Response body for ``POST /api/prompt/compile``.

    Attributes:
        instructions: The instruction string that would be sent to the model.
    """

    instructions: str
