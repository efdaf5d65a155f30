"""Style axes and their instruction fragments.

Every stylistic parameter of a lyric request is an *axis*: a closed
``str``-valued :class:`~enum.Enum` whose members each map to exactly one fixed
instruction fragment. The fragment tables are module constants wrapped in
:class:`types.MappingProxyType`, so they are shared read-only by every
request.

Adding a value means adding both the enum member and its fragment (and a UI
label). The unit tests enforce that the three stay in lockstep.

Axis order
----------
:data:`AXES` lists the axes in the order their fragments appear in the
instruction string::

    style_preset → rhyme_complexity → storytelling_depth → emotional_tone →
    vocabulary_level → ad_lib_intensity → regional_flavor → energy_level
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class StylePreset(str, Enum):
    ERB = "ERB"
    ICP = "ICP"
    OLD_SCHOOL = "OLD_SCHOOL"
    MODERN_TRAP = "MODERN_TRAP"
    UK_DRILL = "UK_DRILL"
    SOUTHERN_GOSICK = "SOUTHERN_GOSICK"


class RhymeComplexity(str, Enum):
    SIMPLE = "SIMPLE"
    COMPLEX = "COMPLEX"
    GOD_TIER = "GOD_TIER"


class StorytellingDepth(str, Enum):
    LINEAR = "LINEAR"
    FRAGMENTED = "FRAGMENTED"
    CONVOLUTED = "CONVOLUTED"


class EmotionalTone(str, Enum):
    AGGRESSIVE = "AGGRESSIVE"
    INTROSPECTIVE = "INTROSPECTIVE"
    HUMOROUS = "HUMOROUS"
    DARK = "DARK"
    TRIUMPHANT = "TRIUMPHANT"


class VocabularyLevel(str, Enum):
    STREET = "STREET"
    BALANCED = "BALANCED"
    LITERARY = "LITERARY"


class AdLibIntensity(str, Enum):
    NONE = "NONE"
    SPARSE = "SPARSE"
    HEAVY = "HEAVY"


class RegionalFlavor(str, Enum):
    GLOBAL = "GLOBAL"
    EAST_COAST = "EAST_COAST"
    WEST_COAST = "WEST_COAST"
    SOUTHERN = "SOUTHERN"
    UK = "UK"


class EnergyLevel(str, Enum):
    CHILL = "CHILL"
    MODERATE = "MODERATE"
    HIGH_ENERGY = "HIGH_ENERGY"


# ---------------------------------------------------------------------------
# Instruction fragments.
# ---------------------------------------------------------------------------

STYLE_PRESET_FRAGMENTS: Mapping[StylePreset, str] = MappingProxyType(
    {
        StylePreset.ERB: (
            "BASE STYLE: EPIC RAP BATTLES OF HISTORY (ERB).\n"
            "- [Beat: High-energy, orchestral strings, cinematic impacts, heavy boom-bap rhythm]\n"
            "- [Vocal: Competitive, projecting, historical announcer vibe]\n"
            '- Focus: Dense pop-culture/historical references and lethal "face-off" energy.'
        ),
        StylePreset.ICP: (
            "BASE STYLE: INSANE CLOWN POSSE (ICP) / HORRORCORE.\n"
            "- [Beat: Eerie funhouse synths, distorted circus melodies, heavy thumping bass]\n"
            "- [Vocal: Theatrical, raspy, eccentric, sinister carnival energy]\n"
            '- Focus: Theatrical "Dark Carnival" lore, horrorcore imagery, and storytelling.'
        ),
        StylePreset.OLD_SCHOOL: (
            "BASE STYLE: OLD SCHOOL HIP HOP (90s Boom Bap).\n"
            "- [Beat: Dusty vinyl samples, classic soul loops, steady 4/4 breakbeats]\n"
            "- [Vocal: Smooth, rhythmically precise, laid-back but authoritative]\n"
            "- Focus: Social commentary, knowledge, and pure rhythmic mastery."
        ),
        StylePreset.MODERN_TRAP: (
            "BASE STYLE: MODERN TRAP.\n"
            "- [Beat: Rattling 808s, sharp hi-hat rolls, dark ambient pads]\n"
            '- [Vocal: Melodic, rhythmic triplets, heavy emphasis on "bounce"]\n'
            "- Focus: Sonic mood, catchy cadences, and rhythmic syncopation."
        ),
        StylePreset.UK_DRILL: (
            "BASE STYLE: UK DRILL.\n"
            "- [Beat: Sliding 808 basslines, haunting piano loops, fast-paced percussion]\n"
            "- [Vocal: Aggressive, cold, distinct UK cadence, focus on rhythmic intensity]\n"
            "- Focus: Gritty realism, territorial pride, and complex flow patterns."
        ),
        StylePreset.SOUTHERN_GOSICK: (
            "BASE STYLE: SOUTHERN CRUNK / DIRTY SOUTH.\n"
            "- [Beat: Loud brass, repetitive high-energy chants, massive distorted bass]\n"
            "- [Vocal: High volume, energetic, chanting style, repetitive hooks]\n"
            "- Focus: Club energy, anthemic chants, and southern drawl."
        ),
    }
)

RHYME_FRAGMENTS: Mapping[RhymeComplexity, str] = MappingProxyType(
    {
        RhymeComplexity.SIMPLE: (
            "RHYME SCHEME: Traditional AABB/ABAB. Simple, accessible end-rhymes."
        ),
        RhymeComplexity.COMPLEX: (
            "RHYME SCHEME: Technical. Use internal rhymes, multisyllabic stacks, and slant rhymes."
        ),
        RhymeComplexity.GOD_TIER: (
            "RHYME SCHEME: Elite. Use mosaic rhymes, perfect internal chains, "
            "5+ syllable stacks, and non-stop vowel-matching."
        ),
    }
)

STORY_FRAGMENTS: Mapping[StorytellingDepth, str] = MappingProxyType(
    {
        StorytellingDepth.LINEAR: "STORY: A clear, chronological narrative. Start to finish.",
        StorytellingDepth.FRAGMENTED: (
            "STORY: Abstract, jumpy, poetic. Use non-linear snapshots of memory."
        ),
        StorytellingDepth.CONVOLUTED: (
            "STORY: Extremely complex. Layers of metaphors, riddles, and hidden meanings. "
            "Hard to follow on first listen."
        ),
    }
)

TONE_FRAGMENTS: Mapping[EmotionalTone, str] = MappingProxyType(
    {
        EmotionalTone.AGGRESSIVE: "TONE: Visceral and punchy. High-impact word choices.",
        EmotionalTone.INTROSPECTIVE: (
            "TONE: Melancholic, reflective, and quiet. Philosophical depth."
        ),
        EmotionalTone.HUMOROUS: "TONE: Witty and light. Heavy use of puns and self-irony.",
        EmotionalTone.DARK: "TONE: Ominous and brooding. Gothic or horrorcore themes.",
        EmotionalTone.TRIUMPHANT: "TONE: Anthemic and inspiring. Focus on growth and victory.",
    }
)

VOCABULARY_FRAGMENTS: Mapping[VocabularyLevel, str] = MappingProxyType(
    {
        VocabularyLevel.STREET: (
            "VOCABULARY: Raw street slang, gritty terminology, and colloquialisms."
        ),
        VocabularyLevel.BALANCED: (
            "VOCABULARY: Standard contemporary hip hop language. Accessible but sharp."
        ),
        VocabularyLevel.LITERARY: (
            "VOCABULARY: Elevated, academic, and archaic. "
            "Use rare words and scholarly allusions."
        ),
    }
)

AD_LIB_FRAGMENTS: Mapping[AdLibIntensity, str] = MappingProxyType(
    {
        AdLibIntensity.NONE: "AD-LIBS: None. Focus purely on the primary vocal track.",
        AdLibIntensity.SPARSE: (
            "AD-LIBS: Occasional emphasizes at the end of key bars. (e.g., 'Facts!', 'Word!')"
        ),
        AdLibIntensity.HEAVY: (
            "AD-LIBS: Constant vocal interjections, reaction noises, and melodic repetitions. "
            "(e.g., 'Skrt skrt!', 'Grrrrt!', 'Yeah!')"
        ),
    }
)

REGIONAL_FRAGMENTS: Mapping[RegionalFlavor, str] = MappingProxyType(
    {
        RegionalFlavor.GLOBAL: "DIALECT: Standard Global English.",
        RegionalFlavor.EAST_COAST: (
            "DIALECT: NYC/East Coast flavor. Phrases like 'deadass', 'son', 'word is bond'."
        ),
        RegionalFlavor.WEST_COAST: (
            "DIALECT: West Coast / LA flavor. Laid back, G-funk slang, sunny but dangerous."
        ),
        RegionalFlavor.SOUTHERN: (
            "DIALECT: Southern Drawl. Double-time southern terminology, focus on cadence."
        ),
        RegionalFlavor.UK: "DIALECT: UK Slang. Terms like 'mandem', 'bruv', 'innit', 'pagan'.",
    }
)

ENERGY_FRAGMENTS: Mapping[EnergyLevel, str] = MappingProxyType(
    {
        EnergyLevel.CHILL: "ENERGY: Low BPM feel, relaxed breathing, effortless flow.",
        EnergyLevel.MODERATE: "ENERGY: Standard performance level. Professional and steady.",
        EnergyLevel.HIGH_ENERGY: (
            "ENERGY: High BPM energy, intense breathing patterns, rapid-fire delivery."
        ),
    }
)

EXPLICIT_FRAGMENT = (
    "EXPLICIT: Unfiltered. Include profanity and gritty descriptions for maximum realism."
)
CLEAN_FRAGMENT = (
    "EXPLICIT: Radio Clean. No profanity. Use creative replacements for mature themes."
)


# ---------------------------------------------------------------------------
# UI labels.
# ---------------------------------------------------------------------------

STYLE_PRESET_LABELS: Mapping[StylePreset, str] = MappingProxyType(
    {
        StylePreset.ERB: "ERB Battle",
        StylePreset.ICP: "Dark Carnival",
        StylePreset.OLD_SCHOOL: "Old School",
        StylePreset.MODERN_TRAP: "Modern Trap",
        StylePreset.UK_DRILL: "UK Drill",
        StylePreset.SOUTHERN_GOSICK: "Crunk/South",
    }
)

STYLE_PRESET_DESCRIPTIONS: Mapping[StylePreset, str] = MappingProxyType(
    {
        StylePreset.ERB: "Quick-fire historical references.",
        StylePreset.ICP: "Horrorcore theatrical storytelling.",
        StylePreset.OLD_SCHOOL: "Classic boom-bap, lyrical miracles.",
        StylePreset.MODERN_TRAP: "Triplet flows & 808-heavy vibes.",
        StylePreset.UK_DRILL: "Aggressive sliding bass & slang.",
        StylePreset.SOUTHERN_GOSICK: "High energy, repetitive anthems.",
    }
)


@dataclass(frozen=True)
class Axis:
    """One stylistic axis: its request field, value set, default and tables.

    Attributes:
        name: Field name on :class:`~ghostwriter.core.models.GenerationRequest`.
        title: Human-readable control title.
        enum: The closed value set.
        default: Value used when the caller does not choose one.
        labels: Short UI label per value.
        fragments: Instruction fragment per value.
    """

    name: str
    title: str
    enum: type[Enum]
    default: Enum
    labels: Mapping[Enum, str]
    fragments: Mapping[Enum, str]

    def parse(self, value: Enum | str) -> Enum:
        """Convert a wire value (member name, any case) to this axis' enum.

        Raises:
            ValueError: If the value is not a member of the axis.
        """
        if isinstance(value, self.enum):
            return value
        if isinstance(value, str):
            try:
                return self.enum[value.strip().upper()]
            except KeyError:
                pass
        allowed = ", ".join(member.name for member in self.enum)
        raise ValueError(f"Invalid {self.name}: {value!r} (expected one of: {allowed})")

    def from_label(self, label: str) -> Enum:
        """Return the value whose UI label is ``label``.

        Raises:
            ValueError: If no value carries that label.
        """
        for member, member_label in self.labels.items():
            if member_label == label:
                return member
        raise ValueError(f"Unknown {self.title} option: {label!r}")


AXES: Mapping[str, Axis] = MappingProxyType(
    {
        axis.name: axis
        for axis in (
            Axis(
                "style_preset",
                "Style Core",
                StylePreset,
                StylePreset.ERB,
                STYLE_PRESET_LABELS,
                STYLE_PRESET_FRAGMENTS,
            ),
            Axis(
                "rhyme_complexity",
                "Rhyme Level",
                RhymeComplexity,
                RhymeComplexity.COMPLEX,
                MappingProxyType(
                    {
                        RhymeComplexity.SIMPLE: "Classic",
                        RhymeComplexity.COMPLEX: "Technical",
                        RhymeComplexity.GOD_TIER: "Infinite",
                    }
                ),
                RHYME_FRAGMENTS,
            ),
            Axis(
                "storytelling_depth",
                "Story Path",
                StorytellingDepth,
                StorytellingDepth.LINEAR,
                MappingProxyType(
                    {
                        StorytellingDepth.LINEAR: "Story",
                        StorytellingDepth.FRAGMENTED: "Poetic",
                        StorytellingDepth.CONVOLUTED: "Mazy",
                    }
                ),
                STORY_FRAGMENTS,
            ),
            Axis(
                "emotional_tone",
                "Vibe / Tone",
                EmotionalTone,
                EmotionalTone.AGGRESSIVE,
                MappingProxyType(
                    {
                        EmotionalTone.AGGRESSIVE: "Aggro",
                        EmotionalTone.INTROSPECTIVE: "Deep",
                        EmotionalTone.HUMOROUS: "Witty",
                        EmotionalTone.DARK: "Dark",
                        EmotionalTone.TRIUMPHANT: "Anthem",
                    }
                ),
                TONE_FRAGMENTS,
            ),
            Axis(
                "vocabulary_level",
                "Vocabulary",
                VocabularyLevel,
                VocabularyLevel.BALANCED,
                MappingProxyType(
                    {
                        VocabularyLevel.STREET: "Street",
                        VocabularyLevel.BALANCED: "Mixed",
                        VocabularyLevel.LITERARY: "Scholar",
                    }
                ),
                VOCABULARY_FRAGMENTS,
            ),
            Axis(
                "ad_lib_intensity",
                "Ad-lib Pop",
                AdLibIntensity,
                AdLibIntensity.SPARSE,
                MappingProxyType(
                    {
                        AdLibIntensity.NONE: "Dry",
                        AdLibIntensity.SPARSE: "Few",
                        AdLibIntensity.HEAVY: "Loud",
                    }
                ),
                AD_LIB_FRAGMENTS,
            ),
            Axis(
                "regional_flavor",
                "Flavor Profile",
                RegionalFlavor,
                RegionalFlavor.GLOBAL,
                MappingProxyType(
                    {
                        RegionalFlavor.GLOBAL: "Standard",
                        RegionalFlavor.EAST_COAST: "NYC/East",
                        RegionalFlavor.WEST_COAST: "LA/West",
                        RegionalFlavor.SOUTHERN: "South",
                        RegionalFlavor.UK: "UK",
                    }
                ),
                REGIONAL_FRAGMENTS,
            ),
            Axis(
                "energy_level",
                "Energy Output",
                EnergyLevel,
                EnergyLevel.MODERATE,
                MappingProxyType(
                    {
                        EnergyLevel.CHILL: "Chill",
                        EnergyLevel.MODERATE: "Mid",
                        EnergyLevel.HIGH_ENERGY: "Hype",
                    }
                ),
                ENERGY_FRAGMENTS,
            ),
        )
    }
)

_AXES_BY_ENUM: Mapping[type[Enum], Axis] = MappingProxyType(
    {axis.enum: axis for axis in AXES.values()}
)


def fragment_for(value: Enum) -> str:
    """Return the instruction fragment for an axis value.

    Args:
        value: A member of one of the axis enums.

    Returns:
        The fixed fragment text for that value.

    Raises:
        TypeError: If ``value`` is not a member of any axis enum. Plain
            strings are rejected too; callers convert wire values with
            :meth:`Axis.parse` first.
    """
    axis = _AXES_BY_ENUM.get(type(value))
    if axis is None:
        raise TypeError(f"Not a style axis value: {value!r}")
    return axis.fragments[value]


def explicit_fragment(explicit: bool) -> str:
    """Return the explicit-content directive for the given flag."""
    return EXPLICIT_FRAGMENT if explicit else CLEAN_FRAGMENT
