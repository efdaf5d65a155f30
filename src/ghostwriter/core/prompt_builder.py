"""Instruction compilation for the lyric generator.

The instruction string sent to the model is assembled from fixed boilerplate
sections and one fragment per style axis. Nothing here is random or
time-dependent: the same request always compiles to the same string.

Template Structure::

    [Persona + mission statement with the concept]

    CONSTRAINTS:
    [Fixed: bracketed metadata tags, per-section vocal/flow directions]

    STYLE SPECS:
    [Style preset block]
    [Rhyme]
    [Story]
    [Tone]
    [Vocabulary]
    [Ad-libs]
    [Dialect]
    [Energy]
    [Explicit / Radio Clean directive]

    TECHNICAL DIRECTIVES:
    [Fixed: wordplay, sonics, required section markers]

    [Fixed: length target]
    [Fixed: lyrics only, no conversational pre-text]

Sections are separated by blank lines; the style fragments inside
``STYLE SPECS`` are one per line (the preset block spans several lines).

Usage
-----
::

    request = GenerationRequest(concept="a rivalry between two rival chefs")
    instructions = build_instructions(request)
"""

from __future__ import annotations

from .models import GenerationRequest
from .styles import explicit_fragment, fragment_for

# ---------------------------------------------------------------------------
# Fixed boilerplate sections.
# ---------------------------------------------------------------------------

_PERSONA = "You are 'The Architect', the world's most versatile and technical rap ghostwriter."

_MISSION_TEMPLATE = (
    'MISSION: Write a high-quality, full-length rap anthem based on this idea: "{concept}".'
)

_CONSTRAINTS = (
    "CONSTRAINTS:\n"
    "- Include technical metadata in square brackets [ ] for: [Beat Style], [Vocal Style], "
    "[Energy], [Flow Pattern], [Ad-libs], and [Structural Section].\n"
    "- Ensure EVERY structural section (Intro, Verse, Chorus, etc.) has specific vocal "
    "and flow directions."
)

#: Section markers the model must emit, in song order.
SECTION_MARKERS: tuple[str, ...] = (
    "[Intro]",
    "[Verse 1]",
    "[Chorus]",
    "[Verse 2]",
    "[Chorus]",
    "[Bridge]",
    "[Verse 3]",
    "[Outro]",
)

_TECHNICAL_DIRECTIVES = (
    "TECHNICAL DIRECTIVES:\n"
    "1. WORDPLAY: Use complex double-entendres and triple-entendres where possible.\n"
    "2. SONICS: Use alliteration, assonance, and consonance to ensure the verse "
    '"hits" even on paper.\n'
    "3. STRUCTURE: Must include " + ", ".join(SECTION_MARKERS[:-1]) + f", and {SECTION_MARKERS[-1]}."
)

#: Soft length hint for the model; not enforced on the response.
TARGET_LENGTH_CHARS = 2800

_LENGTH_DIRECTIVE = (
    f"LENGTH: Aim for approximately {TARGET_LENGTH_CHARS:,} characters. "
    "Detailed, substantial, and elite."
)

_OUTPUT_DIRECTIVE = "OUTPUT: Provide ONLY the lyrics and metadata. No conversational pre-text."


def build_style_specs(request: GenerationRequest) -> str:
    """Render the ``STYLE SPECS`` block for a request.

    One fragment per axis in :data:`~ghostwriter.core.styles.AXES` order,
    followed by the explicit/clean directive.

    Raises:
        TypeError: If an axis field holds something other than its enum.
    """
    lines = ["STYLE SPECS:"]
    lines.extend(fragment_for(value) for value in request.axis_values().values())
    lines.append(explicit_fragment(request.explicit))
    return "\n".join(lines)


def build_instructions(request: GenerationRequest) -> str:
    """Compile the full instruction string for one generation request.

    Args:
        request: The generation request. Its concept is embedded stripped of
            surrounding whitespace; it is not otherwise validated here.

    Returns:
        The instruction string, sections separated by blank lines.
    """
    mission = _PERSONA + "\n" + _MISSION_TEMPLATE.format(concept=request.concept.strip())

    parts = [
        mission,
        _CONSTRAINTS,
        build_style_specs(request),
        _TECHNICAL_DIRECTIVES,
        _LENGTH_DIRECTIVE + "\n" + _OUTPUT_DIRECTIVE,
    ]
    return "\n\n".join(parts)
