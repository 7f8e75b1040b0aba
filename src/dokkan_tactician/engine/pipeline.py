"""Two-phase roster generation.

Generation is an explicit sequential state machine::

    GROUNDED --(error / unparsable / too few characters)--> FALLBACK
    FALLBACK --(error / unparsable)--> FAILED

GROUNDED asks the model to search the web and answer in free text; the
JSON array is dug out of the prose and every entry is sanitized. If that
phase is rejected, FALLBACK asks once more without search, with a declared
output schema, and whatever it returns (even nothing) is final. FAILED
yields an empty result. Nothing in here raises to the caller.

Example:
    >>> generator = TeamGenerator(client=OpenRouterClient())
    >>> result = generator.generate_team_from_category("Pure Saiyans")
    >>> result.phase, len(result.characters), result.sources[:1]
"""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from typing import Any

from dokkan_tactician.core.config import get_settings
from dokkan_tactician.core.exceptions import AIResponseError
from dokkan_tactician.core.logging import get_logger
from dokkan_tactician.engine.client import GenerationClient
from dokkan_tactician.engine.prompts import (
    ROSTER_SCHEMA,
    ROSTER_SCHEMA_NAME,
    category_fallback_prompt,
    category_grounded_prompt,
    input_fallback_prompt,
    input_grounded_prompt,
    roster_system_prompt,
)
from dokkan_tactician.ingestion.json_extraction import parse_json_array
from dokkan_tactician.ingestion.sanitizer import CharacterSanitizer
from dokkan_tactician.models.analysis import GenerationPhase, GenerationResult
from dokkan_tactician.models.character import Character


logger = get_logger(__name__)


# =============================================================================
# State Machine
# =============================================================================


@dataclass(frozen=True)
class GenerationRequest:
    """Prompts for one generation run.

    Attributes:
        label: Short name of the call site, used in logs.
        grounded_prompt: Prompt for the web-search phase.
        fallback_prompt: Prompt for the schema-constrained phase.
        min_characters: Characters the grounded phase must yield to be accepted.
    """

    label: str
    grounded_prompt: str
    fallback_prompt: str
    min_characters: int = 1


@dataclass
class PhaseOutcome:
    """What a single phase produced.

    Attributes:
        phase: The phase that ran.
        accepted: Whether this outcome ends the run.
        characters: Sanitized characters.
        sources: Citation URLs (grounded phase only).
        reason: Why the phase was rejected, if it was.
    """

    phase: GenerationPhase
    accepted: bool
    characters: list[Character] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    reason: str | None = None


_TRANSITIONS: dict[GenerationPhase, GenerationPhase] = {
    GenerationPhase.GROUNDED: GenerationPhase.FALLBACK,
    GenerationPhase.FALLBACK: GenerationPhase.FAILED,
    GenerationPhase.FAILED: GenerationPhase.FAILED,
}


def next_phase(phase: GenerationPhase) -> GenerationPhase:
    """State entered when ``phase`` is rejected."""
    return _TRANSITIONS[phase]


def decode_structured_roster(text: str) -> list[Any]:
    """Decode the body of a schema-constrained roster reply.

    Accepts the ``{"characters": [...]}`` envelope as well as a bare array.

    Raises:
        AIResponseError: If the body is not JSON or holds no array.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AIResponseError(
            f"Structured response is not valid JSON: {exc}",
            details={"response_preview": text[:200]},
        ) from exc

    if isinstance(data, dict):
        data = data.get("characters")
    if not isinstance(data, list):
        raise AIResponseError(
            "Structured response did not contain a character array",
            details={"decoded_type": type(data).__name__},
        )
    return data


class TwoPhaseGenerator:
    """Runs a GenerationRequest through GROUNDED, FALLBACK and FAILED.

    Attributes:
        client: Generative-text client.
        sanitizer: Sanitizer applied to every decoded entry.
        system_instruction: System prompt shared by both phases.
    """

    def __init__(
        self,
        client: GenerationClient,
        *,
        sanitizer: CharacterSanitizer,
        system_instruction: str,
    ) -> None:
        self.client = client
        self.sanitizer = sanitizer
        self.system_instruction = system_instruction

    def run(self, request: GenerationRequest) -> GenerationResult:
        """Execute the state machine for ``request``.

        Returns:
            The accepted phase's characters and sources, or an empty
            result if both phases failed.
        """
        phase = GenerationPhase.GROUNDED
        while phase is not GenerationPhase.FAILED:
            outcome = self.run_phase(phase, request)
            if outcome.accepted:
                logger.info(
                    "Generation phase accepted",
                    request=request.label,
                    phase=phase.value,
                    characters=len(outcome.characters),
                    sources=len(outcome.sources),
                )
                return GenerationResult(
                    characters=outcome.characters,
                    sources=outcome.sources,
                    phase=phase,
                )

            following = next_phase(phase)
            logger.warning(
                "Generation phase rejected",
                request=request.label,
                phase=phase.value,
                next_phase=following.value,
                reason=outcome.reason,
            )
            phase = following

        return GenerationResult.empty()

    def run_phase(self, phase: GenerationPhase, request: GenerationRequest) -> PhaseOutcome:
        """Run one phase of the pipeline."""
        if phase is GenerationPhase.GROUNDED:
            return self._grounded(request)
        if phase is GenerationPhase.FALLBACK:
            return self._fallback(request)
        return PhaseOutcome(phase=phase, accepted=False, reason="terminal state")

    def _grounded(self, request: GenerationRequest) -> PhaseOutcome:
        phase = GenerationPhase.GROUNDED
        try:
            response = self.client.generate_grounded(
                request.grounded_prompt,
                system_instruction=self.system_instruction,
            )
            entries = parse_json_array(response.text)
            characters = self.sanitizer.sanitize_many(entries)
        except Exception as exc:
            return PhaseOutcome(phase=phase, accepted=False, reason=f"{type(exc).__name__}: {exc}")

        if len(characters) < request.min_characters:
            return PhaseOutcome(
                phase=phase,
                accepted=False,
                characters=characters,
                reason=f"{len(characters)} characters, {request.min_characters} required",
            )
        return PhaseOutcome(
            phase=phase,
            accepted=True,
            characters=characters,
            sources=response.sources,
        )

    def _fallback(self, request: GenerationRequest) -> PhaseOutcome:
        phase = GenerationPhase.FALLBACK
        try:
            text = self.client.generate_structured(
                request.fallback_prompt,
                schema=ROSTER_SCHEMA,
                schema_name=ROSTER_SCHEMA_NAME,
                system_instruction=self.system_instruction,
            )
            entries = decode_structured_roster(text)
            characters = self.sanitizer.sanitize_many(entries)
        except Exception as exc:
            return PhaseOutcome(phase=phase, accepted=False, reason=f"{type(exc).__name__}: {exc}")

        return PhaseOutcome(phase=phase, accepted=True, characters=characters)


# =============================================================================
# Call Sites
# =============================================================================


class TeamGenerator:
    """Builds rosters from character names or from a category.

    Both call sites share TwoPhaseGenerator and differ only in prompts and
    the grounded acceptance threshold.
    """

    def __init__(
        self,
        client: GenerationClient,
        *,
        rng: random.Random | None = None,
        team_size: int | None = None,
        category_min_characters: int | None = None,
        input_min_characters: int | None = None,
        language: str | None = None,
    ) -> None:
        """Initialize the generator, filling unset options from settings.

        Args:
            client: Generative-text client.
            rng: Random source for sanitizer fallbacks.
            team_size: Characters requested per category roster.
            category_min_characters: Grounded threshold for category rosters.
            input_min_characters: Grounded threshold for named characters.
            language: Language for skills and titles.
        """
        gen_settings = get_settings().generation

        self.team_size = team_size if team_size is not None else gen_settings.team_size
        self.category_min_characters = (
            category_min_characters
            if category_min_characters is not None
            else gen_settings.category_min_characters
        )
        self.input_min_characters = (
            input_min_characters if input_min_characters is not None else gen_settings.input_min_characters
        )
        language = language or gen_settings.response_language

        if rng is None:
            rng = random.Random(gen_settings.random_seed)

        self.pipeline = TwoPhaseGenerator(
            client,
            sanitizer=CharacterSanitizer(rng=rng),
            system_instruction=roster_system_prompt(team_size=self.team_size, language=language),
        )

    def generate_team_from_input(self, names: str) -> GenerationResult:
        """Generate the characters the user listed by name.

        Args:
            names: Free-text list of character names.
        """
        request = GenerationRequest(
            label="input",
            grounded_prompt=input_grounded_prompt(names),
            fallback_prompt=input_fallback_prompt(names),
            min_characters=self.input_min_characters,
        )
        return self.pipeline.run(request)

    def generate_team_from_category(self, category: str) -> GenerationResult:
        """Generate a complete optimized roster for a category.

        Args:
            category: Category name, e.g. 'Pure Saiyans'.
        """
        request = GenerationRequest(
            label="category",
            grounded_prompt=category_grounded_prompt(category, self.team_size),
            fallback_prompt=category_fallback_prompt(category, self.team_size),
            min_characters=self.category_min_characters,
        )
        return self.pipeline.run(request)


__all__ = [
    "GenerationRequest",
    "PhaseOutcome",
    "next_phase",
    "decode_structured_roster",
    "TwoPhaseGenerator",
    "TeamGenerator",
]
