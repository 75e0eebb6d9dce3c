"""Defensive parsing of Claude output into typed educational records.

Model output is untrusted free text. Every ``parse_*`` function here returns a
structurally valid object: questions and perspectives fall back to fixed
content, and validation fails open.
"""
from __future__ import annotations

import json
import logging
import re
from itertools import chain
from typing import Any, Dict, List, Optional, Set

from .models import (
    EducationalQuestion,
    ParsedQuestions,
    PerspectiveSuggestion,
    QuestionType,
    ValidationResult,
)

logger = logging.getLogger(__name__)

DEFAULT_RATIONALE = "Helps develop critical thinking"
DEFAULT_OUTCOME = "Deeper understanding of the topic"
DEFAULT_OVERALL_GOAL = "Enhance critical thinking and writing development"
DEFAULT_REFLECTION_PROMPT = "How did these questions change your thinking about your writing?"
DEFAULT_NEXT_STEPS = ["Reflect on the questions", "Apply insights to your writing"]


def fallback_questions() -> ParsedQuestions:
    return ParsedQuestions(
        questions=[
            EducationalQuestion(
                id="fallback1",
                type=QuestionType.CLARIFYING,
                question="What is the main point you want your reader to understand?",
                educational_rationale="Helps clarify central argument",
                expected_outcome="Clearer focus in writing",
                follow_up_prompts=("How can you make this point more compelling?",),
            )
        ],
        overall_goal="Clarify writing focus and purpose",
        reflection_prompt="How did thinking about your main point help you?",
        next_steps=["Revise with clearer focus", "Strengthen supporting evidence"],
    )


def fallback_perspective() -> PerspectiveSuggestion:
    return PerspectiveSuggestion(
        id="fallback1",
        perspective="Alternative Viewpoint",
        description="Consider opposing arguments and different stakeholder perspectives",
        questions_to_explore=[
            "What would critics of this position argue?",
            "Who might be affected differently?",
        ],
        educational_value="Develops critical thinking and argument strength",
        resource_suggestions=[
            "Academic sources with different viewpoints",
            "Primary sources from various stakeholders",
        ],
    )


def fallback_validation() -> ValidationResult:
    return ValidationResult(
        is_educationally_sound=True,
        contains_answers=False,
        provides_questions=True,
        aligns_with_learning_objectives=False,
        appropriate_complexity=False,
        issues=[],
        suggestions=[],
    )


def clean_json_response(content: str) -> Any:
    """Extract the first valid JSON value from an LLM response."""

    content = re.sub(r"```json\s*", "", content or "", flags=re.IGNORECASE)
    content = re.sub(r"```", "", content)
    content = content.strip()

    if not content:
        raise ValueError("Empty response from LLM")

    decoder = json.JSONDecoder()

    try:
        obj, _ = decoder.raw_decode(content)
        return obj
    except json.JSONDecodeError:
        pass

    brace_indices = [m.start() for m in re.finditer(r"\{", content)]
    for start in chain(brace_indices, [None]):
        if start is None:
            break
        try:
            obj, _ = decoder.raw_decode(content[start:])
            return obj
        except json.JSONDecodeError:
            continue

    raise ValueError("No valid JSON found in response")


def _load_object(content: str, required_key: str) -> Dict[str, Any]:
    parsed = clean_json_response(content)
    if not isinstance(parsed, dict):
        raise ValueError("Expected JSON object in response")
    if required_key not in parsed:
        raise ValueError(f"Response object has no \"{required_key}\" field")
    return parsed


def _text(value: Any, default: str = "") -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _string_list(value: Any, default: Optional[List[str]] = None) -> List[str]:
    if not isinstance(value, list):
        return list(default or [])
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


def _unique_id(candidate: Any, fallback: str, used_ids: Set[str]) -> str:
    """Keep the model's id when usable, otherwise the positional fallback."""

    identifier = _text(candidate) if not isinstance(candidate, (int, float)) else str(candidate)
    if not identifier or identifier in used_ids:
        identifier = fallback
    suffix = 2
    base = identifier
    while identifier in used_ids:
        identifier = f"{base}_{suffix}"
        suffix += 1
    used_ids.add(identifier)
    return identifier


def sanitize_question(raw: Any, index: int, used_ids: Set[str]) -> Optional[EducationalQuestion]:
    """Fill a partial question with defaults; None when it has no question text."""

    if not isinstance(raw, dict):
        return None
    question = _text(raw.get("question"))
    if not question:
        return None
    return EducationalQuestion(
        id=_unique_id(raw.get("id"), f"q{index}", used_ids),
        type=QuestionType.parse(raw.get("type")),
        question=question,
        educational_rationale=_text(raw.get("educationalRationale"), DEFAULT_RATIONALE),
        expected_outcome=_text(raw.get("expectedOutcome"), DEFAULT_OUTCOME),
        follow_up_prompts=tuple(_string_list(raw.get("followUpPrompts"))),
    )


def sanitize_perspective(raw: Any, index: int, used_ids: Set[str]) -> Optional[PerspectiveSuggestion]:
    if not isinstance(raw, dict):
        return None
    perspective = _text(raw.get("perspective"))
    if not perspective:
        return None
    return PerspectiveSuggestion(
        id=_unique_id(raw.get("id"), f"p{index}", used_ids),
        perspective=perspective,
        description=_text(raw.get("description")),
        questions_to_explore=_string_list(raw.get("questionsToExplore")),
        educational_value=_text(raw.get("educationalValue")),
        resource_suggestions=_string_list(raw.get("resourceSuggestions")),
    )


def sanitize_validation(raw: Dict[str, Any]) -> ValidationResult:
    return ValidationResult(
        is_educationally_sound=_bool(raw.get("isEducationallySound"), True),
        contains_answers=_bool(raw.get("containsAnswers")),
        provides_questions=_bool(raw.get("providesQuestions")),
        aligns_with_learning_objectives=_bool(raw.get("alignsWithLearningObjectives")),
        appropriate_complexity=_bool(raw.get("appropriateComplexity")),
        issues=_string_list(raw.get("issues")),
        suggestions=_string_list(raw.get("suggestions")),
    )


def parse_question_response(content: str) -> ParsedQuestions:
    try:
        parsed = _load_object(content, "questions")
    except ValueError as exc:
        logger.warning("Falling back to default questions: %s", exc)
        return fallback_questions()

    used_ids: Set[str] = set()
    raw_questions = parsed.get("questions")
    questions: List[EducationalQuestion] = []
    if isinstance(raw_questions, list):
        for index, raw in enumerate(raw_questions, start=1):
            question = sanitize_question(raw, index, used_ids)
            if question is not None:
                questions.append(question)

    if not questions:
        logger.warning("No usable questions in response, falling back to defaults")
        return fallback_questions()

    return ParsedQuestions(
        questions=questions,
        overall_goal=_text(parsed.get("overallGoal"), DEFAULT_OVERALL_GOAL),
        reflection_prompt=_text(parsed.get("reflectionPrompt"), DEFAULT_REFLECTION_PROMPT),
        next_steps=_string_list(parsed.get("nextSteps"), DEFAULT_NEXT_STEPS) or list(DEFAULT_NEXT_STEPS),
    )


def parse_perspective_response(content: str) -> List[PerspectiveSuggestion]:
    try:
        parsed = _load_object(content, "perspectives")
    except ValueError as exc:
        logger.warning("Falling back to default perspective: %s", exc)
        return [fallback_perspective()]

    used_ids: Set[str] = set()
    perspectives: List[PerspectiveSuggestion] = []
    raw_perspectives = parsed.get("perspectives")
    if isinstance(raw_perspectives, list):
        for index, raw in enumerate(raw_perspectives, start=1):
            perspective = sanitize_perspective(raw, index, used_ids)
            if perspective is not None:
                perspectives.append(perspective)
    if not perspectives:
        logger.warning("No usable perspectives in response, falling back to default")
        return [fallback_perspective()]
    return perspectives


def parse_validation_response(content: str) -> ValidationResult:
    try:
        parsed = _load_object(content, "isEducationallySound")
    except ValueError as exc:
        logger.warning("Validation output unparseable, assuming sound: %s", exc)
        return fallback_validation()
    return sanitize_validation(parsed)


__all__ = [
    "clean_json_response",
    "fallback_perspective",
    "fallback_questions",
    "fallback_validation",
    "parse_perspective_response",
    "parse_question_response",
    "parse_validation_response",
    "sanitize_perspective",
    "sanitize_question",
    "sanitize_validation",
]
