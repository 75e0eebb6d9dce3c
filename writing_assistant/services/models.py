"""Typed records exchanged between the prompt, parsing and adaptation steps."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WritingStage(str, Enum):
    BRAINSTORMING = "brainstorming"
    DRAFTING = "drafting"
    REVISING = "revising"
    EDITING = "editing"

    @classmethod
    def parse(cls, value: Any) -> Optional["WritingStage"]:
        """Return the matching stage, or None for unknown values."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class QuestionType(str, Enum):
    CLARIFYING = "clarifying"
    EXPANDING = "expanding"
    CHALLENGING = "challenging"
    PERSPECTIVE = "perspective"
    REFLECTION = "reflection"

    @classmethod
    def parse(cls, value: Any) -> "QuestionType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.CLARIFYING


class EducationalAction(str, Enum):
    GENERATE_PROMPTS = "generate_prompts"
    PROMPT_DEVELOPMENT = "prompt_development"
    EVALUATE_ARGUMENTS = "evaluate_arguments"
    IDENTIFY_CLARITY_ISSUES = "identify_clarity_issues"


class WireModel(BaseModel):
    """Immutable record that reads and writes the platform's camelCase shape."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class EducationalContext(WireModel):
    writing_stage: str = ""
    academic_level: str = ""
    specific_question: str = ""
    learning_objective: str = ""
    content_sample: str = ""
    student_id: Optional[str] = None


class LearningPreferences(WireModel):
    question_complexity: str = "balanced"
    average_reflection_depth: float = 0
    best_responds_to: Tuple[str, ...] = ()


class CurrentState(WireModel):
    cognitive_load: str = "optimal"
    emotional_state: str = "neutral"
    struggling_duration: float = Field(default=0, description="Minutes")
    recent_breakthrough: bool = False


class IndependenceMetrics(WireModel):
    trend: str = "stable"


class StudentLearningProfile(WireModel):
    """Per-request learner summary built by the profile service."""

    preferences: LearningPreferences = Field(default_factory=LearningPreferences)
    current_state: CurrentState = Field(default_factory=CurrentState)
    strengths: Dict[str, float] = Field(default_factory=dict)
    independence_metrics: IndependenceMetrics = Field(default_factory=IndependenceMetrics)

    def strength(self, skill: str) -> float:
        return self.strengths.get(skill, 0.0)


class EducationalQuestion(WireModel):
    id: str
    type: QuestionType
    question: str
    educational_rationale: str
    expected_outcome: str
    follow_up_prompts: Tuple[str, ...] = ()


class EducationalQuestionSet(WireModel):
    request_id: str
    action: EducationalAction
    questions: List[EducationalQuestion]
    overall_educational_goal: str
    reflection_prompt: str
    next_step_suggestions: List[str]


class PerspectiveSuggestion(WireModel):
    id: str
    perspective: str
    description: str
    questions_to_explore: List[str]
    educational_value: str
    resource_suggestions: List[str]


class ValidationResult(WireModel):
    is_educationally_sound: bool
    contains_answers: bool
    provides_questions: bool
    aligns_with_learning_objectives: bool
    appropriate_complexity: bool
    issues: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class TokenUsage(WireModel):
    """Approximate usage; not a tokenizer count."""

    input_tokens: int
    output_tokens: int
    total_tokens: int
    estimated_cost: float


class AIProviderResponse(WireModel):
    content: str
    token_usage: TokenUsage
    model: str
    timestamp: datetime
    processing_time: float = Field(description="Milliseconds")


class ParsedQuestions(WireModel):
    questions: List[EducationalQuestion]
    overall_goal: str
    reflection_prompt: str
    next_steps: List[str]


__all__ = [
    "AIProviderResponse",
    "CurrentState",
    "EducationalAction",
    "EducationalContext",
    "EducationalQuestion",
    "EducationalQuestionSet",
    "IndependenceMetrics",
    "LearningPreferences",
    "ParsedQuestions",
    "PerspectiveSuggestion",
    "QuestionType",
    "StudentLearningProfile",
    "TokenUsage",
    "ValidationResult",
    "WireModel",
    "WritingStage",
]
