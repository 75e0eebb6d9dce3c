"""
Shared fixtures for the writing-assistant service tests.

The Anthropic SDK is never contacted: every test injects a fake client whose
``messages.create`` is an ``AsyncMock``.
"""
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from writing_assistant.services.llm_client import ClaudeClient  # noqa: E402
from writing_assistant.services.models import (  # noqa: E402
    CurrentState,
    EducationalContext,
    EducationalQuestion,
    IndependenceMetrics,
    LearningPreferences,
    QuestionType,
    StudentLearningProfile,
)
from writing_assistant.services.settings import ClaudeSettings  # noqa: E402


def make_message(text, block_type="text"):
    """Build an object shaped like an Anthropic Messages API response."""
    return SimpleNamespace(content=[SimpleNamespace(type=block_type, text=text)])


def make_fake_anthropic(reply=None, error=None):
    create = AsyncMock()
    if error is not None:
        create.side_effect = error
    else:
        create.return_value = make_message(reply if reply is not None else "")
    return SimpleNamespace(messages=SimpleNamespace(create=create))


@pytest.fixture
def test_settings():
    return ClaudeSettings(api_key="test-key", model="claude-test", max_tokens=512, temperature=0.3)


@pytest.fixture
def make_client(test_settings):
    def _make(reply=None, error=None):
        fake = make_fake_anthropic(reply=reply, error=error)
        client = ClaudeClient(settings_loader=lambda: test_settings, client=fake)
        return client, fake

    return _make


@pytest.fixture
def drafting_context():
    return EducationalContext(
        writing_stage="drafting",
        academic_level="undergraduate",
        specific_question="How do I organize my argument?",
        learning_objective="Build a coherent argumentative essay",
        content_sample="Social media has changed how teenagers communicate.",
    )


@pytest.fixture
def question_payload():
    return json.dumps(
        {
            "questions": [
                {
                    "id": "q1",
                    "type": "expanding",
                    "question": "What evidence supports your opening claim?",
                    "educationalRationale": "Grounds the claim",
                    "expectedOutcome": "Student finds supporting sources",
                    "followUpPrompts": ["Which source is most credible?"],
                },
                {
                    "type": "reflection",
                    "question": "What surprised you while drafting?",
                },
            ],
            "overallGoal": "Strengthen the argument",
            "reflectionPrompt": "What changed in your thinking?",
            "nextSteps": ["Gather evidence"],
        }
    )


@pytest.fixture
def neutral_profile():
    return StudentLearningProfile()


@pytest.fixture
def make_profile():
    def _make(
        complexity="balanced",
        cognitive_load="optimal",
        emotional_state="neutral",
        strengths=None,
        struggling_duration=0,
        recent_breakthrough=False,
        trend="stable",
        best_responds_to=(),
    ):
        return StudentLearningProfile(
            preferences=LearningPreferences(
                question_complexity=complexity,
                average_reflection_depth=65,
                best_responds_to=tuple(best_responds_to),
            ),
            current_state=CurrentState(
                cognitive_load=cognitive_load,
                emotional_state=emotional_state,
                struggling_duration=struggling_duration,
                recent_breakthrough=recent_breakthrough,
            ),
            strengths=dict(strengths or {}),
            independence_metrics=IndependenceMetrics(trend=trend),
        )

    return _make


@pytest.fixture
def make_question():
    def _make(question_type=QuestionType.CLARIFYING, follow_ups=(), qid="q1"):
        return EducationalQuestion(
            id=qid,
            type=question_type,
            question="Why does this matter to your reader?",
            educational_rationale="Builds audience awareness",
            expected_outcome="Clearer purpose",
            follow_up_prompts=tuple(follow_ups),
        )

    return _make
