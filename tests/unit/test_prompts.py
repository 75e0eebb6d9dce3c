"""
Unit tests for the prompt templates.
"""

import pytest

from writing_assistant.services.models import EducationalAction, WritingStage
from writing_assistant.services.prompts import STAGE_GUIDANCE, EducationalPrompts


class TestStageDispatch:
    @pytest.mark.parametrize("stage", ["poetry", "", None, "DRAFT"])
    def test_unknown_stage_uses_drafting_guidance(self, stage):
        assert EducationalPrompts.get_stage_guidance(stage) == STAGE_GUIDANCE[WritingStage.DRAFTING]

    def test_every_stage_has_guidance(self):
        for stage in WritingStage:
            assert f"For {stage.value}, focus on:" in EducationalPrompts.get_stage_guidance(stage.value)

    @pytest.mark.parametrize(
        "stage,action",
        [
            ("brainstorming", EducationalAction.GENERATE_PROMPTS),
            ("drafting", EducationalAction.PROMPT_DEVELOPMENT),
            ("revising", EducationalAction.EVALUATE_ARGUMENTS),
            ("editing", EducationalAction.IDENTIFY_CLARITY_ISSUES),
            ("outlining", EducationalAction.GENERATE_PROMPTS),
        ],
    )
    def test_action_for_stage(self, stage, action):
        assert EducationalPrompts.get_action_for_stage(stage) is action


class TestQuestionPrompt:
    def test_embeds_context_and_rules(self, drafting_context):
        prompt = EducationalPrompts.get_question_generation_prompt(drafting_context)

        assert "- Writing Stage: drafting" in prompt
        assert "- Student Level: undergraduate" in prompt
        assert '"Social media has changed how teenagers communicate."' in prompt
        assert "Ask questions, NEVER provide answers" in prompt
        assert "Maintain academic integrity" in prompt
        assert '"overallGoal"' in prompt
        assert "STUDENT PROFILE INSIGHTS" not in prompt

    def test_appends_profile_block(self, drafting_context, make_profile):
        profile = make_profile(complexity="concrete")
        prompt = EducationalPrompts.get_question_generation_prompt(drafting_context, profile)

        assert "STUDENT PROFILE INSIGHTS:" in prompt
        assert "- Use concrete examples and specific scenarios" in prompt


class TestProfileGuidance:
    def test_is_deterministic(self, make_profile):
        profile = make_profile(strengths={"metacognition": 90, "grammar": 40})
        assert EducationalPrompts.get_profile_guidance(profile) == EducationalPrompts.get_profile_guidance(profile)

    def test_struggling_note_only_above_ten_minutes(self, make_profile):
        assert "Currently struggling" not in EducationalPrompts.get_profile_guidance(
            make_profile(struggling_duration=10)
        )
        assert "- Currently struggling for 15 minutes" in EducationalPrompts.get_profile_guidance(
            make_profile(struggling_duration=15)
        )

    def test_breakthrough_note(self, make_profile):
        guidance = EducationalPrompts.get_profile_guidance(make_profile(recent_breakthrough=True))
        assert "Recently had a breakthrough" in guidance

    def test_strengths_filtered_above_seventy(self, make_profile):
        guidance = EducationalPrompts.get_profile_guidance(
            make_profile(strengths={"metacognition": 90, "grammar": 70, "evidenceAnalysis": 71})
        )
        assert "STUDENT STRENGTHS TO LEVERAGE:\n- metacognition, evidenceAnalysis" in guidance
        assert "grammar" not in guidance

    def test_no_strengths_section_when_none_qualify(self, make_profile):
        guidance = EducationalPrompts.get_profile_guidance(make_profile(strengths={"grammar": 20}))
        assert "STUDENT STRENGTHS TO LEVERAGE" not in guidance

    def test_best_responds_to_default(self, make_profile):
        assert "- Best Responds To: standard questions" in EducationalPrompts.get_profile_guidance(make_profile())
        assert "- Best Responds To: examples, analogies" in EducationalPrompts.get_profile_guidance(
            make_profile(best_responds_to=["examples", "analogies"])
        )

    def test_adaptation_directives(self, make_profile):
        guidance = EducationalPrompts.get_profile_guidance(
            make_profile(
                complexity="abstract",
                cognitive_load="overload",
                emotional_state="frustrated",
                trend="decreasing",
            )
        )
        assert "- Engage with theoretical concepts and abstract thinking" in guidance
        assert "- Focus on one concept at a time" in guidance
        assert "- Break down complex ideas into manageable steps" in guidance
        assert "- Avoid providing too much structure" in guidance

    def test_low_load_and_confident_directives(self, make_profile):
        guidance = EducationalPrompts.get_profile_guidance(
            make_profile(cognitive_load="low", emotional_state="confident")
        )
        assert "- Introduce challenging perspectives" in guidance
        assert "- Encourage exploration of nuanced perspectives" in guidance


class TestOtherPrompts:
    def test_perspective_prompt_numbers_arguments(self, drafting_context):
        prompt = EducationalPrompts.get_perspective_prompt(
            "Screen time", ["It harms sleep", "It isolates teens"], drafting_context
        )
        assert "TOPIC: Screen time" in prompt
        assert "1. It harms sleep\n2. It isolates teens" in prompt
        assert "3-4 alternative perspectives" in prompt

    def test_validation_prompt_embeds_response(self):
        prompt = EducationalPrompts.get_validation_prompt("Have you considered your audience?")
        assert 'Response to validate: "Have you considered your audience?"' in prompt
        assert '"isEducationallySound": boolean' in prompt
