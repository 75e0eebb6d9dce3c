from typing import List, Sequence

from .models import EducationalQuestion, QuestionType, StudentLearningProfile

CONCRETE_FOLLOW_UPS = (
    "Can you think of a specific example?",
    "How does this relate to your personal experience?",
)
SIMPLIFIED_SUFFIX = " (Simplified for current cognitive state)"
REASSURANCE_SUFFIX = " (Take your time with this - there's no wrong answer)"
PROCESS_IMPROVEMENT_PROMPT = "How does recognizing this pattern help you improve your writing process?"
EVIDENCE_STRENGTH_PROMPT = "What evidence would strengthen this point?"


class ProfileAdapter:
    def __init__(self):
        self.abstract_types = {QuestionType.CHALLENGING, QuestionType.PERSPECTIVE}
        self.strength_thresholds = {
            "metacognition": 80,
            "evidenceAnalysis": 80,
        }
        self.max_follow_ups_when_overloaded = 1

    def adapt_questions(
        self,
        questions: Sequence[EducationalQuestion],
        profile: StudentLearningProfile,
    ) -> List[EducationalQuestion]:
        """
        Personalize generated questions for a learner profile.

        Args:
            questions: Questions produced by the response parser
            profile: The learner's current profile

        Returns:
            A new list of adapted questions; the input is left untouched.
            Re-adapting the output with the same profile returns it unchanged.
        """

        return [self.adapt_question(question, profile) for question in questions]

    def adapt_question(
        self,
        question: EducationalQuestion,
        profile: StudentLearningProfile,
    ) -> EducationalQuestion:
        follow_ups = list(question.follow_up_prompts)
        rationale = question.educational_rationale
        text = question.question

        # Rules run in a fixed order: truncation must see the concrete prompts.
        if (
            profile.preferences.question_complexity == "concrete"
            and question.type in self.abstract_types
        ):
            follow_ups = list(CONCRETE_FOLLOW_UPS) + [
                prompt for prompt in follow_ups if prompt not in CONCRETE_FOLLOW_UPS
            ]

        if profile.current_state.cognitive_load == "overload":
            rationale = _with_suffix(rationale, SIMPLIFIED_SUFFIX)
            follow_ups = follow_ups[: self.max_follow_ups_when_overloaded]

        if profile.current_state.emotional_state == "frustrated":
            text = _with_suffix(text, REASSURANCE_SUFFIX)

        if (
            profile.strength("metacognition") > self.strength_thresholds["metacognition"]
            and question.type == QuestionType.REFLECTION
        ):
            follow_ups = _append_last(follow_ups, PROCESS_IMPROVEMENT_PROMPT)

        if (
            profile.strength("evidenceAnalysis") > self.strength_thresholds["evidenceAnalysis"]
            and question.type == QuestionType.EXPANDING
        ):
            follow_ups = _append_last(follow_ups, EVIDENCE_STRENGTH_PROMPT)

        return question.model_copy(
            update={
                "question": text,
                "educational_rationale": rationale,
                "follow_up_prompts": tuple(follow_ups),
            }
        )


def _with_suffix(value: str, suffix: str) -> str:
    return value if value.endswith(suffix) else f"{value}{suffix}"


def _append_last(prompts: List[str], prompt: str) -> List[str]:
    return [existing for existing in prompts if existing != prompt] + [prompt]


# Global instance
profile_adapter = ProfileAdapter()


__all__ = [
    "CONCRETE_FOLLOW_UPS",
    "EVIDENCE_STRENGTH_PROMPT",
    "PROCESS_IMPROVEMENT_PROMPT",
    "REASSURANCE_SUFFIX",
    "SIMPLIFIED_SUFFIX",
    "ProfileAdapter",
    "profile_adapter",
]
