"""Centralized prompt templates for the writing-coach provider."""

from typing import Dict, List, Optional, Sequence

from .models import (
    EducationalAction,
    EducationalContext,
    StudentLearningProfile,
    WritingStage,
)

HEALTH_CHECK_PROMPT = 'Health check - respond with "OK"'

STAGE_GUIDANCE: Dict[WritingStage, str] = {
    WritingStage.BRAINSTORMING: """
For brainstorming, focus on:
- Questions that expand thinking beyond obvious ideas
- Prompts that encourage creative connections
- Inquiries about personal experience and perspective
- Questions about audience and purpose""",
    WritingStage.DRAFTING: """
For drafting, focus on:
- Questions about organization and structure
- Prompts about evidence and support
- Inquiries about audience awareness
- Questions about clarity and flow""",
    WritingStage.REVISING: """
For revising, focus on:
- Questions that challenge arguments and logic
- Prompts about evidence strength and relevance
- Inquiries about counterarguments
- Questions about overall effectiveness""",
    WritingStage.EDITING: """
For editing, focus on:
- Questions about clarity and precision
- Prompts about word choice and style
- Inquiries about conventions and format
- Questions about final polish and presentation""",
}

STAGE_ACTIONS: Dict[WritingStage, EducationalAction] = {
    WritingStage.BRAINSTORMING: EducationalAction.GENERATE_PROMPTS,
    WritingStage.DRAFTING: EducationalAction.PROMPT_DEVELOPMENT,
    WritingStage.REVISING: EducationalAction.EVALUATE_ARGUMENTS,
    WritingStage.EDITING: EducationalAction.IDENTIFY_CLARITY_ISSUES,
}

STRUGGLING_THRESHOLD_MINUTES = 10
STRENGTH_THRESHOLD = 70


class EducationalPrompts:
    """Prompt templates for question, perspective and validation requests."""

    @staticmethod
    def get_stage_guidance(stage: object) -> str:
        """Stage-specific focus list; unknown stages get the drafting guidance."""
        parsed = WritingStage.parse(stage)
        if parsed is None:
            return STAGE_GUIDANCE[WritingStage.DRAFTING]
        return STAGE_GUIDANCE[parsed]

    @staticmethod
    def get_action_for_stage(stage: object) -> EducationalAction:
        parsed = WritingStage.parse(stage)
        if parsed is None:
            return EducationalAction.GENERATE_PROMPTS
        return STAGE_ACTIONS[parsed]

    @staticmethod
    def get_profile_guidance(profile: StudentLearningProfile) -> str:
        """Render the learner profile as plain-text guidance for the model.

        The block is a pure function of the profile: the same profile always
        yields the same text.
        """
        preferences = profile.preferences
        state = profile.current_state
        responds_to = ", ".join(preferences.best_responds_to) or "standard questions"

        sections: List[str] = [
            "STUDENT PROFILE INSIGHTS:",
            f"- Question Complexity Preference: {preferences.question_complexity}",
            f"- Average Reflection Depth: {preferences.average_reflection_depth:g}/100",
            f"- Best Responds To: {responds_to}",
            "\nCURRENT COGNITIVE STATE:",
            f"- Cognitive Load: {state.cognitive_load}",
            f"- Emotional State: {state.emotional_state}",
        ]

        if state.struggling_duration > STRUGGLING_THRESHOLD_MINUTES:
            sections.append(f"- Currently struggling for {state.struggling_duration:g} minutes")

        if state.recent_breakthrough:
            sections.append("- Recently had a breakthrough - build on this momentum")

        top_strengths = [
            skill for skill in profile.strengths if profile.strength(skill) > STRENGTH_THRESHOLD
        ]
        if top_strengths:
            sections.append("\nSTUDENT STRENGTHS TO LEVERAGE:")
            sections.append(f"- {', '.join(top_strengths)}")

        sections.append("\nADAPTATION REQUIREMENTS:")

        if preferences.question_complexity == "concrete":
            sections.append("- Use concrete examples and specific scenarios")
            sections.append("- Avoid overly abstract or theoretical questions")
        elif preferences.question_complexity == "abstract":
            sections.append("- Engage with theoretical concepts and abstract thinking")
            sections.append("- Challenge with complex analytical questions")

        if state.cognitive_load == "overload":
            sections.append("- Simplify questions and reduce cognitive demands")
            sections.append("- Focus on one concept at a time")
        elif state.cognitive_load == "low":
            sections.append("- Increase question complexity to maintain engagement")
            sections.append("- Introduce challenging perspectives")

        if state.emotional_state == "frustrated":
            sections.append("- Provide encouraging and supportive questions")
            sections.append("- Break down complex ideas into manageable steps")
        elif state.emotional_state == "confident":
            sections.append("- Challenge with deeper analytical questions")
            sections.append("- Encourage exploration of nuanced perspectives")

        if profile.independence_metrics.trend == "decreasing":
            sections.append("- Questions should guide toward independent thinking")
            sections.append("- Avoid providing too much structure")

        return "\n".join(sections)

    @staticmethod
    def get_question_generation_prompt(
        context: EducationalContext,
        profile: Optional[StudentLearningProfile] = None,
    ) -> str:
        """Generate the Socratic question prompt for a piece of student writing."""
        stage_guidance = EducationalPrompts.get_stage_guidance(context.writing_stage)
        profile_guidance = EducationalPrompts.get_profile_guidance(profile) if profile else ""

        return f"""You are an educational AI assistant for a writing platform. Your role is to ask thoughtful questions that help students think deeper about their writing, NOT to provide answers or write content for them.

EDUCATIONAL CONTEXT:
- Writing Stage: {context.writing_stage}
- Student Level: {context.academic_level}
- Specific Question: {context.specific_question}
- Learning Objective: {context.learning_objective}

STUDENT'S CURRENT WRITING:
"{context.content_sample}"

STAGE-SPECIFIC GUIDANCE:
{stage_guidance}

{profile_guidance}

CRITICAL EDUCATIONAL RULES:
1. Ask questions, NEVER provide answers
2. Encourage critical thinking and self-discovery
3. Help students develop their own ideas
4. Focus on the learning process, not the product
5. Maintain academic integrity

Please provide 3-5 educational questions that will help this student think deeper about their writing. For each question, explain why it's educationally valuable.

Format your response as JSON:
{{
  "questions": [
    {{
      "id": "q1",
      "type": "clarifying|expanding|challenging|perspective|reflection",
      "question": "Your thoughtful question here",
      "educationalRationale": "Why this question helps learning",
      "expectedOutcome": "What the student should discover",
      "followUpPrompts": ["Additional prompts if needed"]
    }}
  ],
  "overallGoal": "What this set of questions aims to achieve",
  "reflectionPrompt": "A question for the student to reflect on after engaging with these questions",
  "nextSteps": ["Suggestions for what the student should do next"]
}}"""

    @staticmethod
    def get_perspective_prompt(
        topic: str,
        current_arguments: Sequence[str],
        context: EducationalContext,
    ) -> str:
        """Generate prompt asking for alternative viewpoints to explore."""
        arguments = "\n".join(
            f"{index}. {argument}" for index, argument in enumerate(current_arguments, start=1)
        )

        return f"""You are an educational AI assistant helping a student explore different perspectives on a topic. Your role is to suggest alternative viewpoints for the student to consider and explore through their own research and thinking.

TOPIC: {topic}

STUDENT'S CURRENT ARGUMENTS:
{arguments}

EDUCATIONAL CONTEXT:
- Writing Stage: {context.writing_stage}
- Student Level: {context.academic_level}
- Learning Objective: {context.learning_objective}

Please suggest 3-4 alternative perspectives the student should consider. For each perspective, provide questions they should explore, not answers.

Format as JSON:
{{
  "perspectives": [
    {{
      "id": "p1",
      "perspective": "Name of the perspective",
      "description": "Brief description of this viewpoint",
      "questionsToExplore": ["Questions for the student to investigate"],
      "educationalValue": "Why exploring this perspective enhances learning",
      "resourceSuggestions": ["Types of sources to look for"]
    }}
  ]
}}"""

    @staticmethod
    def get_validation_prompt(response_text: str) -> str:
        """Generate prompt for judging whether a response stays educational."""
        return f"""
As an educational AI validator, analyze this response to ensure it meets educational standards:

Response to validate: "{response_text}"

Check for:
1. Does it provide questions rather than answers?
2. Does it encourage critical thinking?
3. Does it maintain educational boundaries?
4. Is it appropriate for academic learning?

Respond with JSON format:
{{
  "isEducationallySound": boolean,
  "containsAnswers": boolean,
  "providesQuestions": boolean,
  "alignsWithLearningObjectives": boolean,
  "appropriateComplexity": boolean,
  "issues": ["list", "of", "issues"],
  "suggestions": ["list", "of", "improvements"]
}}"""


def get_educational_prompts() -> EducationalPrompts:
    """Get the educational prompts instance."""
    return EducationalPrompts()
