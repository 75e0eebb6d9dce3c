"""Claude-backed provider that turns student writing into Socratic questions."""
from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Sequence, Union

from .errors import ConfigurationError, ProviderError
from .llm_client import ClaudeClient
from .models import (
    EducationalContext,
    EducationalQuestionSet,
    PerspectiveSuggestion,
    StudentLearningProfile,
    ValidationResult,
)
from .profile_adapter import ProfileAdapter, profile_adapter
from .prompts import EducationalPrompts, get_educational_prompts
from .response_parser import (
    fallback_validation,
    parse_perspective_response,
    parse_question_response,
    parse_validation_response,
)

logger = logging.getLogger(__name__)

ProfileLoader = Callable[[str], Awaitable[Union[StudentLearningProfile, Mapping[str, Any]]]]


class AIProvider(ABC):
    """Operations the rest of the platform may call on an AI provider."""

    name: str

    @abstractmethod
    async def generate_educational_questions(
        self, context: EducationalContext
    ) -> EducationalQuestionSet: ...

    @abstractmethod
    async def generate_perspectives(
        self,
        topic: str,
        current_arguments: Sequence[str],
        context: EducationalContext,
    ) -> List[PerspectiveSuggestion]: ...

    @abstractmethod
    async def validate_educational_response(self, response_text: str) -> ValidationResult: ...

    @abstractmethod
    async def health_check(self) -> bool: ...


class ClaudeProvider(AIProvider):
    """Orchestrates prompt building, the Claude call, parsing and adaptation."""

    name = "claude"

    def __init__(
        self,
        *,
        llm_client: Optional[ClaudeClient] = None,
        profile_loader: Optional[ProfileLoader] = None,
        adapter: Optional[ProfileAdapter] = None,
        prompts: Optional[EducationalPrompts] = None,
    ) -> None:
        self.llm_client = llm_client or ClaudeClient()
        self.profile_loader = profile_loader
        self.adapter = adapter or profile_adapter
        self.prompts = prompts or get_educational_prompts()

    async def generate_educational_questions(
        self, context: EducationalContext
    ) -> EducationalQuestionSet:
        self.llm_client.initialize()

        profile = await self._load_profile(context.student_id)
        prompt = self.prompts.get_question_generation_prompt(context, profile)

        try:
            response = await self.llm_client.call(prompt)
        except ConfigurationError:
            raise
        except Exception as exc:
            logger.error("Claude question generation failed", exc_info=True)
            raise ProviderError("Failed to generate educational questions") from exc

        parsed = parse_question_response(response.content)
        questions = list(parsed.questions)
        if profile is not None:
            questions = self.adapter.adapt_questions(questions, profile)

        return EducationalQuestionSet(
            request_id=str(uuid.uuid4()),
            action=self.prompts.get_action_for_stage(context.writing_stage),
            questions=questions,
            overall_educational_goal=parsed.overall_goal,
            reflection_prompt=parsed.reflection_prompt,
            next_step_suggestions=list(parsed.next_steps),
        )

    async def generate_perspectives(
        self,
        topic: str,
        current_arguments: Sequence[str],
        context: EducationalContext,
    ) -> List[PerspectiveSuggestion]:
        self.llm_client.initialize()
        prompt = self.prompts.get_perspective_prompt(topic, current_arguments, context)

        try:
            response = await self.llm_client.call(prompt)
        except ConfigurationError:
            raise
        except Exception as exc:
            logger.error("Claude perspective generation failed", exc_info=True)
            raise ProviderError("Failed to generate educational perspectives") from exc

        return parse_perspective_response(response.content)

    async def validate_educational_response(self, response_text: str) -> ValidationResult:
        """Judge a prior response; model failures fail open to a sound result."""

        self.llm_client.initialize()
        prompt = self.prompts.get_validation_prompt(response_text)

        try:
            response = await self.llm_client.call(prompt)
        except ConfigurationError:
            raise
        except Exception:
            logger.error("Claude validation call failed, assuming sound", exc_info=True)
            return fallback_validation()

        return parse_validation_response(response.content)

    async def health_check(self) -> bool:
        return await self.llm_client.health_check()

    async def _load_profile(self, student_id: Optional[str]) -> Optional[StudentLearningProfile]:
        if not student_id or self.profile_loader is None:
            return None
        try:
            loaded = await self.profile_loader(student_id)
            if isinstance(loaded, Mapping):
                loaded = StudentLearningProfile.model_validate(loaded)
            return loaded
        except Exception:
            logger.warning("Could not fetch student profile for %s", student_id, exc_info=True)
            return None


__all__ = ["AIProvider", "ClaudeProvider", "ProfileLoader"]
