from .errors import ConfigurationError, ProviderError
from .llm_client import ClaudeClient
from .models import (
    AIProviderResponse,
    EducationalAction,
    EducationalContext,
    EducationalQuestion,
    EducationalQuestionSet,
    PerspectiveSuggestion,
    QuestionType,
    StudentLearningProfile,
    TokenUsage,
    ValidationResult,
    WritingStage,
)
from .profile_adapter import ProfileAdapter
from .provider import AIProvider, ClaudeProvider

__all__ = [
    "AIProvider",
    "AIProviderResponse",
    "ClaudeClient",
    "ClaudeProvider",
    "ConfigurationError",
    "EducationalAction",
    "EducationalContext",
    "EducationalQuestion",
    "EducationalQuestionSet",
    "PerspectiveSuggestion",
    "ProfileAdapter",
    "ProviderError",
    "QuestionType",
    "StudentLearningProfile",
    "TokenUsage",
    "ValidationResult",
    "WritingStage",
]
