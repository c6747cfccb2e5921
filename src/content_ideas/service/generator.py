import logging

from content_ideas.api.schemas import IdeaRequest
from content_ideas.config import Settings, get_settings
from content_ideas.errors import ConfigurationError, InputError
from content_ideas.parsing.normalizer import normalize_ideas
from content_ideas.prompting.builder import build_prompt
from content_ideas.providers.llm.openai_chat import OpenAIChatProvider

logger = logging.getLogger(__name__)


class IdeaService:
    def __init__(self, settings: Settings | None = None, provider: OpenAIChatProvider | None = None) -> None:
        self.settings = settings or get_settings()
        self.provider = provider or OpenAIChatProvider(self.settings)

    async def generate(self, request: IdeaRequest) -> list[str]:
        if not self.settings.has_api_key:
            logger.error("ideas.config_missing key=OPENAI_API_KEY")
            raise ConfigurationError("OPENAI_API_KEY mangler i miljøvariabler")

        context = (request.context or "").strip()
        if not context:
            raise InputError("Feltet 'context' er påkrevd og kan ikke være tomt")

        count = self.resolve_count(request.count)
        logger.info(
            "ideas.request template=%s count=%d tone=%s lang=%s",
            request.template,
            count,
            request.tone or "-",
            request.lang or "-",
        )
        bundle = build_prompt(
            template=request.template,
            count=count,
            context=context,
            tone=request.tone,
            lang=request.lang,
            audience=request.audience,
            purpose=request.purpose,
        )
        raw = await self.provider.complete(bundle)
        ideas = normalize_ideas(raw, count)
        logger.info("ideas.normalized requested=%d returned=%d", count, len(ideas))
        return ideas

    def resolve_count(self, count: int | None) -> int:
        if count is None:
            return self.settings.idea_default_count
        return min(count, self.settings.idea_max_count)
