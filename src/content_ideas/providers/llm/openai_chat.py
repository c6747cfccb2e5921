import logging
from typing import Any

from content_ideas.config import Settings
from content_ideas.errors import UpstreamError
from content_ideas.prompting.builder import PromptBundle

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 1000
PAYLOAD_LOG_LIMIT = 4000


class OpenAIChatProvider:
    """OpenAI-compatible chat completions through langchain-openai."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.llm_model = self._strip_provider_prefix(settings.openai_model)
        self._llm: Any | None = None

    async def complete(self, bundle: PromptBundle) -> str:
        from langchain_core.messages import HumanMessage, SystemMessage

        messages = [SystemMessage(content=bundle.system)]
        messages.extend(HumanMessage(content=body) for body in bundle.user_messages)
        logger.info(
            "llm.call model=%s temperature=%.2f timeout=%.1fs retries=%d",
            self.llm_model,
            self.settings.llm_temperature,
            self.settings.llm_timeout_seconds,
            self.settings.llm_num_retries,
        )
        logger.info(
            "llm.request.full model=%s\n%s",
            self.llm_model,
            self._clip("\n".join(message["content"] for message in bundle.as_messages()), PAYLOAD_LOG_LIMIT, fold=False),
        )
        try:
            response = await self._get_llm().ainvoke(messages)
        except Exception as exc:
            detail = self._extract_error_detail(exc)
            logger.error(
                "llm.error model=%s type=%s detail=%s",
                self.llm_model,
                exc.__class__.__name__,
                detail,
            )
            status_code = getattr(exc, "status_code", None)
            prefix = f"Upstream error: {status_code}" if status_code is not None else "Upstream error:"
            raise UpstreamError(f"{prefix} {self._error_message(exc)}", upstream_status=status_code) from exc

        if not hasattr(response, "content"):
            logger.error("llm.error model=%s type=MalformedResponse detail=%s", self.llm_model, type(response).__name__)
            raise UpstreamError("Upstream error: response carried no message content")

        text = self._message_text(response.content)
        logger.info("llm.response.full model=%s\n%s", self.llm_model, self._clip(text, PAYLOAD_LOG_LIMIT, fold=False))
        return text

    def _get_llm(self):
        if self._llm is None:
            from langchain_openai import ChatOpenAI

            self._llm = ChatOpenAI(
                model=self.llm_model,
                api_key=self.settings.openai_api_key or None,
                base_url=self.settings.openai_base_url,
                temperature=self.settings.llm_temperature,
                timeout=self.settings.llm_timeout_seconds,
                max_retries=self.settings.llm_num_retries,
            )
        return self._llm

    @staticmethod
    def _message_text(content: Any) -> str:
        if isinstance(content, str):
            return content.strip()
        if isinstance(content, list):
            parts: list[str] = []
            for item in content:
                if isinstance(item, dict):
                    parts.append(str(item.get("text", "")))
                else:
                    parts.append(str(item))
            return "\n".join(parts).strip()
        return str(content).strip()

    @staticmethod
    def _error_message(exc: Exception) -> str:
        message = getattr(exc, "message", None) or str(exc) or exc.__class__.__name__
        return OpenAIChatProvider._clip(str(message), ERROR_LOG_LIMIT)

    def _extract_error_detail(self, exc: Exception) -> str:
        status_code = getattr(exc, "status_code", None)
        message = getattr(exc, "message", None) or str(exc)
        body = getattr(exc, "body", None)
        details = [f"status_code={status_code}" if status_code is not None else ""]
        if body is not None:
            details.append(f"body={body}")
        details.append(f"message={message}")
        return self._clip(" ".join([part for part in details if part]).strip(), ERROR_LOG_LIMIT)

    @staticmethod
    def _clip(text: str, limit: int, fold: bool = True) -> str:
        normalized = " ".join(text.split()).strip() if fold else text
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"

    @staticmethod
    def _strip_provider_prefix(model: str) -> str:
        if "/" not in model:
            return model
        return model.split("/", 1)[1]
