from dataclasses import dataclass
from enum import Enum

from content_ideas.prompting.templates import resolve_hint


class Tone(str, Enum):
    NEUTRAL = "neutral"
    WITTY = "witty"
    PROFESSIONAL = "professional"
    TECHNICAL = "technical"
    RELATABLE = "relatable"

    @classmethod
    def parse(cls, value: str | None) -> "Tone":
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls.NEUTRAL


class Language(str, Enum):
    NORWEGIAN = "no"
    ENGLISH = "en"

    @classmethod
    def parse(cls, value: str | None) -> "Language":
        if (value or "").strip().lower() == cls.ENGLISH.value:
            return cls.ENGLISH
        return cls.NORWEGIAN


TONE_LINES: dict[Tone, str] = {
    Tone.NEUTRAL: "Bruk en nøytral, vennlig tone.",
    Tone.WITTY: "Tone: witty, lett og smart – men ikke klisjé.",
    Tone.PROFESSIONAL: "Tone: profesjonell og troverdig.",
    Tone.TECHNICAL: "Tone: teknisk og presis, men lettlest.",
    Tone.RELATABLE: "Tone: jordnær og relaterbar.",
}

LANGUAGE_LINES: dict[Language, str] = {
    Language.ENGLISH: "Write in concise, natural English.",
    Language.NORWEGIAN: "Skriv på norsk (bokmål).",
}

ROLE_LINE = "Du er en innholds-idéassistent for et SaaS-selskap i hospitality (Runwell)."
TASK_LINE = "Oppgave: Lag en liste med kreative, tydelige og handlingsbare idé-titler (1 linje hver)."
STYLE_LINE = "Unngå markedsførings-floskler, emojis og hashtags. Gjør forslagene konkrete og relevante."


@dataclass(frozen=True)
class PromptBundle:
    system: str
    user_messages: tuple[str, ...]

    def as_messages(self) -> list[dict[str, str]]:
        messages = [{"role": "system", "content": self.system}]
        messages.extend({"role": "user", "content": body} for body in self.user_messages)
        return messages


def tone_line(tone: Tone) -> str:
    return TONE_LINES[tone]


def language_line(language: Language) -> str:
    return LANGUAGE_LINES[language]


def format_line(count: int) -> str:
    return (
        f'Format: Returner KUN en JSON med {{ "ideas": string[] }} med nøyaktig {count} forslag, uten forklaring. '
        "Klarer du ikke JSON, skriv ett forslag per linje uten annen tekst."
    )


def build_prompt(
    template: str,
    count: int,
    context: str | None = None,
    tone: str | None = None,
    lang: str | None = None,
    audience: str | None = None,
    purpose: str | None = None,
) -> PromptBundle:
    """Render the chat prompt for one idea request.

    Optional fields are omitted entirely when blank. Free-form fields are
    collapsed to a single line so they stay inside their labelled slot.
    """
    system = "\n".join(
        [
            ROLE_LINE,
            TASK_LINE,
            format_line(count),
            language_line(Language.parse(lang)),
            tone_line(Tone.parse(tone)),
        ]
    )

    context_text = _single_line(context)
    audience_text = _single_line(audience)
    purpose_text = _single_line(purpose)
    user = "\n".join(
        line
        for line in [
            f"Mal: {_single_line(template)}",
            f"Antall forslag: {count}",
            f"Retningslinje for malen: {resolve_hint(template)}",
            f"Runwell-kontekst: {context_text}" if context_text else "",
            f"Målgruppe: {audience_text}" if audience_text else "",
            f"Formål: {purpose_text}" if purpose_text else "",
            STYLE_LINE,
        ]
        if line
    )
    return PromptBundle(system=system, user_messages=(user,))


def _single_line(value: str | None) -> str:
    return " ".join((value or "").split()).strip()
