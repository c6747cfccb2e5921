from types import MappingProxyType

DEFAULT_HINT = "Gi gode, varierte idéforslag knyttet til temaet."

TEMPLATE_HINTS = MappingProxyType(
    {
        "Dagens kaffeprat": "Gi korte, konkrete tema-forslag som kan diskuteres på 5 minutter i et teammøte.",
        "Tips og triks i Runwell": "Gi tips som hjelper praktisk bruk av Runwell i daglig drift.",
        "Fakta fredag": "Gi små, «visste du at?»-fakta relatert til internkontroll/horeca som engasjerer.",
        "Behind the scenes": "Gi idéer som viser ekte innsikt i drift, mennesker og prosesser.",
        "Riktig rutine – uke": "Gi forslag til ukens rutiner/oppgaver som bør fremheves for teamet.",
        "FAQ / Myteknuser": "Gi forslag til spørsmål/myter kunder/ansatte ofte har, med vinkling til å oppklare.",
    }
)


def resolve_hint(template: str | None) -> str:
    # Exact match only; unknown templates are a normal case.
    return TEMPLATE_HINTS.get(template or "", DEFAULT_HINT)
