"""Content policy: romantic/sexual solicitation filter and deflection replies."""

import re
from dataclasses import dataclass
from typing import Optional

from profile_data import facts
from random_source import RandomSource


# Tested against the raw message, so "cásate" and "casate" both hit but an
# accent-stripped variant of any other term is not guaranteed to.
DISALLOWED_PATTERN = re.compile(
    r"\b("
    r"sexo|sexual|sexy|porno|porn|nudes|desnud\w*|xxx|er[oó]tic\w*|sensual|"
    r"novi[oa]s?|cita conmigo|salir conmigo|te amo|te quiero(?!\s+(?:preguntar|hacer|contar|pedir|decir|consultar))|enamorad[oa]s?|"
    r"besos?|c[aá]sate conmigo|coquete\w*|ligar|solter[oa]s?"
    r")\b",
    re.IGNORECASE,
)

DEFLECTION_TEMPLATES = (
    "Preferiría enfocar nuestra conversación en temas relacionados con el perfil profesional de {nombre}. "
    "¿Hay algo específico sobre su experiencia, habilidades o proyectos que te gustaría conocer?",
    "Estoy diseñada para compartir información sobre {nombre} y su trayectoria profesional. "
    "¿Puedo ayudarte con alguna pregunta sobre su perfil, habilidades técnicas o proyectos?",
    "Mi propósito es hablar de {nombre} en un contexto profesional. "
    "¿Hay algún aspecto de su carrera, educación o habilidades técnicas que te interese conocer?",
    "Prefiero mantener la conversación centrada en temas profesionales relacionados con {nombre}. "
    "¿Te gustaría saber algo sobre su experiencia, formación o proyectos desarrollados?",
    "Ese tema queda fuera de lo que puedo conversar. Con gusto te cuento sobre el trabajo de {nombre}, "
    "sus tecnologías favoritas o sus proyectos.",
)


@dataclass(frozen=True)
class ModerationResult:
    blocked: bool
    matched_term: Optional[str] = None
    reply: Optional[str] = None


def find_disallowed_term(raw: str) -> Optional[str]:
    m = DISALLOWED_PATTERN.search(raw or "")
    return m.group(1) if m else None


def moderation_decision(raw: str, rng: RandomSource) -> ModerationResult:
    """Check the unnormalized message and pick a deflection when it is off-limits.

    No random draw happens for allowed messages.
    """
    term = find_disallowed_term(raw)
    if term is None:
        return ModerationResult(blocked=False)
    reply = rng.choice(DEFLECTION_TEMPLATES).format(**facts())
    return ModerationResult(blocked=True, matched_term=term, reply=reply)
