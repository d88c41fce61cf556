"""Probabilistic name lead-in for composed replies."""

from typing import Optional

from random_source import RandomSource
from text_utils import normalize_whitespace

PERSONALIZE_PROBABILITY = 0.7

LEAD_INS = (
    "{name}, ",
    "Mira, {name}: ",
    "Te cuento, {name}: ",
    "Bueno {name}, ",
)

# Replies opening with these already read as a direct address.
SKIP_OPENERS = (
    "Lo siento", "Perdón", "Disculpa", "¡Genial", "¡Qué bien", "¡Excelente", "¡Claro", "¡Gracias",
)


def _lower_first_letter(text: str) -> str:
    idx = 0
    while idx < len(text) and text[idx] in "¡¿":
        idx += 1
    if idx >= len(text):
        return text
    return text[:idx] + text[idx].lower() + text[idx + 1:]


def personalize(reply: str, user_name: Optional[str], rng: RandomSource) -> tuple[str, bool]:
    """Return the (possibly) personalized reply and whether a lead-in was added."""
    # Inner whitespace collapses too; a newline in a name would split the reply.
    name = normalize_whitespace(user_name or "")
    if not name or not reply:
        return reply, False
    if rng.random() >= PERSONALIZE_PROBABILITY:
        return reply, False
    if name.lower() in reply.lower() or reply.startswith(SKIP_OPENERS):
        return reply, False
    lead_in = rng.choice(LEAD_INS).format(name=name)
    return lead_in + _lower_first_letter(reply), True
