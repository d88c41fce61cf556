"""Turn a match set into one reply string, possibly made of several bubbles."""

from dataclasses import dataclass
from typing import Sequence

from intent import ResponseRule
from profile_data import facts
from random_source import RandomSource

SEGMENT_SEPARATOR = "\n\n"
MAX_SEGMENTS = 3

_DEFAULT_TEMPLATES = (
    "Interesante pregunta. No tengo una respuesta preparada para eso, pero puedo hablarte de la carrera, los proyectos o las habilidades de {nombre}.",
    "No estoy segura de haber entendido. Prueba preguntarme por la formación, la música o las mascotas de {nombre}.",
    "Hmm, eso se escapa de lo que sé. Mi especialidad es {nombre}: pregúntame lo que quieras sobre su perfil.",
)

DEFAULT_REPLIES = tuple(t.format(**facts()) for t in _DEFAULT_TEMPLATES)


@dataclass(frozen=True)
class ComposedReply:
    text: str
    rule_names: tuple[str, ...]
    match_count: int

    @property
    def segments(self) -> list[str]:
        return self.text.split(SEGMENT_SEPARATOR)


def compose_reply(normalized: str, matches: Sequence[ResponseRule], rng: RandomSource) -> ComposedReply:
    k = len(matches)
    if k == 0:
        return ComposedReply(text=rng.choice(DEFAULT_REPLIES), rule_names=(), match_count=0)
    if k == 1:
        rule = matches[0]
        return ComposedReply(text=rule.generate(normalized, rng), rule_names=(rule.name,), match_count=1)

    selected = rng.shuffle(matches)[: min(k, MAX_SEGMENTS)]
    parts = [rule.generate(normalized, rng) for rule in selected]
    return ComposedReply(
        text=SEGMENT_SEPARATOR.join(parts),
        rule_names=tuple(rule.name for rule in selected),
        match_count=k,
    )
