"""Intent rules, the match pass, and query analysis for interaction logging.

Depends only on text_utils and random_source (no engine/catalog dependencies).
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from random_source import RandomSource
from text_utils import normalize_message


class TopicTag(str, Enum):
    TRAJECTORY = "trajectory"
    PROJECTS = "projects"
    EDUCATION = "education"
    SKILLS = "skills"
    DEFAULT = "default"


Predicate = Callable[[str], bool]
Generator = Callable[[str, RandomSource], str]


@dataclass(frozen=True)
class ResponseRule:
    """One conversational topic.

    ``predicate`` receives the normalized message. ``generate`` receives the
    same message (so it can pull keywords out of it, or an empty string on the
    follow-up path) and the random source used for template selection.
    ``topic`` names the follow-up bucket this rule answers when a user accepts
    an invitation; ``None`` keeps the rule out of follow-up resolution.
    """

    name: str
    predicate: Predicate
    generate: Generator
    topic: Optional[TopicTag] = None

    def matches(self, normalized: str) -> bool:
        return bool(self.predicate(normalized))


def _compile(pattern: str) -> "re.Pattern[str]":
    # Word boundaries that also work for terms ending in symbols (c++, c#).
    return re.compile(rf"(?<!\w)(?:{pattern})(?!\w)")


def pattern_predicate(*patterns: str, exclude: Sequence[str] = ()) -> Predicate:
    """Build a predicate that is true when any pattern matches and no exclusion does."""
    include_res = [_compile(p) for p in patterns]
    exclude_res = [_compile(p) for p in exclude]

    def _predicate(normalized: str) -> bool:
        text = normalized or ""
        if any(r.search(text) for r in exclude_res):
            return False
        return any(r.search(text) for r in include_res)

    return _predicate


def template_generator(templates: Sequence[str], values: Optional[dict] = None) -> Generator:
    """Uniform pick from *templates*, formatted with *values* when given."""
    if not templates:
        raise ValueError("a generator needs at least one template")
    pool = tuple(templates)

    def _generate(_normalized: str, rng: RandomSource) -> str:
        text = rng.choice(pool)
        return text.format(**values) if values else text

    return _generate


def match_rules(normalized: str, rules: Iterable[ResponseRule]) -> tuple[ResponseRule, ...]:
    """Evaluate every rule (no early exit) and keep the matches in catalog order."""
    return tuple(rule for rule in rules if rule.matches(normalized))


# ---------------------------------------------------------------------------
# Query analysis (logging only, never used for reply selection)
# ---------------------------------------------------------------------------

_TECHNOLOGY_RES = (
    re.compile(
        r"(?<!\w)(javascript|js|typescript|ts|react native|react|node\.?js|python|sql|php|"
        r"c\+\+|c#|blazor|figma|fresh|deno)(?!\w)"
    ),
    re.compile(
        r"(?<!\w)(angular|vue|svelte|next\.?js|nuxt|express|django|flask|laravel|symfony|"
        r"ruby|rails|java|kotlin|swift)(?!\w)"
    ),
    re.compile(r"(?<!\w)(frontend|backend|fullstack|desarrollo web|web development|movil|mobile)(?!\w)"),
)

_COMPANY_RES = (
    re.compile(
        r"\b(hospital|juan noe|istyle|apple|leonardo|da vinci|tisa|ancestral|ultracropcare|santo tomas)\b"
    ),
    re.compile(r"\b(mercado e|second mind|universidad|liceo|colegio|escuela)\b"),
)

_TOPIC_RES = (
    re.compile(
        r"\b(educacion|experiencia|habilidades|proyectos|trabajo|trayectoria|contacto|"
        r"vida personal|hobbies)\b"
    ),
    re.compile(r"\b(musica|videojuegos|series|peliculas|anime|mascotas|comida|metodologia|gestion)\b"),
    re.compile(r"\b(portafolio|portfolio|pagina|sitio web|tecnicas|futuro|planes|filosofia|desarrollo)\b"),
)

POSITIVE_WORDS = (
    "gracias", "bueno", "excelente", "genial", "increible", "me gusta", "me encanta",
    "util", "interesante", "divertido", "bien", "agradable", "feliz", "contento",
    "agradecido", "maravilloso", "fantastico", "espectacular", "amable", "impresionante",
    "cool", "bacan", "asombroso", "grandioso", "estupendo",
)

NEGATIVE_WORDS = (
    "malo", "pesimo", "terrible", "horrible", "no me gusta", "odio", "inutil",
    "aburrido", "dificil", "complicado", "confuso", "molesto", "triste", "frustrado",
    "decepcionado", "decepcionante", "estupido", "tonto", "basura", "no sirve",
    "no funciona", "no entiendo", "feo",
)


def _unique_matches(text: str, patterns: Sequence["re.Pattern[str]"]) -> list[str]:
    out: list[str] = []
    for pattern in patterns:
        for m in pattern.finditer(text):
            value = m.group(1)
            if value not in out:
                out.append(value)
    return out


def extract_entities(message: str) -> dict[str, list[str]]:
    """Technologies, organizations and broad themes mentioned in *message*."""
    low = normalize_message(message)
    return {
        "tecnologias": _unique_matches(low, _TECHNOLOGY_RES),
        "empresas": _unique_matches(low, _COMPANY_RES),
        "temas": _unique_matches(low, _TOPIC_RES),
    }


def analyze_sentiment(message: str) -> float:
    """Lexicon polarity in [-1, 1]; 0.0 when no lexicon entry occurs.

    Substring counting, so "no me gusta" also counts "me gusta" as positive.
    """
    low = normalize_message(message)
    pos = sum(1 for w in POSITIVE_WORDS if w in low)
    neg = sum(1 for w in NEGATIVE_WORDS if w in low)
    if pos == 0 and neg == 0:
        return 0.0
    return (pos - neg) / float(pos + neg)
