"""One-slot conversational memory and the session-keyed store that holds it."""

import os
import re
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from intent import ResponseRule, TopicTag
from profile_data import facts
from random_source import RandomSource
from text_utils import normalize_message, strip_edge_punctuation


def _env_int(name: str, default: int, min_value: int, max_value: int) -> int:
    raw = os.getenv(name)
    try:
        value = int(raw) if raw not in (None, "") else default
    except Exception:
        value = default
    return max(min_value, min(max_value, value))


CONTEXT_TTL_HOURS = _env_int("CONTEXT_TTL_HOURS", 24, 1, 168)
CONTEXT_MAX_SESSIONS = _env_int("CONTEXT_MAX_SESSIONS", 10000, 1, 1000000)
CONTEXT_SWEEP_MINUTES = _env_int("CONTEXT_SWEEP_MINUTES", 10, 0, 1440)


@dataclass(frozen=True)
class ConversationContext:
    last_invitation_text: str = ""
    last_topic: Optional[TopicTag] = None

    @property
    def is_empty(self) -> bool:
        return self.last_topic is None and not self.last_invitation_text


EMPTY_CONTEXT = ConversationContext()


INVITATION_PATTERN = re.compile(
    r"te gustaria (?:saber|conocer)"
    r"|quieres (?:saber|conocer|que te cuente)"
    r"|te interesa (?:saber|conocer)"
    r"|quieres que profundice"
    r"|quieres mas detalles"
)

# Priority order matters: the first family that matches wins.
TOPIC_FAMILIES: tuple[tuple[TopicTag, "re.Pattern[str]"], ...] = (
    (TopicTag.TRAJECTORY, re.compile(r"\b(?:trayectoria|experiencia\w*|trabaj\w*|empresa\w*|laboral\w*)")),
    (TopicTag.PROJECTS, re.compile(r"\bproyecto")),
    (TopicTag.EDUCATION, re.compile(r"\b(?:educacion|estudi\w*|tesis|universidad|formacion|titulo)")),
    (TopicTag.SKILLS, re.compile(r"\b(?:habilidad\w*|tecnologia\w*|stack|lenguaje\w*|herramienta\w*)")),
)

BARE_AFFIRMATIONS = frozenset({
    "si", "ok", "okay", "dale", "claro", "bueno", "vale", "por supuesto", "obvio",
    "adelante", "me interesa", "cuentame mas", "dime mas", "tell me more", "yes",
    "sip", "si por favor", "claro que si", "porfa",
})

_FOLLOWUP_TEMPLATES: dict[TopicTag, tuple[str, ...]] = {
    TopicTag.TRAJECTORY: (
        "Su etapa más reciente es en {actual}, donde desarrolla software empresarial con C#, Blazor y Laravel.",
        "Antes de dedicarse al desarrollo, {nombre} pasó varios años en soporte técnico, lo que le dio una base muy práctica.",
    ),
    TopicTag.PROJECTS: (
        "Uno de los proyectos favoritos de {nombre} es este mismo portafolio, hecho con Fresh y Deno.",
        "{nombre} también ha construido tiendas e-commerce y apps móviles con React Native, siempre cuidando la experiencia de usuario.",
        "Sus proyectos suelen partir en Figma y terminar en producción con TypeScript. Le gusta cuidar cada detalle visual.",
    ),
    TopicTag.EDUCATION: (
        "En la universidad, {nombre} se destacó en desarrollo de software y terminó con una tesis calificada con 6,9.",
        "Además de la carrera, {nombre} sigue aprendiendo por su cuenta con cursos y documentación oficial.",
    ),
    TopicTag.SKILLS: (
        "Entre sus herramientas diarias están TypeScript, React y SQL Server, además de Git para todo.",
        "{nombre} siempre está probando tecnologías nuevas; lo último que le ha llamado la atención es Deno.",
    ),
    TopicTag.DEFAULT: (
        "¡Genial! Puedes preguntarme por la trayectoria, los proyectos, la formación o las habilidades de {nombre}.",
        "Perfecto. ¿Sobre qué tema de {nombre} quieres seguir conversando?",
    ),
}


def followup_replies(topic: TopicTag) -> tuple[str, ...]:
    values = facts()
    pool = _FOLLOWUP_TEMPLATES.get(topic) or _FOLLOWUP_TEMPLATES[TopicTag.DEFAULT]
    return tuple(t.format(**values) for t in pool)


def detect_invitation(text: str) -> bool:
    return bool(INVITATION_PATTERN.search(normalize_message(text)))


def infer_topic(text: str) -> TopicTag:
    low = normalize_message(text)
    for tag, pattern in TOPIC_FAMILIES:
        if pattern.search(low):
            return tag
    return TopicTag.DEFAULT


def remember_reply(context: ConversationContext, composed_text: str) -> ConversationContext:
    """Overwrite the slot when the reply invites a follow-up, else keep *context*."""
    if not detect_invitation(composed_text):
        return context
    return ConversationContext(last_invitation_text=composed_text, last_topic=infer_topic(composed_text))


def is_bare_affirmation(normalized: str) -> bool:
    cleaned = " ".join(strip_edge_punctuation(normalized or "").split())
    return cleaned in BARE_AFFIRMATIONS


def resolve_affirmation(topic: TopicTag, rules: Sequence[ResponseRule], rng: RandomSource) -> tuple[str, Optional[str]]:
    """Answer a bare "sí" from the stored topic.

    Returns the reply and the name of the rule that produced it (``None``
    when a built-in follow-up filler was used). The caller clears the context.
    """
    candidates = [r for r in rules if r.topic == topic]
    if candidates:
        rule = rng.choice(candidates)
        return rule.generate("", rng), rule.name
    return rng.choice(followup_replies(topic)), None


class ContextStore:
    """Session id -> ConversationContext, with idle expiry and a size cap.

    Writes sweep out expired sessions (at most once per ``sweep_every``), so
    abandoned sessions are reclaimed even if their id never comes back. When
    the store is full, the least recently written session is dropped.
    """

    def __init__(
        self,
        ttl_hours: int = CONTEXT_TTL_HOURS,
        clock: Optional[Callable[[], datetime]] = None,
        max_sessions: int = CONTEXT_MAX_SESSIONS,
        sweep_every: timedelta = timedelta(minutes=CONTEXT_SWEEP_MINUTES),
    ):
        self.ttl = timedelta(hours=ttl_hours)
        self.max_sessions = max_sessions
        self.sweep_every = sweep_every
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[ConversationContext, datetime]] = {}
        self._last_sweep = self._clock()

    def get(self, session_id: str) -> ConversationContext:
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                return EMPTY_CONTEXT
            ctx, touched = entry
            if self._clock() - touched > self.ttl:
                del self._entries[session_id]
                return EMPTY_CONTEXT
            return ctx

    def put(self, session_id: str, context: ConversationContext) -> None:
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.sweep_every:
                self._purge_locked(now)
            # Re-insert so dict order stays oldest-write first.
            self._entries.pop(session_id, None)
            if context.is_empty:
                return
            while len(self._entries) >= self.max_sessions:
                del self._entries[next(iter(self._entries))]
            self._entries[session_id] = (context, now)

    def _purge_locked(self, now: datetime) -> int:
        stale = [sid for sid, (_, touched) in self._entries.items() if now - touched > self.ttl]
        for sid in stale:
            del self._entries[sid]
        self._last_sweep = now
        if stale:
            print(f"[context] purged {len(stale)} expired sessions")
        return len(stale)

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            return self._purge_locked(now)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
