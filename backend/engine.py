"""Per-request reply pipeline.

moderation -> bare affirmation -> catalog match -> compose -> remember -> personalize

The engine never prints or logs. Callers read the returned trace, or inject
an ``observer`` that receives it after every call.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from catalog import CATALOG
from composer import SEGMENT_SEPARATOR, compose_reply
from intent import ResponseRule, TopicTag, match_rules
from memory_service import EMPTY_CONTEXT, ConversationContext, is_bare_affirmation, remember_reply, resolve_affirmation
from personalizer import personalize
from policy import moderation_decision
from random_source import RandomSource
from text_utils import normalize_message

PATH_MODERATION = "moderation"
PATH_AFFIRMATION = "affirmation"
PATH_CATALOG = "catalog"


@dataclass(frozen=True)
class EngineTrace:
    path: str
    normalized: str
    matched: tuple[str, ...] = ()
    selected: tuple[str, ...] = ()
    topic_read: Optional[TopicTag] = None
    topic_written: Optional[TopicTag] = None
    personalized: bool = False
    moderation_term: Optional[str] = None

    @property
    def intent(self) -> str:
        if self.path == PATH_MODERATION:
            return "moderation"
        if self.path == PATH_AFFIRMATION:
            topic = self.topic_read.value if self.topic_read else TopicTag.DEFAULT.value
            return f"affirmation:{topic}"
        return self.selected[0] if self.selected else "default"

    def as_payload(self) -> dict:
        return {
            "path": self.path,
            "intent": self.intent,
            "matched": list(self.matched),
            "selected": list(self.selected),
            "topic_read": self.topic_read.value if self.topic_read else None,
            "topic_written": self.topic_written.value if self.topic_written else None,
            "personalized": self.personalized,
        }


@dataclass(frozen=True)
class EngineResult:
    reply: str
    context: ConversationContext
    trace: EngineTrace
    segments: list[str] = field(default_factory=list)


class ChatEngine:
    def __init__(
        self,
        rules: Sequence[ResponseRule] = CATALOG,
        rng: Optional[RandomSource] = None,
        observer: Optional[Callable[[EngineTrace], None]] = None,
    ):
        self.rules = tuple(rules)
        self.rng = rng or RandomSource()
        self.observer = observer

    def respond(
        self,
        message: str,
        user_name: Optional[str] = None,
        context: Optional[ConversationContext] = None,
    ) -> EngineResult:
        ctx = context or EMPTY_CONTEXT
        normalized = normalize_message(message)

        moderation = moderation_decision(message, self.rng)
        if moderation.blocked:
            trace = EngineTrace(path=PATH_MODERATION, normalized=normalized, moderation_term=moderation.matched_term)
            return self._finish(moderation.reply or "", ctx, trace)

        if ctx.last_topic is not None and is_bare_affirmation(normalized):
            reply, rule_name = resolve_affirmation(ctx.last_topic, self.rules, self.rng)
            trace = EngineTrace(
                path=PATH_AFFIRMATION,
                normalized=normalized,
                selected=(rule_name,) if rule_name else (),
                topic_read=ctx.last_topic,
            )
            return self._finish(reply, EMPTY_CONTEXT, trace)

        matches = match_rules(normalized, self.rules)
        composed = compose_reply(normalized, matches, self.rng)
        new_ctx = remember_reply(ctx, composed.text)
        reply, personalized = personalize(composed.text, user_name, self.rng)
        trace = EngineTrace(
            path=PATH_CATALOG,
            normalized=normalized,
            matched=tuple(r.name for r in matches),
            selected=composed.rule_names,
            topic_written=new_ctx.last_topic if new_ctx is not ctx else None,
            personalized=personalized,
        )
        return self._finish(reply, new_ctx, trace)

    def _finish(self, reply: str, context: ConversationContext, trace: EngineTrace) -> EngineResult:
        if self.observer is not None:
            self.observer(trace)
        return EngineResult(
            reply=reply,
            context=context,
            trace=trace,
            segments=reply.split(SEGMENT_SEPARATOR),
        )
