import pytest

from catalog import CATALOG, PROJECTS_TEMPLATES, TEMPLATE_VALUES
from composer import DEFAULT_REPLIES, SEGMENT_SEPARATOR
from engine import ChatEngine
from intent import ResponseRule, TopicTag
from memory_service import EMPTY_CONTEXT, ConversationContext, followup_replies
from random_source import RandomSource
from tests.conftest import FixedRandom

CONVERSATION = [
    "Hola",
    "¿Cuáles son tus habilidades y en qué lenguaje de programación tienes más experiencia?",
    "sí",
    "Cuéntame sobre tus proyectos",
    "dale",
    "¿Qué opinas de React?",
    "Chao",
]


def run(engine, messages, user_name=None):
    ctx = EMPTY_CONTEXT
    replies = []
    for message in messages:
        result = engine.respond(message, user_name=user_name, context=ctx)
        ctx = result.context
        replies.append(result.reply)
    return replies


def test_same_seed_replays_the_same_conversation():
    a = run(ChatEngine(rng=RandomSource(42)), CONVERSATION, user_name="Ana")
    b = run(ChatEngine(rng=RandomSource(42)), CONVERSATION, user_name="Ana")
    assert a == b


def test_multi_topic_question_yields_two_segments(chat_engine):
    msg = "¿Cuáles son tus habilidades y en qué lenguaje de programación tienes más experiencia?"
    result = chat_engine.respond(msg)
    assert result.trace.path == "catalog"
    assert result.trace.matched == ("habilidades", "lenguajes_programacion")
    assert len(result.segments) == 2
    assert result.reply.count(SEGMENT_SEPARATOR) == 1
    assert set(result.trace.selected) == {"habilidades", "lenguajes_programacion"}


def test_projects_then_affirmation_then_affirmation(chat_engine):
    first = chat_engine.respond("Cuéntame sobre tus proyectos")
    assert first.reply in {t.format(**TEMPLATE_VALUES) for t in PROJECTS_TEMPLATES}
    assert first.context.last_topic == TopicTag.PROJECTS
    assert first.trace.topic_written == TopicTag.PROJECTS

    second = chat_engine.respond("sí", context=first.context)
    assert second.trace.path == "affirmation"
    assert second.trace.intent == "affirmation:projects"
    assert second.reply in followup_replies(TopicTag.PROJECTS)
    assert second.context == EMPTY_CONTEXT

    third = chat_engine.respond("sí", context=second.context)
    assert third.trace.path == "catalog"
    assert third.trace.intent == "default"
    assert third.reply in DEFAULT_REPLIES


def test_affirmation_on_skills_uses_tagged_rule():
    engine = ChatEngine(rng=RandomSource(3))
    ctx = ConversationContext(last_invitation_text="¿Te interesa conocer alguna tecnología?", last_topic=TopicTag.SKILLS)
    result = engine.respond("claro", context=ctx)
    assert result.trace.selected[0] in {"lenguajes_programacion", "tecnologias_generales"}
    assert result.context == EMPTY_CONTEXT


def test_affirmation_is_never_personalized():
    engine = ChatEngine(rng=FixedRandom(0.0))
    ctx = ConversationContext(last_invitation_text="x", last_topic=TopicTag.EDUCATION)
    result = engine.respond("ok", user_name="Ana", context=ctx)
    assert not result.trace.personalized
    assert not result.reply.startswith("Ana")


def test_other_messages_do_not_consume_context(chat_engine):
    ctx = ConversationContext(last_invitation_text="¿Quieres saber más?", last_topic=TopicTag.PROJECTS)
    result = chat_engine.respond("¿Tienes mascotas?", context=ctx)
    assert result.trace.path == "catalog"
    assert result.trace.topic_read is None
    assert result.trace.intent == "mascotas"
    assert result.context is ctx
    assert result.trace.topic_written is None


def test_affirmation_without_context_goes_to_catalog(chat_engine):
    result = chat_engine.respond("sí")
    assert result.trace.path == "catalog"
    assert result.reply in DEFAULT_REPLIES


def test_observer_receives_every_trace():
    seen = []
    engine = ChatEngine(rng=RandomSource(1), observer=seen.append)
    engine.respond("Hola")
    engine.respond("¿tienes novia?")
    assert [t.path for t in seen] == ["catalog", "moderation"]
    assert seen[0].intent == "saludo"
    assert seen[1].moderation_term


def test_trace_payload_is_json_friendly(chat_engine):
    payload = chat_engine.respond("Cuéntame sobre tus proyectos").trace.as_payload()
    assert payload["path"] == "catalog"
    assert payload["intent"] == "proyectos"
    assert payload["topic_written"] == "projects"
    assert payload["topic_read"] is None


def test_generator_errors_propagate():
    def boom(_normalized, _rng):
        raise RuntimeError("template broke")

    rule = ResponseRule(name="roto", predicate=lambda n: "hola" in n, generate=boom)
    engine = ChatEngine(rules=(rule,), rng=RandomSource(1))
    with pytest.raises(RuntimeError):
        engine.respond("hola")


def test_subject_name_as_user_name_is_not_duplicated():
    engine = ChatEngine(rng=FixedRandom(0.0))
    result = engine.respond("Hola", user_name="Eduardo")
    assert not result.trace.personalized
    assert not result.reply.startswith("Eduardo")


def test_personalized_goodbye():
    engine = ChatEngine(rng=FixedRandom(0.0))
    result = engine.respond("Chao", user_name="Ana")
    assert result.trace.personalized
    assert result.reply.startswith(("Ana, ", "Mira, Ana: ", "Te cuento, Ana: ", "Bueno Ana, "))


def test_line_breaks_in_user_name_do_not_add_segments():
    result = ChatEngine(rng=FixedRandom(0.0, 3)).respond("Hola", user_name="Ana\n\nBob")
    assert result.trace.personalized
    assert len(result.segments) == 1
    assert SEGMENT_SEPARATOR not in result.reply
    assert "Ana Bob" in result.reply


def test_empty_message_falls_back_to_default(chat_engine):
    result = chat_engine.respond("")
    assert result.reply in DEFAULT_REPLIES
    assert result.segments == [result.reply]


def test_catalog_default_is_the_real_catalog():
    assert ChatEngine().rules == CATALOG
