import pytest

from memory_service import ConversationContext
from intent import TopicTag
from policy import DEFLECTION_TEMPLATES, find_disallowed_term, moderation_decision
from profile_data import facts
from random_source import RandomSource

DEFLECTIONS = {t.format(**facts()) for t in DEFLECTION_TEMPLATES}


def test_at_least_four_deflections():
    assert len(DEFLECTIONS) >= 4


@pytest.mark.parametrize(
    "message",
    [
        "¿Tienes novia?",
        "quiero ver contenido porno",
        "¿Eduardo está soltero?",
        "Cásate conmigo",
        "casate conmigo",
        "TE AMO",
        "¿Quieres salir conmigo?",
        "mándame besos",
        "algo erótico",
    ],
)
def test_blocked_messages_get_a_deflection(message):
    result = moderation_decision(message, RandomSource(3))
    assert result.blocked
    assert result.matched_term
    assert result.reply in DEFLECTIONS


@pytest.mark.parametrize(
    "message",
    [
        "Hola",
        "Te quiero preguntar algo sobre sus proyectos",
        "¿Qué tecnologías usa?",
        "Cuéntame sobre su experiencia",
    ],
)
def test_allowed_messages_pass(message):
    assert find_disallowed_term(message) is None
    assert not moderation_decision(message, RandomSource(3)).blocked


def test_allowed_message_does_not_consume_randomness():
    a, b = RandomSource(11), RandomSource(11)
    moderation_decision("Hola", a)
    assert a.random() == b.random()


def test_engine_moderation_keeps_context(chat_engine):
    ctx = ConversationContext(last_invitation_text="¿Quieres saber más?", last_topic=TopicTag.PROJECTS)
    result = chat_engine.respond("¿tienes novia?", user_name="Ana", context=ctx)
    assert result.context is ctx
    assert result.reply in DEFLECTIONS
    assert result.trace.path == "moderation"
    assert result.trace.intent == "moderation"
    assert result.trace.matched == ()


def test_moderation_wins_over_catalog_matches(chat_engine):
    result = chat_engine.respond("Hola, ¿tienes novia?")
    assert result.trace.path == "moderation"
    assert "\n\n" not in result.reply
