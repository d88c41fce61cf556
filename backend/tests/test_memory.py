from datetime import datetime, timedelta, timezone

import pytest

from catalog import (
    CATALOG,
    EDUCATION_TEMPLATES,
    PROJECTS_TEMPLATES,
    SKILLS_TEMPLATES,
    TEMPLATE_VALUES,
    TRAJECTORY_TEMPLATES,
)
from composer import DEFAULT_REPLIES
from intent import TopicTag
from memory_service import (
    EMPTY_CONTEXT,
    ContextStore,
    ConversationContext,
    detect_invitation,
    followup_replies,
    infer_topic,
    is_bare_affirmation,
    remember_reply,
    resolve_affirmation,
)
from random_source import RandomSource
from text_utils import normalize_message


@pytest.mark.parametrize(
    "text",
    [
        "¿Te gustaría saber más?",
        "¿Quieres conocer sus proyectos?",
        "¿Quieres que te cuente algo más?",
        "¿Te interesa conocer alguna tecnología?",
        "¿Quieres que profundice en algún aspecto?",
    ],
)
def test_detect_invitation(text):
    assert detect_invitation(text)


def test_joke_prompt_is_not_an_invitation():
    assert not detect_invitation("Un chiste. ¿Te gustaría escuchar otro?")


@pytest.mark.parametrize(
    "text, topic",
    [
        ("Tiene experiencia en proyectos grandes", TopicTag.TRAJECTORY),
        ("Sus proyectos incluyen su tesis", TopicTag.PROJECTS),
        ("Su tesis en la universidad", TopicTag.EDUCATION),
        ("Su stack principal", TopicTag.SKILLS),
        ("Nada que ver", TopicTag.DEFAULT),
    ],
)
def test_infer_topic_priority(text, topic):
    assert infer_topic(text) == topic


def test_remember_reply_without_invitation_keeps_context():
    ctx = ConversationContext(last_invitation_text="old", last_topic=TopicTag.SKILLS)
    assert remember_reply(ctx, "Eduardo tiene 25 años.") is ctx


def test_remember_reply_overwrites_slot():
    ctx = ConversationContext(last_invitation_text="old", last_topic=TopicTag.SKILLS)
    text = "Sus proyectos son varios. ¿Te gustaría conocer alguno?"
    new_ctx = remember_reply(ctx, text)
    assert new_ctx.last_topic == TopicTag.PROJECTS
    assert new_ctx.last_invitation_text == text


@pytest.mark.parametrize("raw", ["sí", "Sí!", "  ok. ", "¡Dale!", "cuéntame más", "Por supuesto", "porfa"])
def test_bare_affirmations(raw):
    assert is_bare_affirmation(normalize_message(raw))


@pytest.mark.parametrize("raw", ["sí, cuéntame de sus proyectos", "si quiero", "okey dokey", "", "claro que no"])
def test_not_bare_affirmations(raw):
    assert not is_bare_affirmation(normalize_message(raw))


def test_resolve_affirmation_uses_followup_when_no_rule_is_tagged():
    reply, rule_name = resolve_affirmation(TopicTag.PROJECTS, CATALOG, RandomSource(4))
    assert rule_name is None
    assert reply in followup_replies(TopicTag.PROJECTS)


def test_resolve_affirmation_prefers_tagged_rules():
    names = set()
    for seed in range(20):
        _reply, rule_name = resolve_affirmation(TopicTag.SKILLS, CATALOG, RandomSource(seed))
        names.add(rule_name)
    assert names == {"lenguajes_programacion", "tecnologias_generales"}


def test_followup_replies_exist_for_every_topic():
    for tag in TopicTag:
        assert followup_replies(tag)


def _with_invitation(templates):
    texts = [t.format(**TEMPLATE_VALUES) for t in templates]
    return [t for t in texts if detect_invitation(t)]


@pytest.mark.parametrize(
    "templates, topic, all_required",
    [
        (PROJECTS_TEMPLATES, TopicTag.PROJECTS, True),
        (EDUCATION_TEMPLATES, TopicTag.EDUCATION, False),
        (SKILLS_TEMPLATES, TopicTag.SKILLS, False),
        (TRAJECTORY_TEMPLATES, TopicTag.TRAJECTORY, True),
    ],
)
def test_invitation_templates_land_in_their_own_bucket(templates, topic, all_required):
    inviting = _with_invitation(templates)
    assert inviting
    if all_required:
        assert len(inviting) == len(templates)
    for text in inviting:
        assert infer_topic(text) == topic


def test_default_replies_never_invite():
    assert not any(detect_invitation(t) for t in DEFAULT_REPLIES)


class Clock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now


def test_context_store_roundtrip_and_isolation():
    store = ContextStore()
    ctx = ConversationContext(last_invitation_text="x", last_topic=TopicTag.EDUCATION)
    store.put("a", ctx)
    assert store.get("a") == ctx
    assert store.get("b") == EMPTY_CONTEXT


def test_context_store_expires_entries():
    clock = Clock()
    store = ContextStore(ttl_hours=24, clock=clock)
    store.put("a", ConversationContext(last_invitation_text="x", last_topic=TopicTag.SKILLS))
    clock.now += timedelta(hours=23)
    assert store.get("a").last_topic == TopicTag.SKILLS
    clock.now += timedelta(hours=2)
    assert store.get("a") == EMPTY_CONTEXT
    assert len(store) == 0


def test_context_store_purge_and_empty_put():
    clock = Clock()
    store = ContextStore(ttl_hours=1, clock=clock)
    store.put("a", ConversationContext(last_invitation_text="x", last_topic=TopicTag.SKILLS))
    store.put("b", ConversationContext(last_invitation_text="y", last_topic=TopicTag.PROJECTS))
    store.put("b", EMPTY_CONTEXT)
    assert len(store) == 1
    clock.now += timedelta(hours=2)
    assert store.purge_expired() == 1
    assert len(store) == 0


def test_abandoned_sessions_are_reclaimed_by_later_writes():
    clock = Clock()
    store = ContextStore(ttl_hours=1, clock=clock)
    ctx = ConversationContext(last_invitation_text="x", last_topic=TopicTag.PROJECTS)
    for i in range(1000):
        store.put(f"s{i}", ctx)
    assert len(store) == 1000
    clock.now += timedelta(hours=2)
    store.put("fresh", ctx)
    assert len(store) == 1
    assert store.get("fresh") == ctx


def test_sweep_waits_for_its_interval():
    clock = Clock()
    store = ContextStore(ttl_hours=1, clock=clock, sweep_every=timedelta(hours=3))
    ctx = ConversationContext(last_invitation_text="x", last_topic=TopicTag.SKILLS)
    store.put("old", ctx)
    clock.now += timedelta(hours=2)
    store.put("new", ctx)
    assert len(store) == 2
    clock.now += timedelta(hours=2)
    store.put("newer", ctx)
    assert len(store) == 1


def test_full_store_drops_least_recently_written():
    store = ContextStore(max_sessions=2)
    ctx = ConversationContext(last_invitation_text="x", last_topic=TopicTag.EDUCATION)
    store.put("a", ctx)
    store.put("b", ctx)
    store.put("a", ctx)
    store.put("c", ctx)
    assert len(store) == 2
    assert store.get("b") == EMPTY_CONTEXT
    assert store.get("a") == ctx
    assert store.get("c") == ctx
