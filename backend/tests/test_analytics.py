from analytics import (
    average_response_time,
    build_summary,
    entity_trends,
    keyword_frequency,
    message_length_stats,
    most_active_sessions,
    most_common_intents,
    most_common_questions,
    sentiment_trends,
    time_distribution,
)


def rec(session_id, ts, message, intent="saludo", sentiment=0.0, ms=10.0, entities=None, reply="ok"):
    return {
        "session_id": session_id,
        "timestamp": ts,
        "user_message": message,
        "ai_response": reply,
        "detected_intent": intent,
        "user_sentiment": sentiment,
        "processing_time_ms": ms,
        "detected_entities": entities or {},
        "user_name": None,
    }


RECORDS = [
    rec("s1", "2024-05-01T10:00:00+00:00", "Hola!", sentiment=0.0),
    rec("s1", "2024-05-01T10:05:00+00:00", "¿Qué proyectos tiene Eduardo?", intent="proyectos", sentiment=0.5,
        entities={"temas": ["proyectos"], "tecnologias": []}),
    rec("s1", "2024-05-01T10:30:00+00:00", "hola", sentiment=0.6, ms=0),
    rec("s2", "2024-05-01T23:10:00+00:00", "Proyectos con React", intent="proyectos", sentiment=0.4,
        entities={"tecnologias": ["react"], "temas": ["proyectos"]}),
    rec("s2", "2024-05-01T23:20:00+00:00", "no sirves", intent="quejas", sentiment=-0.3),
    rec("s3", "2024-05-02T08:00:00+00:00", "chao", intent="despedida", ms=30.0),
]


def test_most_common_questions_normalizes_case_and_punctuation():
    top = most_common_questions(RECORDS, 2)
    assert top[0] == {"question": "hola", "count": 2}
    assert len(top) == 2


def test_most_common_intents_tie_keeps_first_seen():
    intents = most_common_intents(RECORDS)
    assert intents[0] == {"intent": "saludo", "count": 2}
    assert intents[1] == {"intent": "proyectos", "count": 2}


def test_keyword_frequency_skips_short_and_stop_words():
    words = {k["keyword"]: k["count"] for k in keyword_frequency(RECORDS)}
    assert words["proyectos"] == 2
    assert "hola" in words
    assert "con" not in words
    assert "qué" not in words


def test_sentiment_trends_per_session():
    trends = {t["session_id"]: t["trend"] for t in sentiment_trends(RECORDS)}
    assert trends == {"s1": "improving", "s2": "declining"}


def test_sentiment_trend_threshold_is_exclusive():
    rows = [rec("x", "2024-01-01T00:00:00", "a", sentiment=0.0), rec("x", "2024-01-01T00:01:00", "b", sentiment=0.2)]
    assert sentiment_trends(rows)[0]["trend"] == "stable"


def test_time_distribution_has_all_hours():
    dist = time_distribution(RECORDS)
    assert len(dist) == 24
    assert dist["10"] == 3
    assert dist["23"] == 2
    assert dist["08"] == 1
    assert sum(dist.values()) == len(RECORDS)


def test_entity_trends():
    trends = entity_trends(RECORDS)
    assert trends["temas"] == [{"entity": "proyectos", "count": 2}]
    assert trends["tecnologias"] == [{"entity": "react", "count": 1}]
    assert trends["empresas"] == []


def test_average_response_time_ignores_missing_times():
    assert average_response_time(RECORDS) == (10.0 * 4 + 30.0) / 5
    assert average_response_time([]) == 0.0


def test_message_length_stats():
    stats = message_length_stats(RECORDS)
    assert stats["shortest_user_message"] == "hola"
    assert stats["longest_user_message"] == "¿Qué proyectos tiene Eduardo?"
    assert stats["avg_ai_response_length"] == 2.0
    assert message_length_stats([])["avg_user_message_length"] == 0.0


def test_most_active_sessions():
    sessions = most_active_sessions(RECORDS, 2)
    assert [s["session_id"] for s in sessions] == ["s1", "s2"]
    assert sessions[0]["count"] == 3
    assert sessions[0]["duration_minutes"] == 30.0
    assert "hola" in sessions[0]["keywords"]


def test_build_summary_shape():
    summary = build_summary(RECORDS, limit=5)
    assert summary["total_interactions"] == 6
    assert summary["unique_sessions"] == 3
    assert len(summary["time_distribution"]) == 24
    assert summary["most_active_sessions"][0]["session_id"] == "s1"


def test_build_summary_empty():
    summary = build_summary([])
    assert summary["total_interactions"] == 0
    assert summary["most_common_questions"] == []
    assert summary["average_response_time_ms"] == 0.0
