"""Test user memory store"""

from app.coaching.analyzer import AnalysisResult, analyze_text
from app.models.enums import Emotion
from app.models.memory import MemoryDocument
from app.services.memory_service import (
    MEMORY_FILE,
    add_unique_stressors,
    get_user_memory,
    last_memory_nudge,
    remember_turn,
    upsert_user_memory,
)


def test_get_user_memory_creates_and_persists(store):
    memory = get_user_memory("u1", store, now=1000)

    assert memory.uid == "u1"
    assert memory.created_at == memory.last_seen_at == 1000
    assert memory.turns == [] and memory.stressors == []

    doc = store.load(MEMORY_FILE, MemoryDocument)
    assert "u1" in doc.users

    # Second call returns the stored record unchanged
    assert get_user_memory("u1", store, now=5000).created_at == 1000


def test_persisted_keys_are_camel_case(store):
    remember_turn("u1", "야근", analyze_text("야근"), "reply", store, now=10)
    raw = store.read(MEMORY_FILE, None)
    user = raw["users"]["u1"]
    assert raw["version"] == 1
    assert {"createdAt", "lastSeenAt", "profile", "stressors", "turns"} <= set(user)
    assert user["turns"][0]["userText"] == "야근"
    assert user["turns"][0]["extractedStressors"] == ["야근"]


def test_add_unique_stressors_dedupes_and_filters():
    merged = add_unique_stressors(["상사"], ["상사", " 야근 ", "", "   ", "x" * 61, "x" * 60])
    assert merged == ["상사", "야근", "x" * 60]


def test_add_unique_stressors_caps_at_thirty_keeping_oldest():
    existing = [f"s{i}" for i in range(28)]
    merged = add_unique_stressors(existing, ["new1", "new2", "new3", "new4"])
    assert len(merged) == 30
    assert merged[:28] == existing
    assert merged[28:] == ["new1", "new2"]


def test_turns_never_exceed_thirty(store):
    for i in range(40):
        memory = remember_turn("u1", f"message {i}", AnalysisResult(), f"reply {i}", store, now=i)

    assert len(memory.turns) == 30
    assert memory.turns[0].user_text == "message 10"
    assert memory.turns[-1].user_text == "message 39"
    assert memory.last_seen_at == 39
    assert len(get_user_memory("u1", store).turns) == 30


def test_stressors_never_exceed_thirty(store):
    for i in range(40):
        analysis = AnalysisResult(stressors=[f"stressor-{i}", "상사"])
        memory = remember_turn("u1", "text", analysis, "reply", store, now=i)

    assert len(memory.stressors) == 30
    assert len(set(memory.stressors)) == 30
    assert all(len(s) <= 60 for s in memory.stressors)


def test_remember_turn_records_analysis_and_name(store):
    analysis = AnalysisResult(emotion=Emotion.BURNOUT, stressors=["번아웃"])
    memory = remember_turn("u1", "번아웃", analysis, "괜찮아요", store, name="민수", now=42)

    turn = memory.turns[-1]
    assert (turn.ts, turn.ai_text, turn.emotion) == (42, "괜찮아요", Emotion.BURNOUT)
    assert memory.profile.name == "민수"
    assert memory.stressors == ["번아웃"]


def test_remember_turn_keeps_existing_name_when_none_given(store):
    remember_turn("u1", "a", AnalysisResult(), "r", store, name="민수", now=1)
    memory = remember_turn("u1", "b", AnalysisResult(), "r", store, now=2)
    assert memory.profile.name == "민수"


def test_upsert_is_last_writer_wins(store):
    get_user_memory("u1", store, now=1)
    upsert_user_memory("u1", lambda m: m.model_copy(update={"last_seen_at": 7}), store)
    upsert_user_memory("u1", lambda m: m.model_copy(update={"last_seen_at": 3}), store)
    assert get_user_memory("u1", store).last_seen_at == 3


def test_last_memory_nudge(store):
    assert last_memory_nudge(get_user_memory("fresh", store)) is None

    memory = remember_turn("u1", "상사", AnalysisResult(stressors=["상사"]), "r", store, now=1)
    assert last_memory_nudge(memory) == "상사"

    memory.stressors = []
    assert last_memory_nudge(memory) == "상사"


def test_invalid_user_record_does_not_wipe_others(store):
    store.write(MEMORY_FILE, {"version": 1, "users": {
        "good": {"uid": "good", "createdAt": 1, "lastSeenAt": 2, "stressors": ["야근"]},
        "bad": {"uid": "bad", "createdAt": "yesterday"},
    }})

    memory = get_user_memory("newcomer", store, now=100)
    assert memory.uid == "newcomer"

    doc = store.load(MEMORY_FILE, MemoryDocument)
    assert set(doc.users) == {"good", "newcomer"}
    assert doc.users["good"].stressors == ["야근"]
