"""Test response script templates"""

from app.coaching.analyzer import AnalysisResult, analyze_text
from app.coaching.script_builder import (
    HEALING_BREATH,
    MICRO_ACTION,
    build_personalized_script,
    resilience_score,
)
from app.models.enums import Emotion, Situation


def test_high_burnout_gets_micro_action():
    text = "너무 지치고 번아웃 왔어. 아무것도 하기 싫어."
    script = build_personalized_script(text=text, analysis=analyze_text(text))

    assert script.meditation_text == MICRO_ACTION
    assert "긴급 회복 가이드" in script.voice_text
    assert "\n" not in script.voice_text
    assert script.resilience_score <= 20


def test_general_stress_gets_healing_breath():
    text = "오늘 회의가 좀 힘들었어."
    script = build_personalized_script(text=text, analysis=analyze_text(text))

    assert script.meditation_text == HEALING_BREATH
    assert "긴급 회복 가이드" not in script.meditation_text
    assert script.resilience_score > 20


def test_reply_addresses_name_and_quotes_text():
    analysis = AnalysisResult(emotion=Emotion.ANXIETY, situation=Situation.DEADLINE)
    script = build_personalized_script(text="내일까지 끝내야 해", analysis=analysis, name="민수")

    assert script.reply_text.startswith("민수님,")
    assert "하지만 민수님, 당신의 존재 가치는" in script.reply_text
    assert "“내일까지 끝내야 해”" in script.reply_text
    assert script.tags == {"emotionLabel": "불안/긴장", "situationLabel": "마감/데드라인 상황"}


def test_anonymous_reply_and_default_labels():
    script = build_personalized_script(text="그냥 힘들어", analysis=AnalysisResult())

    assert script.reply_text.startswith("당신,")
    assert "복합 감정" in script.reply_text
    assert script.tags == {"emotionLabel": "복합 감정", "situationLabel": "업무 스트레스 상황"}
    assert script.reply_text.count("\n\n") == 2


def test_memory_nudge_line():
    script = build_personalized_script(text="또 야근", analysis=AnalysisResult(), last_memory_nudge="상사")
    assert "지난번의 “상사”도 여전히 마음에 남아 계신가요?" in script.reply_text

    without = build_personalized_script(text="또 야근", analysis=AnalysisResult())
    assert "지난번의" not in without.reply_text


def test_resilience_score_table():
    assert resilience_score(Emotion.BURNOUT) == 0
    assert resilience_score(Emotion.SHAME) == 50
    assert resilience_score(Emotion.NEUTRAL) == 80
