"""Test keyword classifier"""

from app.coaching.analyzer import STRESSOR_KEYWORDS, analyze_text, score_by_keywords
from app.models.enums import Emotion, Situation


def test_boss_feedback_burnout():
    result = analyze_text("상사 피드백 때문에 너무 지치고 번아웃 왔어")
    assert result.emotion == Emotion.BURNOUT
    assert result.situation == Situation.BOSS_CONFLICT
    assert result.stressors == ["상사", "피드백", "번아웃"]


def test_empty_text_defaults():
    for text in ["", "   ", None]:
        result = analyze_text(text)
        assert result.emotion == Emotion.NEUTRAL
        assert result.situation == Situation.GENERAL
        assert result.stressors == []
        assert result.inferred_name is None


def test_tie_resolves_to_first_declared_category():
    result = analyze_text("회의 마감")
    assert result.situation == Situation.MEETING
    assert result.stressors == ["회의", "마감"]


def test_higher_score_wins_over_declaration_order():
    result = analyze_text("회의 끝나고 마감 데드라인 오늘까지")
    assert result.situation == Situation.DEADLINE


def test_burnout_phrase():
    result = analyze_text("너무 지치고 번아웃 왔어. 아무것도 하기 싫어.")
    assert result.emotion == Emotion.BURNOUT


def test_neutral_meeting():
    result = analyze_text("오늘 회의가 좀 힘들었어.")
    assert result.emotion == Emotion.NEUTRAL
    assert result.situation == Situation.MEETING


def test_stressors_capped_at_six():
    result = analyze_text(" ".join(STRESSOR_KEYWORDS))
    assert result.stressors == STRESSOR_KEYWORDS[:6]


def test_score_by_keywords_counts_each_keyword_once():
    assert score_by_keywords("야근 야근 야근", ["야근", "밤샘"]) == 1


def test_name_patterns():
    assert analyze_text("내 이름은 김민수").inferred_name == "김민수"
    assert analyze_text("저는 지영이고 요즘 야근이 많아요").inferred_name == "지영"
    assert analyze_text("나는 철수야").inferred_name == "철수"
    assert analyze_text("나는 철수입니다").inferred_name == "철수"
    assert analyze_text("이름은 말 안 할래").inferred_name is None
