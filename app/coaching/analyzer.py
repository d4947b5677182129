"""Keyword-based emotion / situation classifier"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from app.models.enums import Emotion, Situation

EMOTION_KEYWORDS: List[Tuple[Emotion, List[str]]] = [
    (Emotion.ANXIETY, ['불안', '긴장', '초조', '걱정', '두려', '무섭']),
    (Emotion.ANGER, ['화', '짜증', '분노', '열받', '억울', '빡치', '미치겠']),
    (Emotion.SADNESS, ['슬프', '우울', '눈물', '서럽', '허무', '외롭', '무기력']),
    (Emotion.SHAME, ['자존감', '창피', '무시', '모욕', '비난', '면박', '비참']),
    (Emotion.BURNOUT, ['번아웃', '소진', '탈진', '지쳤', '에너지가', '의욕이', '아무것도 하기 싫']),
    (Emotion.OVERWHELM, ['감당', '과부하', '너무 많', '벅차', '숨이 막', '압박']),
]

SITUATION_KEYWORDS: List[Tuple[Situation, List[str]]] = [
    (Situation.MEETING, ['회의', '미팅', '발표', '보고', '주간', '데일리']),
    (Situation.OVERTIME, ['야근', '밤샘', '주말근무', '퇴근', '새벽']),
    (Situation.BOSS_CONFLICT, ['상사', '팀장', '부장', '피드백', '지적', '갈굼']),
    (Situation.DEADLINE, ['마감', '데드라인', '기한', '오늘까지', '내일까지', '급해']),
    (Situation.TEAM_CONFLICT, ['동료', '팀원', '협업', '갈등', '눈치', '소통', '따돌림']),
    (Situation.PERFORMANCE_REVIEW, ['평가', '성과', '인사', '연봉', '승진', 'OKR', 'KPI']),
]

STRESSOR_KEYWORDS = ['상사', '피드백', '야근', '회의', '마감', '성과', '동료', '협업', '자존감', '번아웃']
MAX_EXTRACTED_STRESSORS = 6

# Tried in order; group 1 is the name
NAME_PATTERNS = [
    re.compile(r'내\s*이름은\s*([가-힣]{2,6})'),
    re.compile(r'저는\s*([가-힣]{2,6})\s*이고'),
    re.compile(r'나는\s*([가-힣]{2,6})\s*(이야|입니다|야)'),
]


@dataclass
class AnalysisResult:
    """Classifier output for one message"""
    emotion: Emotion = Emotion.NEUTRAL
    situation: Situation = Situation.GENERAL
    stressors: List[str] = field(default_factory=list)
    inferred_name: Optional[str] = None


def score_by_keywords(text: str, keywords: Sequence[str]) -> int:
    """Number of keywords contained in text"""
    return sum(1 for k in keywords if k in text)


def _top_category(text: str, table, default):
    scores = [(category, score_by_keywords(text, keywords)) for category, keywords in table]
    # sorted() is stable: ties keep declaration order
    scores.sort(key=lambda item: item[1], reverse=True)
    category, score = scores[0]
    return category if score > 0 else default


def extract_stressors(text: str) -> List[str]:
    found = [k for k in STRESSOR_KEYWORDS if k in text]
    return list(dict.fromkeys(found))[:MAX_EXTRACTED_STRESSORS]


def infer_name(text: str) -> Optional[str]:
    for pattern in NAME_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def analyze_text(text_raw: Optional[str]) -> AnalysisResult:
    """
    Classify free text by keyword counts

    Args:
        text_raw: User message (may be None)

    Returns:
        Dominant emotion and situation, extracted stressors, inferred name
    """
    text = (text_raw or '').strip()
    return AnalysisResult(
        emotion=_top_category(text, EMOTION_KEYWORDS, Emotion.NEUTRAL),
        situation=_top_category(text, SITUATION_KEYWORDS, Situation.GENERAL),
        stressors=extract_stressors(text),
        inferred_name=infer_name(text)
    )
