"""Response script templates"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from app.coaching.analyzer import AnalysisResult
from app.models.enums import Emotion, Situation, severity_of


EMOTION_LABELS: Dict[Emotion, str] = {
    Emotion.ANXIETY: '불안/긴장',
    Emotion.ANGER: '분노/짜증',
    Emotion.SADNESS: '우울/슬픔',
    Emotion.SHAME: '자존감 저하/수치심',
    Emotion.BURNOUT: '소진/번아웃',
    Emotion.OVERWHELM: '압박/과부하',
}
DEFAULT_EMOTION_LABEL = '복합 감정'

SITUATION_LABELS: Dict[Situation, str] = {
    Situation.MEETING: '회의/발표 상황',
    Situation.OVERTIME: '야근/과로 상황',
    Situation.BOSS_CONFLICT: '상사와의 갈등/피드백 상황',
    Situation.DEADLINE: '마감/데드라인 상황',
    Situation.TEAM_CONFLICT: '동료/팀 갈등 상황',
    Situation.PERFORMANCE_REVIEW: '성과/평가 압박 상황',
}
DEFAULT_SITUATION_LABEL = '업무 스트레스 상황'

SITUATION_VALIDATION = {
    Situation.BOSS_CONFLICT: "누구보다 잘하고 싶었던 마음, 제가 다 알아요. 그 마음이 상처받지 않게 잠시 안아줄게요.",
    Situation.OVERTIME: "오늘 하루도 정말 치열하게 버티셨군요. 당신의 에너지는 무한하지 않아요. 지금은 오직 '휴식'만 생각해도 괜찮아요.",
    Situation.DEADLINE: "쫓기는 기분, 심장이 뛰는 그 느낌... 알아요. 하지만 {who}, 당신의 존재 가치는 속도에 있지 않아요.",
}
DEFAULT_SITUATION_VALIDATION = "지금 겪고 있는 {emotion_label}, 혼자 감당하기엔 너무 무거운 짐이었을 거예요."

VALIDATE_TEMPLATE = "{who}, 지금 느끼는 “{emotion_label}”의 감정... 이건 당신이 약해서가 아니라, 지금까지 너무 애써왔다는 증거예요. {situation_validation}"
REFLECT_TEMPLATE = "말해주신 이야기(“{text}”) 속에서, 저는 당신의 외로움과 간절함을 느꼈어요. 이제 더 이상 혼자 삼키지 마세요. 제가 곁에 있을게요."
REFRAME_TEMPLATE = "지금 필요한 건 해결책이 아니에요. 그저 '나'를 위한 따뜻한 위로입니다. 당신은 이미 충분합니다. {memory_line}"
MEMORY_LINE_TEMPLATE = "\n\n지난번의 “{nudge}”도 여전히 마음에 남아 계신가요? 오늘은 그 짐도 잠시 내려놓아요."

HEALING_BREATH = "\n".join([
    "1분 치유 호흡 (Healing Breath)",
    "- 0:00~0:15: 가슴에 손을 얹고, 심장 소리를 느껴보세요.",
    '- 0:15~0:35: 들이마시는 숨에 "감사합니다", 내쉬는 숨에 "사랑합니다"라고 말해보세요.',
    "- 0:35~0:55: 내 몸을 따뜻한 빛이 감싸 안는다고 상상하세요.",
    "- 0:55~1:00: 당신은 사랑받기 위해 태어난 사람입니다. 이 사실을 잊지 마세요.",
])
HEALING_BREATH_INTRO = "이제 저와 함께, 아주 잠깐 마음의 쉼표를 찍어볼까요?"

MICRO_ACTION = "\n".join([
    "🚨 긴급 회복 가이드 (Micro-Action)",
    "- 지금 당장 1분만, 아무것도 하지 말고 숨만 쉬세요.",
    "- 4초간 들이마시고, 4초간 멈추고, 4초간 내뱉으세요.",
    "- 머리를 비우려 하지 마세요. 그냥 숨이 들어오고 나가는 것만 지켜보세요.",
])
MICRO_ACTION_INTRO = "지금은 긴 명상도 사치일 수 있어요. 딱 1분만, 저랑 같이 숨만 쉬어봐요."

# Emotions that get the short emergency guide instead of the meditation
HIGH_STRAIN_EMOTIONS = {Emotion.BURNOUT, Emotion.OVERWHELM}


@dataclass
class Script:
    """Rendered reply for one message"""
    reply_text: str
    voice_text: str
    meditation_text: str
    tags: Dict[str, str] = field(default_factory=dict)
    resilience_score: int = 0


def emotion_label(emotion: Emotion) -> str:
    return EMOTION_LABELS.get(emotion, DEFAULT_EMOTION_LABEL)


def situation_label(situation: Situation) -> str:
    return SITUATION_LABELS.get(situation, DEFAULT_SITUATION_LABEL)


def resilience_score(emotion: Emotion) -> int:
    """0-100, higher means lower emotional severity"""
    return max(0, 100 - severity_of(emotion) * 10)


def _spoken(text: str) -> str:
    return text.replace("\n", " ")


def build_personalized_script(
    text: str,
    analysis: AnalysisResult,
    name: Optional[str] = None,
    last_memory_nudge: Optional[str] = None
) -> Script:
    """
    Fill the reply templates for one message

    Args:
        text: The user's message, quoted back in the reflection
        analysis: Classifier output
        name: Display name, if known
        last_memory_nudge: Stressor remembered from an earlier turn

    Returns:
        Script with reply, voice and meditation text plus display tags
    """
    who = f"{name}님" if name else "당신"
    label = emotion_label(analysis.emotion)

    situation_validation = SITUATION_VALIDATION.get(
        analysis.situation, DEFAULT_SITUATION_VALIDATION
    ).format(who=who, emotion_label=label)

    memory_line = MEMORY_LINE_TEMPLATE.format(nudge=last_memory_nudge) if last_memory_nudge else ""

    validate = VALIDATE_TEMPLATE.format(who=who, emotion_label=label, situation_validation=situation_validation)
    reflect = REFLECT_TEMPLATE.format(text=text).strip()
    reframe = REFRAME_TEMPLATE.format(memory_line=memory_line)

    reply_text = "\n\n".join(part for part in [validate, reflect, reframe] if part)

    if analysis.emotion in HIGH_STRAIN_EMOTIONS:
        meditation_text = MICRO_ACTION
        intro = MICRO_ACTION_INTRO
    else:
        meditation_text = HEALING_BREATH
        intro = HEALING_BREATH_INTRO
    voice_text = f"{validate} {reflect} {reframe} {intro} {_spoken(meditation_text)}"

    return Script(
        reply_text=reply_text,
        voice_text=voice_text,
        meditation_text=meditation_text,
        tags={
            "emotionLabel": label,
            "situationLabel": situation_label(analysis.situation),
        },
        resilience_score=resilience_score(analysis.emotion)
    )
