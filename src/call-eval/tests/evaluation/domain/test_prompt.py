"""Tests for build_evaluation_prompt."""

from call_eval.evaluation.domain.prompt import build_evaluation_prompt
from call_eval.tone.domain.analysis import AudioAnalysisResult, ToneQualities

_TONE = AudioAnalysisResult(
    audio_transcript="CM: Hello.",
    tone_analysis=ToneQualities(
        pace="Rushed in the second half.",
        clarity="Several false starts.",
        confidence="Frequent hedging.",
        professionalism="Polite throughout.",
        energy="Flat.",
    ),
    tone_score=58,
)


def _prompt(tone: AudioAnalysisResult | None = None) -> str:
    return build_evaluation_prompt(
        transcript="CM: Thank you for calling about Ahmed.",
        participant_name="Sara",
        call_duration_seconds="95",
        tone=tone,
    )


class TestEvaluationPromptContent:
    def test_includes_participant_duration_and_transcript(self) -> None:
        prompt = _prompt()

        assert "PARTICIPANT: Sara" in prompt
        assert "CALL DURATION: 95 seconds" in prompt
        assert "CM: Thank you for calling about Ahmed." in prompt

    def test_names_all_five_equally_weighted_criteria(self) -> None:
        prompt = _prompt()

        for criterion in (
            "TONE OF VOICE",
            "BUILDING RAPPORT",
            "SHOWING EMPATHY",
            "HANDLING SKILLS",
            "KNOWLEDGE",
        ):
            assert f"{criterion} (20% weight)" in prompt

    def test_requests_all_result_fields(self) -> None:
        prompt = _prompt()

        for field in (
            "overallScore",
            "toneOfVoiceScore",
            "buildingRapportScore",
            "showingEmpathyScore",
            "handlingSkillsScore",
            "knowledgeScore",
            "feedback",
        ):
            assert f'"{field}"' in prompt


class TestEvaluationPromptTone:
    def test_with_tone_embeds_all_qualities_and_score(self) -> None:
        prompt = _prompt(tone=_TONE)

        assert "Rushed in the second half." in prompt
        assert "Several false starts." in prompt
        assert "Frequent hedging." in prompt
        assert "Polite throughout." in prompt
        assert "Flat." in prompt
        assert "58/100" in prompt
        assert "AUDIO-DERIVED TONE ANALYSIS" in prompt

    def test_without_tone_asks_for_transcript_only_inference(self) -> None:
        prompt = _prompt()

        assert "AUDIO-DERIVED TONE ANALYSIS" not in prompt
        assert "No audio analysis is available" in prompt
        assert "transcript patterns alone" in prompt
