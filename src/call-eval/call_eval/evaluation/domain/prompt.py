"""Prompt construction for the main evaluation judge call."""

from call_eval.tone.domain.analysis import AudioAnalysisResult

SYSTEM_PROMPT = """\
You are an expert call evaluation specialist for a Class Mentor (CM) training \
program. Provide accurate, fair, and constructive evaluations based on the \
provided criteria. Always respond with a single valid JSON object.
"""

_TONE_WITH_AUDIO = """\
AUDIO-DERIVED TONE ANALYSIS:
- Pace: {pace}
- Clarity: {clarity}
- Confidence: {confidence}
- Professionalism: {professionalism}
- Energy: {energy}
- Tone score: {tone_score}/100

Base the TONE OF VOICE score below on this audio-derived analysis together \
with the transcript.
"""

_TONE_WITHOUT_AUDIO = """\
No audio analysis is available for this call. Infer the TONE OF VOICE score \
below from transcript patterns alone: word choice, filler words, hedging, \
sentence length, greetings and closings.
"""

_USER_TEMPLATE = """\
Analyze the following practice call transcript and provide scores for each criterion.

PARTICIPANT: {participant_name}
CALL DURATION: {call_duration} seconds
TRANSCRIPT:
{transcript}

{tone_section}
EVALUATION CRITERIA (each scored 0-100):

1. TONE OF VOICE (20% weight):
   - Professional and appropriate tone
   - Clear communication
   - Confidence and authority
   - Appropriate pace and volume

2. BUILDING RAPPORT (20% weight):
   - Establishing connection with student/parent
   - Active listening skills
   - Personalization and engagement
   - Creating comfortable atmosphere

3. SHOWING EMPATHY (20% weight):
   - Understanding student/parent concerns
   - Acknowledging feelings and situations
   - Compassionate responses
   - Emotional intelligence

4. HANDLING SKILLS (20% weight):
   - Problem resolution abilities
   - Objection handling
   - Conflict management
   - Professional responses to challenges

5. KNOWLEDGE (20% weight):
   - Curriculum understanding
   - Company policies and procedures
   - Technical competence
   - Accurate information delivery

INSTRUCTIONS:
- Provide an integer score from 0 to 100 for each criterion
- Calculate overallScore as the average of the five criterion scores: (sum of all five) / 5
- Provide specific, actionable feedback that quotes or cites the transcript
- Focus on constructive improvement suggestions
- Be fair but thorough in evaluation

Respond in the following JSON format:
{{
  "overallScore": number,
  "toneOfVoiceScore": number,
  "buildingRapportScore": number,
  "showingEmpathyScore": number,
  "handlingSkillsScore": number,
  "knowledgeScore": number,
  "feedback": "detailed feedback with specific examples and improvement suggestions"
}}
"""


def build_evaluation_prompt(
    transcript: str,
    participant_name: str,
    call_duration_seconds: str | int | float,
    tone: AudioAnalysisResult | None,
) -> str:
    """Render the single user prompt for the evaluation judge.

    With *tone* present the Tone of Voice criterion is anchored on the
    audio-derived analysis; without it the judge is told to infer tone from
    the transcript.
    """
    if tone is None:
        tone_section = _TONE_WITHOUT_AUDIO
    else:
        qualities = tone.tone_analysis
        tone_section = _TONE_WITH_AUDIO.format(
            pace=qualities.pace,
            clarity=qualities.clarity,
            confidence=qualities.confidence,
            professionalism=qualities.professionalism,
            energy=qualities.energy,
            tone_score=tone.tone_score,
        )

    return _USER_TEMPLATE.format(
        participant_name=participant_name,
        call_duration=call_duration_seconds,
        transcript=transcript,
        tone_section=tone_section,
    )
