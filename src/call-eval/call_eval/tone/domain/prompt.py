"""Prompt text for the tone judge."""

SYSTEM_PROMPT = """\
You are a speech and delivery coach for Class Mentors (CMs) who handle calls \
with students and parents. You are given only the text transcript of a call, \
never the audio. Infer how the CM sounded from evidence that is visible in \
text: filler words ("um", "uh", "like"), false starts and repetitions, \
sentence length and run-on sentences, hedging language ("I think", "maybe", \
"sort of"), interruptions, greetings and closings, and word choice. Always \
respond with a single valid JSON object and nothing else.
"""

_USER_TEMPLATE = """\
Analyse the delivery of the Class Mentor in the following call transcript.

TRANSCRIPT:
{transcript}

Assess each quality from speech-pattern and word-choice evidence only:
- pace: rushed, measured or dragging; look at sentence length and turn length
- clarity: how easy the explanations are to follow; filler words, false starts
- confidence: assertive statements versus hedging and qualifiers
- professionalism: courtesy, register, appropriate greetings and closings
- energy: enthusiasm and engagement conveyed by word choice

Then give one overall tone score from 0 to 100.

Respond in exactly this JSON format:
{{
  "toneAnalysis": {{
    "pace": "one or two sentences citing transcript evidence",
    "clarity": "one or two sentences citing transcript evidence",
    "confidence": "one or two sentences citing transcript evidence",
    "professionalism": "one or two sentences citing transcript evidence",
    "energy": "one or two sentences citing transcript evidence"
  }},
  "toneScore": integer from 0 to 100
}}
"""


def build_tone_prompt(transcript: str) -> str:
    return _USER_TEMPLATE.format(transcript=transcript)
