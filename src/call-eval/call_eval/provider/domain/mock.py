"""Canned practice-call data for demo and offline operation.

Used in place of the live call-recording provider when it cannot be reached,
so the rest of the pipeline keeps working on realistic transcripts.
"""

import time

from call_eval.provider.domain.call_data import CallData, CallMetrics

DEFAULT_SCENARIO = "Low Class Consumption"

_MOCK_TRANSCRIPTS: dict[str, str] = {
    "Low Class Consumption": """\
Hello, I'm calling about my son Ahmed's English classes. I'm concerned that he's only taking 10 classes this month, and I don't understand why he needs a fixed schedule.

CM: Thank you for calling. I understand your concerns about Ahmed's class consumption. Let me explain our 12-class policy and how it benefits students like Ahmed.

Parent: But I paid for the classes, why can't he take them whenever he wants?

CM: I completely understand your perspective. The 12-class consumption requirement is based on the Ebbinghaus Forgetting Curve research. When students have gaps longer than 2-3 days between classes, they can lose up to 70% of what they learned.

Parent: That's interesting, but my son is busy with school.

CM: I hear you about his school schedule. What if we set up a semi-fixed schedule? We could have the same teacher for consistency but allow some flexibility with timing. This way Ahmed gets the learning benefits while accommodating his school needs.

Parent: That sounds more reasonable. How does that work?

CM: Perfect! I can help you set up a schedule where Ahmed has classes every other day with Teacher Lisa, but we can adjust the times within a 2-hour window. This maintains learning momentum while giving you flexibility.""",
    "4th Call Scenario": """\
Hello, this is the fourth time I'm calling this month. My daughter still seems to be struggling with her English.

CM: Thank you for your patience in working with us. I can see this is your fourth call, and I really appreciate your dedication to your daughter's progress. Let me pull up her learning history.

Parent: I just don't see the improvement I was hoping for.

CM: I understand your concern. Learning a language takes time, and progress isn't always immediately visible. Let me show you some specific improvements I can see in her records.

Parent: What kind of improvements?

CM: Looking at her teacher's notes, I can see her vocabulary has increased by 47 new words this month, and her pronunciation confidence has improved significantly. Her teacher notes she's now initiating conversations in class rather than just responding.

Parent: I hadn't noticed that at home.

CM: That's actually normal. Children often demonstrate skills in the learning environment first. What I'd like to suggest is a progress review session where we can show you exactly what she's learned and provide some activities you can do at home to reinforce her learning.

Parent: That would be helpful.

CM: Excellent! I'll schedule a progress review with her teacher for next week, and I'll also send you a detailed progress report showing her achievements and next learning goals.""",
}

_KEYWORD_MATCHES = ["12-class policy", "Ebbinghaus", "learning momentum", "flexibility"]


def available_mock_scenarios() -> list[str]:
    return list(_MOCK_TRANSCRIPTS)


def mock_transcript(scenario: str) -> str:
    """Transcript for *scenario*, or the default scenario's when the name is unknown."""
    return _MOCK_TRANSCRIPTS.get(scenario, _MOCK_TRANSCRIPTS[DEFAULT_SCENARIO])


def generate_mock_call_data(scenario: str, duration_seconds: float = 120) -> CallData:
    """Build demo call data for *scenario*. Never raises for an unknown scenario.

    The transcript depends only on *scenario*; callId and audioUrl carry a
    millisecond timestamp and differ between calls.
    """
    stamp = time.time_ns() // 1_000_000
    return CallData(
        call_id=f"mock-{stamp}",
        duration=duration_seconds,
        transcript=mock_transcript(scenario),
        audio_url=f"https://mock-audio-url.com/call-{stamp}",
        metrics=CallMetrics(
            speaking_time=duration_seconds * 0.6,
            silence_duration=duration_seconds * 0.4,
            words_per_minute=150,
            sentiment_score=0.8,
            keyword_matches=list(_KEYWORD_MATCHES),
        ),
    )
