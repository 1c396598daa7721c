"""Knobs for resume and cover letter generation: temperatures, limits, prompts."""

from jobdesk.core.models import TailorStyle, Tone

RESUME_TEMPERATURE = 0.5
LETTER_TEMPERATURE = 0.7
TAILOR_TEMPERATURE = 0.4

# Free-text inputs are cut to this many characters before prompting.
MAX_FIELD_CHARS = 16000

# Resume text shorter than this (after trimming) is not worth tailoring.
MIN_RESUME_CHARS = 200

RESUME_SYSTEM_PROMPT = (
    "You are an expert resume writer. Output only the resume text. "
    "No markdown fences. No commentary."
)

LETTER_SYSTEM_PROMPT = (
    "You are an expert career writer. Output only the cover letter body text "
    "(no header, no signature)."
)

TAILOR_SYSTEM_PROMPT = "You write high-quality tailored resumes."

TONE_INSTRUCTIONS: dict[Tone, str] = {
    Tone.PROFESSIONAL: "Write a professional, standard cover letter with a strong opening and clear fit.",
    Tone.CONCISE: "Write a concise cover letter (~180-250 words). Strong, direct sentences. Minimal fluff.",
    Tone.FRIENDLY: "Write a warm, personable cover letter. Still professional. Natural voice.",
    Tone.TECHNICAL: (
        "Write a technical cover letter emphasizing measurable impact, tools, systems, "
        "and engineering rigor."
    ),
    Tone.CONFIDENT: "Write a confident cover letter with clear claims backed by evidence. No arrogance.",
    Tone.ENTHUSIASTIC: (
        "Write an enthusiastic cover letter that shows genuine interest without sounding cheesy."
    ),
}

STYLE_INSTRUCTIONS: dict[TailorStyle, str] = {
    TailorStyle.ATS: (
        "Optimize heavily for ATS keywords while staying truthful. "
        "Prefer keyword-rich bullet points."
    ),
    TailorStyle.CONCISE: "Make it concise and high-impact. Remove fluff. Keep bullets tight.",
    TailorStyle.BALANCED: "Balanced: ATS-friendly but still readable and human.",
}
