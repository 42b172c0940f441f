"""Prompt text for structured resume extraction."""

from resume_intake_ai.schemas.resume_record import SkillsVariant

RESUME_BEGIN_MARKER = "---BEGIN RESUME---"
RESUME_END_MARKER = "---END RESUME---"

_SKILLS_FLAT = '  "skills": ["string"],'
_SKILLS_CATEGORIZED = """  "skills": {
    "languages": ["string"],
    "frameworksLibraries": ["string"],
    "databases": ["string"],
    "cloudDevops": ["string"],
    "tools": ["string"]
  },"""

_SCHEMA_TEMPLATE = """{{
  "firstName": "string",
  "lastName": "string",
  "email": "string",
  "phone": "string",
  "location": "string",
  "headline": "string",
  "summary": "string",
  "linkedin": "string",
  "github": "string",
  "portfolio": "string",
  "leetcode": "string",
  "youtube": "string",
{skills}
  "workExperience": [
    {{"company": "string", "title": "string", "dateRange": {{"start": "string", "end": "string"}}, "description": "string"}}
  ],
  "education": [
    {{"institution": "string", "degree": "string", "dateRange": {{"start": "string", "end": "string"}}}}
  ],
  "projects": [{{"name": "string", "description": "string"}}],
  "certifications": [{{"name": "string", "issuingOrganization": "string", "date": "string"}}]
}}"""

_INSTRUCTIONS = """You are an elite resume data extraction engine.
Convert the resume text between the markers into one JSON object matching this schema:
{schema}
- headline: the candidate's professional headline or most recent title.
- linkedin, github, portfolio, leetcode, youtube: full profile URLs when present.
- dateRange: use {{"start": ..., "end": ...}}; write "Present" for ongoing roles.
If a field cannot be determined, use an empty string or empty array as appropriate.
Your response MUST be only the JSON object, starting with {{ and ending with }}, with no extra text, comments, or markdown."""


def schema_description(variant: SkillsVariant = SkillsVariant.FLAT) -> str:
    skills = _SKILLS_CATEGORIZED if variant == SkillsVariant.CATEGORIZED else _SKILLS_FLAT
    return _SCHEMA_TEMPLATE.format(skills=skills)


def build_extraction_prompt(text: str, variant: SkillsVariant = SkillsVariant.FLAT) -> str:
    """Single prompt: instructions, schema, then the full resume text between sentinel markers."""
    instructions = _INSTRUCTIONS.format(schema=schema_description(variant))
    return f"{instructions}\n{RESUME_BEGIN_MARKER}\n{text}\n{RESUME_END_MARKER}"


MODEL_PROBE_PROMPT = "Respond with just the word 'success' if you can read this."
