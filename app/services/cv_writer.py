import json
import logging
import re

import google.generativeai as genai
from pydantic import ValidationError as PydanticValidationError

from app.errors import ExternalServiceError
from app.rendering.content import GeneratedCvContent

# Configure logging
logger = logging.getLogger(__name__)

JSON_OBJECT_PATTERN = re.compile(r'\{[\s\S]*\}')


class CvWriter:
    """Rewrites a flattened CV snapshot for a specific job posting."""

    model_name = None

    def tailor(self, content: GeneratedCvContent, job_posting, *, tone=None, language=None) -> GeneratedCvContent:
        raise NotImplementedError


class GeminiCvWriter(CvWriter):
    def __init__(self, api_key, model_name='models/gemini-2.5-flash-lite'):
        if not api_key:
            raise ValueError("GEMINI_API_KEY is not configured")
        self.api_key = api_key
        self.model_name = model_name
        self._ai_model = None

    @property
    def ai_model(self):
        """Lazy initialization of AI model"""
        if self._ai_model is None:
            genai.configure(api_key=self.api_key)
            self._ai_model = genai.GenerativeModel(self.model_name)
            logger.info(f"✅ AI model {self.model_name} initialized")
        return self._ai_model

    def tailor(self, content, job_posting, *, tone=None, language=None):
        logger.info(f"🔄 Tailoring CV for job posting {job_posting.id}")
        prompt = build_prompt(content, job_posting, tone=tone, language=language)

        try:
            response = self.ai_model.generate_content(
                prompt,
                generation_config=genai.types.GenerationConfig(
                    temperature=0.2,  # Lower for more consistent results
                    max_output_tokens=4096,
                    response_mime_type="application/json",
                ),
            )
            response_text = response.text if response.parts else ""
        except Exception as e:
            logger.error(f"❌ AI generation failed: {e}")
            raise ExternalServiceError(f"CV generation failed: {e}") from e

        tailored = parse_generated_content(response_text)
        # Section titles are a layout concern; keep whatever the snapshot had.
        if content.section_titles and not tailored.section_titles:
            tailored = tailored.model_copy(update={"section_titles": content.section_titles})
        logger.info("✅ CV tailored successfully")
        return tailored


def parse_generated_content(response_text: str) -> GeneratedCvContent:
    """Extract the JSON object from a model response and validate it."""
    match = JSON_OBJECT_PATTERN.search(response_text or "")
    if not match:
        raise ExternalServiceError("CV generation failed: Failed to extract JSON from AI response")

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ExternalServiceError(f"CV generation failed: invalid JSON from AI ({e.msg})") from e

    data.pop("schemaVersion", None)
    try:
        return GeneratedCvContent.model_validate(data)
    except PydanticValidationError as e:
        raise ExternalServiceError(
            f"CV generation failed: AI response does not match the CV schema ({e.error_count()} errors)"
        ) from e


def _clean_all_formatting(text: str) -> str:
    """
    Remove markdown from free text before it goes into a prompt
    """
    if not text:
        return text

    text = re.sub(r'\*\*(.*?)\*\*', r'\1', text)
    text = re.sub(r'\*(.*?)\*', r'\1', text)
    text = re.sub(r'^#+\s*', '', text, flags=re.MULTILINE)
    text = re.sub(r'`(.*?)`', r'\1', text)
    return text.strip()


def build_prompt(content: GeneratedCvContent, job_posting, tone=None, language=None) -> str:
    keywords = job_posting.keywords or []
    required_skills = job_posting.required_skills or []
    snapshot = content.model_dump(by_alias=True, mode="json", exclude={"schema_version", "section_titles"})

    return f"""
You are an expert CV writer. Tailor the candidate's CV to the job posting below.

JOB POSTING
- Title: {job_posting.job_title}
- Company: {job_posting.company or 'Not specified'}
- Experience Level: {job_posting.experience_level or 'Not specified'}
- Required Skills: {', '.join(required_skills) or 'Not specified'}
- Keywords: {', '.join(keywords)}
- Description: {_clean_all_formatting(job_posting.job_description)}

CANDIDATE CV (JSON)
{json.dumps(snapshot, indent=2, ensure_ascii=False)}

INSTRUCTIONS
1. Write a compelling professional summary (2-3 sentences) for THIS job.
2. Rephrase work experience descriptions and achievements to emphasise what the job asks for.
3. Reorder skills and projects so the most relevant come first.
4. Keep every fact accurate. DO NOT invent experience, employers, dates or skills.
5. Tone: {tone or 'professional'}. Write in language: {language or 'the language of the CV'}.

Return ONLY a JSON object with exactly the same keys and structure as the CANDIDATE CV JSON.
"""
