"""
AI Survey Summarizer.

Sends the most recent survey records to Gemini and returns a structured
executive summary.
"""

import json
import logging
from typing import Sequence

import google.generativeai as genai

from tickettrack.models.analysis import AnalysisResult
from tickettrack.models.survey import SurveyRecord

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are a support-quality analyst reviewing customer satisfaction surveys.

Each survey rates one support ticket from 1 (very dissatisfied) to 5 (very satisfied) on:
1. easeRating: How easy it was to find the support channel and open the ticket
2. processRating: Whether the ticket reached the right team and the visit was scheduled correctly
3. solutionRating: Whether the technician's actions resolved the problem for good

Your task:
1. Judge the overall sentiment from ratings and comments
2. Write a one-paragraph executive summary focused on process efficiency
3. Identify bottlenecks (e.g. hard to open a ticket, wrong scheduling, missing parts)
4. Recommend concrete improvements to the opening and resolution flow

Output valid JSON only."""


def _construct_user_prompt(records: Sequence[SurveyRecord]) -> str:
    """Construct user prompt from records."""
    data = json.dumps([r.to_dict() for r in records], ensure_ascii=False)
    return f"""Survey data: {data}

Return the analysis as JSON:
{{
  "overallSentiment": "Positive|Neutral|Negative",
  "summary": "...",
  "painPoints": ["..."],
  "recommendations": ["..."]
}}"""


class SurveySummarizer:
    """
    Produces an AnalysisResult from recent survey records.

    Never raises on model failures: any API error or unusable reply yields
    the neutral default result.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-1.5-flash",
        temperature: float = 0.0,
        window: int = 20,
        max_attempts: int = 1
    ):
        """
        Initialize summarizer.

        Args:
            api_key: Gemini API key
            model_name: Gemini model to use
            temperature: LLM temperature
            window: Number of most recent records sent to the model
            max_attempts: Model calls before falling back to the neutral result
        """
        self.model_name = model_name
        self.temperature = temperature
        self.window = window
        self.max_attempts = max(1, max_attempts)

        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(
            model_name=model_name,
            generation_config={
                "temperature": temperature,
                "response_mime_type": "application/json"
            },
            system_instruction=SYSTEM_PROMPT
        )

        logger.info(f"Initialized SurveySummarizer with model={model_name}, window={window}")

    async def analyze(self, records: Sequence[SurveyRecord]) -> AnalysisResult:
        """
        Summarize the most recent records.

        Args:
            records: Full record collection, in collection order

        Returns:
            AnalysisResult from the model, or the neutral default
        """
        if not records:
            logger.debug("No records to analyze")
            return AnalysisResult.neutral("No survey responses to analyze yet.")

        recent = list(records)[-self.window:]
        user_prompt = _construct_user_prompt(recent)

        for attempt in range(self.max_attempts):
            try:
                response = await self.model.generate_content_async(user_prompt)
                result = self._parse_llm_response(response.text)
                logger.info(
                    f"Analyzed {len(recent)} records: sentiment={result.overall_sentiment}, "
                    f"{len(result.pain_points)} pain points"
                )
                return result

            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                logger.error(f"Unusable LLM response (attempt {attempt + 1}): {e}")

            except Exception as e:
                logger.error(f"LLM API error (attempt {attempt + 1}): {e}")

        logger.warning("Analysis unavailable, returning neutral result")
        return AnalysisResult.neutral()

    def _parse_llm_response(self, response_text: str) -> AnalysisResult:
        """
        Parse LLM JSON response into an AnalysisResult.

        Raises:
            json.JSONDecodeError: If response is not valid JSON
            KeyError, TypeError, ValueError: If the JSON has the wrong shape
        """
        if not response_text:
            raise ValueError("Empty LLM response")

        data = json.loads(response_text)
        if not isinstance(data, dict):
            raise ValueError(f"Expected JSON object, got {type(data).__name__}")

        return AnalysisResult.from_dict(data)
