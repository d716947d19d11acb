"""
Life Report - narrative analysis of the life area scores
"""
import json
import logging
from typing import List

from kaizen.core.constants import LLM_MODEL_DEFAULT
from kaizen.core.dependencies import get_openai_client
from kaizen.core.exceptions import ExternalServiceError
from kaizen.models.report import CategoryScore, LifeReportAnalysis
from kaizen.utils.prompts import LIFE_REPORT_SYSTEM_PROMPT, format_life_report_prompt

logger = logging.getLogger(__name__)


def generate_life_report(scores: List[CategoryScore]) -> LifeReportAnalysis:
    """
    Turn category scores into an encouraging analysis using the LLM.

    Args:
        scores: Output of compute_category_scores

    Returns:
        LifeReportAnalysis

    Raises:
        ExternalServiceError: If the LLM call fails or returns unusable JSON
    """
    payload = [score.model_dump(by_alias=True) for score in scores]

    try:
        response = get_openai_client().chat.completions.create(
            model=LLM_MODEL_DEFAULT,
            messages=[
                {"role": "system", "content": LIFE_REPORT_SYSTEM_PROMPT},
                {"role": "user", "content": format_life_report_prompt(payload)}
            ],
            response_format={"type": "json_object"}
        )
        result = json.loads(response.choices[0].message.content)
        return LifeReportAnalysis.model_validate(result)
    except Exception as e:
        logger.error(f"Life report generation error: {e}")
        raise ExternalServiceError(f"Failed to generate life report: {e}")
