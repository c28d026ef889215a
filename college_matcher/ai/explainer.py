import os
import json
import logging
from typing import List, Optional
import openai
from dotenv import load_dotenv

from ..logic.contracts import (
    AthleteProfile,
    CombineMetricSnapshot,
    CollegeMatchResult,
    MatchedSchool,
)
from .prompt_builder import build_system_prompt, build_comparison_data, build_user_prompt
from .safety_rules import FALLBACK_INSIGHTS

# Load env vars (if not already loaded)
load_dotenv()

logger = logging.getLogger(__name__)


class InsightsExplainer:
    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.client = None
        if self.api_key:
            self.client = openai.OpenAI(api_key=self.api_key)

        self.model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.max_tokens = 500
        self.temperature = 0.3

    def get_insights(
        self,
        athlete: AthleteProfile,
        metrics: CombineMetricSnapshot,
        result: CollegeMatchResult,
        top_schools: List[MatchedSchool]
    ) -> List[str]:
        """
        Generates recruiting insights for a match result.
        Returns the fallback insights if the API key is missing or an error occurs.
        """
        if not self.client:
            logger.warning("OpenAI API key not found. Using fallback recruiting insights.")
            return list(FALLBACK_INSIGHTS)

        comparison = build_comparison_data(athlete, metrics, result, top_schools)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": build_system_prompt()},
                    {"role": "user", "content": build_user_prompt(comparison)}
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"}
            )

            content = response.choices[0].message.content
            if not content:
                return list(FALLBACK_INSIGHTS)

            parsed_content = json.loads(content)
            if not isinstance(parsed_content, dict):
                return list(FALLBACK_INSIGHTS)

            insights = parsed_content.get("insights")
            if not isinstance(insights, list) or not insights:
                return list(FALLBACK_INSIGHTS)

            return [str(insight) for insight in insights]

        except Exception as e:
            logger.error(f"Error generating recruiting insights: {e}")
            return list(FALLBACK_INSIGHTS)


# Singleton instance
explainer = InsightsExplainer()
