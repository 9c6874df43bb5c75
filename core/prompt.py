# =============================================================================
# core/prompt.py  -  The completion prompt sent to Mistral
# =============================================================================
#
# One user-role message carries everything the model gets:
#   1. ROLE:      "You are an EigenLayer AVS data assistant"
#   2. DATA:      the AVS dataset, pretty-printed as JSON (indent=2)
#   3. QUESTION:  the user's query, verbatim
#   4. FOCUS:     the AVS name the caller asked about
#   5. FORMAT:    Introduction / Data Analysis / Conclusion
#   6. AUDIENCE:  explain advanced EigenLayer concepts along the way
#
# AVS NAME WHEN OMITTED:
#   avs_name is interpolated as-is.  When the caller leaves it out the line
#   reads "AVS name: None".  Callers that depend on the rendered text (the
#   tests do) should expect that literal.
# =============================================================================

import json
from typing import Any, Optional


def format_dataset(records: Any) -> str:
    """Serialize the dataset the way it is embedded in the prompt."""
    return json.dumps(records, indent=2, ensure_ascii=False)


def build_avs_prompt(records: Any, full_prompt: str, avs_name: Optional[str]) -> str:
    """Build the single user message for the completion call."""
    return f"""You are an EigenLayer AVS data assistant. Your task is to analyze AVS data and respond to user queries.

Here is the AVS data from the EigenExplorer API:
{format_dataset(records)}

User query: {full_prompt}
AVS name: {avs_name}

Provide a detailed, well-structured response that directly addresses the user's query about the AVS data.
Focus on being accurate, informative, and comprehensive.

You can use the following format to structure your response:
- Introduction
- Data Analysis
- Conclusion

Explain the advanced concepts (if any) for users who are not familiar with EigenLayer along the way.
"""
