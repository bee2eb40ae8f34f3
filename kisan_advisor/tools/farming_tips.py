import random
from typing import Optional

from kisan_advisor.core.tool_descriptor import ToolDescriptor
from kisan_advisor.models.krishi_assistant import FarmingTipInput

FARMING_TIP_TOOL_NAME = "get_farming_tip"

FARMING_TIPS = [
    "Regularly test your soil's pH and nutrient levels to ensure optimal crop growth. Use organic compost to improve soil structure.",
    "Utilize drip irrigation or sprinkler systems to reduce water wastage. Mulching can also help retain soil moisture.",
    "Combine biological, cultural, and chemical practices to manage pests effectively while minimizing environmental impact.",
    "Practice crop rotation to prevent soil depletion and reduce the buildup of pests and diseases.",
    "Ensure proper spacing between plants to allow for adequate sunlight, air circulation, and growth.",
]


def build_farming_tip_tool(rng: Optional[random.Random] = None) -> ToolDescriptor:
    async def _farming_tip() -> str:
        return (rng or random).choice(FARMING_TIPS)

    return ToolDescriptor(
        name=FARMING_TIP_TOOL_NAME,
        description="Provides a general farming tip when the user asks for advice.",
        input_model=FarmingTipInput,
        func=_farming_tip,
    )
