from typing import Any, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.pest_detection import (
    AnalyzeUploadedImageInput,
    AnalyzeUploadedImageOutput,
)
from kisan_advisor.prompts.pest_detection_prompt import PEST_DETECTION_PROMPT

ANALYZE_UPLOADED_IMAGE_FLOW = AdvisoryFlow(
    name="analyze_uploaded_image",
    prompt=AdvisoryPrompt(
        name="analyze_uploaded_image_prompt",
        template=PEST_DETECTION_PROMPT,
        input_model=AnalyzeUploadedImageInput,
        media_fields=("photo_data_uri",),
    ),
    output_model=AnalyzeUploadedImageOutput,
)


async def analyze_uploaded_image(
    payload: Union[AnalyzeUploadedImageInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
) -> AnalyzeUploadedImageOutput:
    """Diagnose pests or diseases from a crop photo."""
    return await ANALYZE_UPLOADED_IMAGE_FLOW.run(payload, client=client)
