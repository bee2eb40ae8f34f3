from typing import List

from pydantic import BaseModel, Field

from .common import NonEmptyStr


class FindSchemesInput(BaseModel):
    state: NonEmptyStr = Field(description="The state where the farmer resides.")
    crop_type: NonEmptyStr = Field(description="The primary crop the farmer cultivates.")


class Scheme(BaseModel):
    name: str = Field(description="The official name of the government scheme.")
    description: str = Field(
        description=(
            "A brief, one or two-sentence description of the scheme's purpose and benefits."
        )
    )
    eligibility: str = Field(
        description="A concise summary of the key eligibility criteria for a farmer to apply."
    )
    benefit: str = Field(
        description=(
            "A summary of the primary financial or material benefit provided by the scheme."
        )
    )


class FindSchemesOutput(BaseModel):
    schemes: List[Scheme] = Field(
        min_length=1,
        description="A list of 2-3 relevant government schemes for the farmer.",
    )
