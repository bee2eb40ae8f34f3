import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from pydantic import BaseModel  # noqa: E402

from kisan_advisor.core.prompt_template import AdvisoryPrompt  # noqa: E402
from kisan_advisor.models.common import parse_data_uri  # noqa: E402
from kisan_advisor.models.schemes import FindSchemesInput  # noqa: E402


class PhotoInput(BaseModel):
    crop_type: str
    photo: str


class AdvisoryPromptTests(unittest.TestCase):
    def test_missing_placeholder_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AdvisoryPrompt("schemes", "Schemes for {state}.", FindSchemesInput)

    def test_unknown_placeholder_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AdvisoryPrompt(
                "schemes", "{state} {crop_type} {district}", FindSchemesInput
            )

    def test_repeated_placeholder_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AdvisoryPrompt(
                "schemes", "{state} {crop_type} in {state}", FindSchemesInput
            )

    def test_unknown_media_field_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AdvisoryPrompt(
                "schemes", "{state} {crop_type}", FindSchemesInput, media_fields=("photo",)
            )

    def test_context_variable_must_be_supplied(self) -> None:
        prompt = AdvisoryPrompt(
            "schemes",
            "{today}: {state} {crop_type}",
            FindSchemesInput,
            context_variables=("today",),
        )
        request = FindSchemesInput(state="Bihar", crop_type="Maize")
        with self.assertRaises(ValueError):
            prompt.format(request)
        self.assertEqual(prompt.format(request, today="Monday"), "Monday: Bihar Maize")

    def test_media_field_is_not_a_placeholder(self) -> None:
        prompt = AdvisoryPrompt(
            "photo", "Inspect this {crop_type} leaf.", PhotoInput, media_fields=("photo",)
        )
        [message] = prompt.render(
            PhotoInput(crop_type="Cotton", photo="data:image/png;base64,iVBORw0KGgo=")
        )
        self.assertEqual(message.content[0]["text"], "Inspect this Cotton leaf.")
        self.assertEqual(message.content[1]["data"], "iVBORw0KGgo=")


class DataUriTests(unittest.TestCase):
    def test_parse_data_uri(self) -> None:
        self.assertEqual(
            parse_data_uri("data:image/jpeg;base64,abcd"), ("image/jpeg", "abcd")
        )

    def test_rejects_plain_url(self) -> None:
        with self.assertRaises(ValueError):
            parse_data_uri("https://example.com/leaf.jpg")


if __name__ == "__main__":
    unittest.main()
