from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from .config import settings

DEFAULT_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
}


def get_chat_model(model: str | None = None, **kwargs) -> ChatGoogleGenerativeAI:
    if "google_api_key" not in kwargs and "api_key" not in kwargs:
        kwargs["google_api_key"] = settings.GEMINI_API_KEY
    if "safety_settings" not in kwargs:
        kwargs["safety_settings"] = DEFAULT_SAFETY_SETTINGS
    if "temperature" not in kwargs:
        kwargs["temperature"] = settings.GEMINI_TEMPERATURE
    # Retries are owned by ModelClient.
    kwargs.setdefault("max_retries", 0)
    return ChatGoogleGenerativeAI(model=model or settings.GEMINI_MODEL, **kwargs)
