import logging

_INITIALIZED = False


def init_logging(level: str = "INFO") -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler()],
    )
    _INITIALIZED = True


def summarize_text(text: str, limit: int = 200) -> str:
    if not text:
        return ""
    text = str(text)
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
