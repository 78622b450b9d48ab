from ..core.config import settings
from ..models.schemas import InputState


def is_eligible(text: str | None, min_chars: int = settings.MIN_CHARS) -> bool:
    return len((text or "").strip()) >= min_chars


def counter_text(text: str | None, max_chars: int = settings.MAX_CHARS) -> str:
    # counts the raw input; nothing above max_chars is truncated here
    return f"{len(text or '')} / {max_chars} Characters"


def on_input(text: str | None, seq: int | None = None) -> InputState:
    """State of the page after any change to the input box.

    A previous result is always hidden so it cannot be mistaken for the
    analysis of the new text.
    """
    text = text or ""
    return InputState(
        length=len(text),
        max_chars=settings.MAX_CHARS,
        counter_text=counter_text(text),
        eligible=is_eligible(text),
        results_hidden=True,
        seq=seq,
    )
