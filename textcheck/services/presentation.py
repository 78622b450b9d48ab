from ..models.schemas import DisplayState, NormalizedResult, Severity
from .providers import Provider


def _css_class(severity: Severity) -> str:
    # "warning-mild" is drawn with the two classes "warning mild"
    return "conclusion " + severity.value.replace("-", " ")


def present(result: NormalizedResult, provider: Provider) -> DisplayState:
    severity = provider.severity_of(result.ai_score)
    return DisplayState(
        human_score=result.human_score,
        ai_score=result.ai_score,
        verdict=result.verdict,
        severity=severity,
        human_bar=f"{result.human_score}%",
        ai_bar=f"{result.ai_score}%",
        css_class=_css_class(severity),
    )


def present_error(message: str) -> DisplayState:
    """Any failure: message in the verdict slot, both bars back to 0%."""
    return DisplayState(
        human_score=0,
        ai_score=0,
        verdict=message,
        severity=Severity.ERROR,
        human_bar="0%",
        ai_bar="0%",
        css_class=_css_class(Severity.ERROR),
    )
