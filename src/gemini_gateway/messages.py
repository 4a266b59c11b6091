"""
User-facing text for non-success call outcomes.

The failover engine returns structured outcomes; the service layer renders
them through a FailureMessages instance so wording and locale stay out of
the core logic. Defaults are the Portuguese strings shown by the chat UI.
"""

from pydantic import BaseModel, ConfigDict

from gemini_gateway.models.enums import OutcomeKind


class FailureMessages(BaseModel):
    """Message templates keyed by outcome kind."""
    model_config = ConfigDict(frozen=True)

    safety_blocked: str = (
        "O Mentor foi bloqueado por seus próprios filtros de segurança. "
        "Reformule com menos intensidade."
    )
    filtered: str = "Mensagem interceptada ou filtrada. Tente novamente."
    overloaded: str = (
        "ERRO CRÍTICO: Sistema sobrecarregado. Aguarde 1 minuto e tente novamente."
    )

    def for_outcome(self, kind: OutcomeKind) -> str:
        """Return the text shown to the user for a non-success outcome."""
        if kind == OutcomeKind.SAFETY_BLOCKED:
            return self.safety_blocked
        if kind == OutcomeKind.FILTERED:
            return self.filtered
        if kind == OutcomeKind.EXHAUSTED:
            return self.overloaded
        raise ValueError(f"No message for outcome kind: {kind}")


DEFAULT_MESSAGES = FailureMessages()
