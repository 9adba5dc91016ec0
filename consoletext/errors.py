"""Domain exceptions for panel and CLI diagnostics."""

from __future__ import annotations


class PanelStageError(RuntimeError):
    """Raised when a specific panel stage (config, content, lookup) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped panel error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
