"""Error types for the GSD command dispatcher."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandError:
    """Structured error for command resolution failures."""

    step_name: str
    error_type: str
    message: str
    context: dict[str, object] = field(default_factory=dict)

    def __str__(self) -> str:
        """Human-readable error representation for logging."""
        max_len = 500
        base = f"CommandError[{self.step_name}] {self.error_type}: {self.message}"
        if self.context:
            ctx_str = str(self.context)
            if len(ctx_str) > max_len:
                ctx_str = ctx_str[: max_len - 3] + "..."
            base += f" | context={ctx_str}"
        return base
