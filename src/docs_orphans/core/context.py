from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    output_format: OutputFormat
    verbose: bool
    quiet: bool

    @property
    def log_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
    ) -> "RunContext":
        default_run = f"orphans-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        resolved_run_id = run_id or os.environ.get("RUN_ID") or default_run
        return cls(
            run_id=resolved_run_id,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
        )
