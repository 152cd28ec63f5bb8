"""JSON report generator for property check sessions.

Generates structured JSON reports from recorded events and final counters.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..host.protocol import Event
from ..messaging.codec import CounterDelta
from .pretty import format_summary


class JsonReporter:
    """Generates JSON reports from session results."""

    def generate(
        self,
        counts: CounterDelta,
        events: list[Event],
        duration_ms: int = 0,
        error: Optional[str] = None,
    ) -> dict[str, Any]:
        """Generate a JSON report.

        Args:
            counts: Final session counters.
            events: Events delivered during the session.
            duration_ms: Session duration in milliseconds.
            error: Session-level error message, if any.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": "passed" if counts.all_passed and error is None else "failed",
            "summary": {
                "total": counts.total,
                "passed": counts.success,
                "failed": counts.failure,
                "errors": counts.error,
                "duration_ms": duration_ms,
                "message": format_summary(counts),
            },
            "events": [
                {
                    "subject": e.fully_qualified_name,
                    "property": e.selector_name,
                    "status": e.status.value,
                    "cause": str(e.throwable) if e.throwable is not None else None,
                }
                for e in events
            ],
            "error": error,
        }

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path
