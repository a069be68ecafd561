"""Value helpers shared by shapes: formatted text and thumbnails."""

from dataclasses import dataclass
from typing import Any


class Text:
    """Formatted text: ``{"simpleText": ...}``, ``{"runs": [...]}`` or ``{"content": ...}``."""

    __slots__ = ("text", "runs")

    def __init__(self, data: Any = None):
        self.runs: list[str] = []
        if isinstance(data, str):
            self.text: str | None = data
        elif not isinstance(data, dict):
            self.text = None
        elif "simpleText" in data:
            self.text = data["simpleText"]
        elif isinstance(data.get("runs"), list):
            self.runs = [run.get("text", "") for run in data["runs"] if isinstance(run, dict)]
            self.text = "".join(self.runs)
        else:
            self.text = data.get("content")

    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return self.text or ""

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


@dataclass(frozen=True)
class Thumbnail:
    url: str
    width: int = 0
    height: int = 0

    @classmethod
    def from_response(cls, data: Any) -> list["Thumbnail"]:
        """Thumbnails from ``{"thumbnails": [...]}``, widest first."""
        if not isinstance(data, dict):
            return []
        thumbnails = [
            cls(url=t["url"], width=t.get("width", 0), height=t.get("height", 0))
            for t in data.get("thumbnails") or []
            if isinstance(t, dict) and t.get("url")
        ]
        return sorted(thumbnails, key=lambda t: t.width, reverse=True)
