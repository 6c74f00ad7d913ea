"""Check run request models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from status_check.models.diagnostic import Annotation


class CheckStatus(enum.Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CheckConclusion(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class PublishOutcome(enum.Enum):
    PUBLISHED = "published"
    FORBIDDEN = "forbidden"


@dataclass
class CheckRunRequest:
    name: str
    head_sha: str
    conclusion: CheckConclusion
    title: str
    summary: str
    status: CheckStatus = CheckStatus.COMPLETED
    annotations: list[Annotation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Keyword arguments for the create-check-run call."""
        return {
            "name": self.name,
            "head_sha": self.head_sha,
            "status": self.status.value,
            "conclusion": self.conclusion.value,
            "output": {
                "title": self.title,
                "summary": self.summary,
                "annotations": [a.to_dict() for a in self.annotations],
            },
        }
