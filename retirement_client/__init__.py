"""Client-side retirement calculation request pipeline."""

from retirement_client.domain.submission import SubmissionStateMachine

__all__ = ["SubmissionStateMachine"]
