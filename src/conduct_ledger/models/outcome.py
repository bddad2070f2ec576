"""Result of a ledger mutation."""

from pydantic import BaseModel, Field


class LedgerOutcome(BaseModel):
    """Events touched by a mutation and the resulting score of every affected student."""

    event_ids: list[str] = Field(default_factory=list)
    scores: dict[str, int] = Field(default_factory=dict)
    unresolved_owners: list[str] = Field(default_factory=list)
    notify_parent: bool = False

    @property
    def affected_count(self) -> int:
        return len(self.event_ids)
