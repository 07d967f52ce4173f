"""Models for the kubeconfig view emitted by ``kubectl config view -o json``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContextDetails(BaseModel):
    """The cluster/user pairing a context points at."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    cluster: str = Field(description="Cluster name")
    user: str = Field(description="User (auth info) name")


class NamedContext(BaseModel):
    """A named context from the kubeconfig."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(description="Context name")
    context: ContextDetails

    @property
    def cluster(self) -> str:
        """Cluster the context targets."""
        return self.context.cluster

    @property
    def user(self) -> str:
        """User the context authenticates as."""
        return self.context.user


class ConfigSnapshot(BaseModel):
    """Contexts and current context as read at one point in time.

    Built once per run and never mutated. ``current_context`` may match no
    context at all (for example an empty string on a fresh kubeconfig).
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    contexts: tuple[NamedContext, ...]
    current_context: str = Field(alias="current-context")

    @field_validator("contexts", mode="before")
    @classmethod
    def validate_contexts(cls, v: Any) -> Any:
        """kubectl prints ``null`` for a kubeconfig with no contexts."""
        if v is None:
            return ()
        return v

    @classmethod
    def from_json(cls, data: bytes | str) -> ConfigSnapshot:
        """Decode a kubeconfig JSON view.

        Raises:
            pydantic.ValidationError: On malformed JSON or missing fields.
        """
        return cls.model_validate_json(data)

    @property
    def names(self) -> list[str]:
        """Context names in snapshot order."""
        return [ctx.name for ctx in self.contexts]

    @property
    def current_index(self) -> int | None:
        """Index of the current context, or None if no context matches."""
        for i, ctx in enumerate(self.contexts):
            if ctx.name == self.current_context:
                return i
        return None
