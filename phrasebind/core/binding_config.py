#!/usr/bin/env python3
"""Binding configuration variants and normalization.

Enhancer options come in three explicit shapes:

    NoConfig()                         -> whole phrase tree, no overrides
    ScopeOnly("settings")              -> one top-level subtree
    FullConfig(scope=..., own_phrases) -> subtree plus instance overrides

``classify`` maps the loose values accepted by ``translate()`` (None, a
string, a mapping) onto one of these once; ``BindingConfig.from_variant`` is
the single builder of the canonical configuration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from phrasebind.core.logging_utils import setup_logger

__all__ = [
    "BindingConfig",
    "BindingOptions",
    "FullConfig",
    "NoConfig",
    "ScopeOnly",
    "classify",
    "normalize",
]

logger = setup_logger(__name__)


@dataclass(frozen=True)
class NoConfig:
    """No options: bind the whole phrase tree."""


@dataclass(frozen=True)
class ScopeOnly:
    """Bind one top-level phrase subtree."""

    scope: str


@dataclass(frozen=True)
class FullConfig:
    """Bind a subtree and overlay instance-local phrases."""

    scope: str = ""
    own_phrases: Mapping[str, Any] = field(default_factory=dict)


ConfigVariant = Union[NoConfig, ScopeOnly, FullConfig]


class BindingOptions(BaseModel):
    """Mapping-form options, accepting the camelCase keys of polyglot bindings."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    scope: str = Field(default="", alias="polyglotScope")
    own_phrases: dict[str, Any] = Field(default_factory=dict, alias="ownPhrases")


@dataclass(frozen=True)
class BindingConfig:
    """Canonical configuration of one enhancer, fixed for its lifetime."""

    scope: str = ""
    own_phrases: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_variant(cls, variant: ConfigVariant) -> "BindingConfig":
        """Build the canonical configuration from an options variant."""
        if isinstance(variant, ScopeOnly):
            return cls(scope=variant.scope)
        if isinstance(variant, FullConfig):
            # Frozen copy: the reference is compared by identity on every update
            return cls(
                scope=variant.scope,
                own_phrases=MappingProxyType(dict(variant.own_phrases or {})),
            )
        return cls()


def classify(options: Any) -> ConfigVariant:
    """Map loose enhancer options onto a configuration variant.

    Unrecognized shapes degrade to NoConfig with a warning.

    Args:
        options: None, a scope string, an options mapping, or a variant

    Returns:
        Configuration variant
    """
    if isinstance(options, (NoConfig, ScopeOnly, FullConfig)):
        return options
    if options is None:
        return NoConfig()
    if isinstance(options, str):
        return ScopeOnly(options) if options else NoConfig()
    if isinstance(options, Mapping):
        try:
            parsed = BindingOptions.model_validate(dict(options))
        except ValidationError as e:
            logger.warning(f"Invalid translate() options {dict(options)!r}, using defaults: {e}")
            return NoConfig()
        return FullConfig(scope=parsed.scope, own_phrases=parsed.own_phrases)

    logger.warning(f"Unsupported translate() options of type {type(options).__name__}, using defaults")
    return NoConfig()


def normalize(options: Any = None) -> BindingConfig:
    """Normalize enhancer options into a BindingConfig."""
    return BindingConfig.from_variant(classify(options))
