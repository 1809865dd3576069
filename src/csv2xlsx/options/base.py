"""Base classes for parser and renderer options.

This module defines the foundation classes for the option objects used by the
CSV ingestion pipeline and the spreadsheet renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    Options are immutable and supplied once per call; this mixin adds the
    ability to derive modified copies, e.g. when CLI flags override values
    loaded from a configuration file.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build options from a mapping, ignoring keys that are not fields.

        Parameters
        ----------
        values : Mapping[str, Any]
            Candidate field values, typically a loaded configuration section

        Returns
        -------
        Self
            Options instance populated from the known keys

        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Notes
    -----
    Subclasses define format-specific parsing options as frozen dataclass fields
    and validate them in ``__post_init__``.

    """


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses define output-specific rendering options as frozen dataclass fields
    and validate them in ``__post_init__``.

    """
