"""NormalizeConfig: immutable parameters for tree normalization.

NormalizeConfig is a frozen (immutable) dataclass bundling the two knobs
the normalizer exposes: whether uploaded files count as values at all, and
which FileProbe decides what an uploaded file is.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from formpath.probes import AttributeFileProbe
from formpath.protocols import FileProbe

__all__ = ["NormalizeConfig"]


@dataclass(frozen=True, slots=True)
class NormalizeConfig:
    """Immutable configuration for ``normalize_with`` and change detection.

    Attributes:
        accept_file: When False, every file-like value is treated as empty,
            whatever its size.  Default True (only zero-size files are empty).
        file_probe: Capability that recognizes file-like values and reports
            their size.  Defaults to ``AttributeFileProbe()``.
    """

    accept_file: bool = True
    file_probe: FileProbe = field(default_factory=AttributeFileProbe)

    def __post_init__(self) -> None:
        if not isinstance(self.accept_file, bool):
            msg = f"accept_file must be a bool, got {type(self.accept_file).__name__}"
            raise ValueError(msg)
        if not isinstance(self.file_probe, FileProbe):
            msg = (
                "file_probe must provide file_size(value) -> int | None, "
                f"got {type(self.file_probe).__name__}"
            )
            raise ValueError(msg)
