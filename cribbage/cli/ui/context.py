"""Shared CLI context: paths, prompt style and the active configuration."""

from dataclasses import dataclass, field
from pathlib import Path

from questionary import Style

from cribbage.shared.config import Config

# Felt green and card-table colours
STYLE = Style(
    [
        ("qmark", "fg:#2e8b57 bold"),
        ("question", "bold"),
        ("answer", "fg:#d4af37 bold"),
        ("pointer", "fg:#2e8b57 bold"),
        ("highlighted", "fg:#2e8b57 bold"),
        ("selected", "fg:#d4af37"),
        ("separator", "fg:#6C6C6C"),
        ("instruction", "italic"),
    ]
)


@dataclass
class CliContext:
    """Mutable CLI state; the settings menu swaps `config` in place."""

    base_dir: Path
    config_dir: Path
    style: Style
    config: Config = field(default_factory=Config.default)

    @classmethod
    def from_project_root(cls, base_dir: Path | None = None) -> "CliContext":
        base_dir = (base_dir or Path(__file__).resolve().parents[3]).resolve()
        return cls(base_dir=base_dir, config_dir=base_dir / "config", style=STYLE)
