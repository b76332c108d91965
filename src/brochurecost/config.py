from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from types import SimpleNamespace
from typing import Mapping, Optional

from .price_tables import DEFAULT_SCHEDULE, PriceSchedule, load_tier_table


_BOOLEAN_TRUE = {"1", "true", "yes", "on"}
SUPPORTED_LANGUAGES = ("de", "en")
DEFAULT_LANGUAGE = "de"


@dataclass(frozen=True)
class Config:
    """Runtime configuration assembled from environment variables and CLI options."""

    base_dir: Path
    output_dir: Path
    mono_tiers_path: Optional[Path] = None
    color_tiers_path: Optional[Path] = None
    language: str = DEFAULT_LANGUAGE
    verbose: bool = False

    def price_schedule(self) -> PriceSchedule:
        """Default schedule with any configured tier tables swapped in."""

        schedule = DEFAULT_SCHEDULE
        if self.mono_tiers_path is not None:
            schedule = replace(schedule, mono_tiers=load_tier_table(self.mono_tiers_path))
        if self.color_tiers_path is not None:
            schedule = replace(schedule, color_tiers=load_tier_table(self.color_tiers_path))
        return schedule


def _to_path(value: object | None) -> Optional[Path]:
    if value is None:
        return None
    if isinstance(value, Path):
        return value.expanduser().resolve()
    text = str(value).strip()
    if not text:
        return None
    return Path(text).expanduser().resolve()


def _flag(value: object | None) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _BOOLEAN_TRUE


def _language(value: object | None) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip().lower()
    return text if text in SUPPORTED_LANGUAGES else None


def _namespace(cli_args: object | None) -> SimpleNamespace:
    if cli_args is None:
        return SimpleNamespace()
    if isinstance(cli_args, SimpleNamespace):
        return cli_args
    if hasattr(cli_args, "__dict__"):
        return SimpleNamespace(**{k: v for k, v in vars(cli_args).items()})
    return SimpleNamespace()


def load_config(env: Mapping[str, str], cli_args: object | None = None) -> Config:
    """Build a runtime :class:`Config` from environment variables and CLI options.

    CLI options win over environment variables; unknown languages fall back
    to the default.
    """

    base_dir = Path(__file__).resolve().parents[2]
    default_output_dir = (base_dir / "outputs").resolve()

    output_dir = _to_path(env.get("BROCHURE_OUTPUT_DIR")) or default_output_dir
    mono_tiers_path = _to_path(env.get("BROCHURE_MONO_TIERS"))
    color_tiers_path = _to_path(env.get("BROCHURE_COLOR_TIERS"))
    language = _language(env.get("BROCHURE_LANGUAGE")) or DEFAULT_LANGUAGE
    verbose = _flag(env.get("BROCHURE_VERBOSE"))

    cli_ns = _namespace(cli_args)
    if getattr(cli_ns, "output_dir", None):
        output_dir = _to_path(cli_ns.output_dir) or output_dir
    if getattr(cli_ns, "mono_tiers", None):
        mono_tiers_path = _to_path(cli_ns.mono_tiers)
    if getattr(cli_ns, "color_tiers", None):
        color_tiers_path = _to_path(cli_ns.color_tiers)
    if getattr(cli_ns, "language", None):
        language = _language(cli_ns.language) or language
    if getattr(cli_ns, "verbose", False):
        verbose = True

    return Config(
        base_dir=base_dir,
        output_dir=output_dir,
        mono_tiers_path=mono_tiers_path,
        color_tiers_path=color_tiers_path,
        language=language,
        verbose=verbose,
    )


__all__ = ["Config", "SUPPORTED_LANGUAGES", "load_config"]
