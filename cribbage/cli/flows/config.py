"""Settings: pick the active YAML configuration."""

import logging

from cribbage.cli.ui import prompts, ui
from cribbage.cli.ui.context import CliContext
from cribbage.shared.config import Config
from cribbage.shared.config_loader import available_configs, load_config


def select_config(ctx: CliContext) -> Config | None:
    """
    Let the user choose one of the configs in ``ctx.config_dir`` and activate it.

    Returns:
        The loaded Config, or None if there is nothing to choose or the user cancels
    """
    names = available_configs(ctx.config_dir)
    if not names:
        ui.error(f"No config files found in {ctx.config_dir}/")
        return None

    selected = prompts.select(ctx, "Select configuration:", choices=names + ["Cancel"])
    if selected is None or selected == "Cancel":
        return None

    config = load_config(ctx.config_dir / f"{selected}.yaml")
    apply_config(ctx, config)
    ui.info(f"Using configuration '{config.system.config_name}'")
    return config


def apply_config(ctx: CliContext, config: Config) -> None:
    ctx.config = config
    logging.getLogger().setLevel(config.system.log_level)


def settings(ctx: CliContext) -> None:
    ui.header("Settings")
    current = ctx.config
    ui.lines(
        [
            f"Active config:  {current.system.config_name}",
            f"Suggestions:    {current.solver.top_n}",
            f"Workers:        {current.solver.num_workers}",
            f"Practice seat:  {'dealer' if current.practice.is_dealer else 'pone'}",
        ]
    )
    select_config(ctx)
