"""CLI Commands"""

import os

from moodcode.config import Config, ENV_LOG_DIR, ENV_MODEL, ENV_PROVIDER, get_config_path
from moodcode.cli.errorlog import resolve_log_dir
from moodcode.output import bold, dim, info

API_KEY_VARS = {
    "groq": "GROQ_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
}


def display_config(config: Config) -> int:
    """Display the effective configuration."""
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .moodcoderc found)")

    overrides = [name for name in (ENV_PROVIDER, ENV_MODEL, ENV_LOG_DIR) if os.environ.get(name)]
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name in overrides:
            print(f"    {name}={os.environ[name]}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    provider:           {info(config.provider)}")
    print(f"    model:              {info(config.model or 'default')}")
    print(f"    max_subject_length: {info(str(config.max_subject_length))}")
    print(f"    max_diff_chars:     {info(str(config.max_diff_chars))}")
    print(f"    temperature:        {info(str(config.temperature))}")
    print(f"    max_tokens:         {info(str(config.max_tokens))}")
    print(f"    log_dir:            {info(str(resolve_log_dir(config.log_dir)))}")

    key_var = API_KEY_VARS.get(config.provider)
    if key_var:
        state = "set" if os.environ.get(key_var) else "NOT SET"
        print(f"\n  {dim('API key:')} {key_var} {state}")

    print(f"\n  {dim('Config locations:')}")
    print("    Local:  .moodcoderc (in current directory)")
    print("    Global: ~/.moodcoderc\n")

    return 0
