"""CLI Commands"""

import os
import stat

from commitgen.config import Config, get_config_path, credential_env_var
from commitgen.git import GitAnalyzer, GitError
from commitgen.output import bold, dim, info, success, warning, print_success, print_error

HOOK_NAME = "prepare-commit-msg"
HOOK_MARKER = "# installed by commitgen"

HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
exec commitgen "$@"
"""


def display_config(config: Config) -> int:
    """Display the resolved configuration."""
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .commitgenrc found)")

    env_var = credential_env_var(config.provider)
    credential = success("set") if os.environ.get(env_var) else warning("missing")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    provider:     {info(config.provider)}")
    print(f"    model:        {info(config.model or 'provider default')}")
    print(f"    temperature:  {info(_or_default(config.temperature))}")
    print(f"    max_tokens:   {info(_or_default(config.max_tokens))}")
    print(f"    top_p:        {info(_or_default(config.top_p))}")
    print(f"    credential:   {env_var} {credential}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .commitgenrc (in current directory)")
    print(f"    Global: ~/.commitgenrc\n")

    return 0


def _or_default(value) -> str:
    return "provider default" if value is None else str(value)


def run_install_hook() -> int:
    """Install commitgen as the repository's prepare-commit-msg hook."""
    try:
        hooks_dir = GitAnalyzer().get_hooks_dir()
    except GitError as e:
        print_error(str(e))
        return 1

    hook_path = hooks_dir / HOOK_NAME
    if hook_path.exists() and HOOK_MARKER not in hook_path.read_text(encoding='utf-8', errors='replace'):
        print_error(f"{hook_path} already exists and was not installed by commitgen")
        print(dim("  Remove it or call commitgen from it manually."))
        return 1

    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(HOOK_SCRIPT, encoding='utf-8')
    hook_path.chmod(hook_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    print_success(f"Installed {HOOK_NAME} hook at {hook_path}")
    return 0
