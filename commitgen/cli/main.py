"""CLI Main Entry Point"""

import dataclasses
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from commitgen.config import Config, load_config, apply_env_overrides
from commitgen.generator import MessageGenerator, MAX_ATTEMPTS
from commitgen.git import GitAnalyzer, GitError
from commitgen.llm import get_client, LLMError
from commitgen.output import print_success, print_error, print_warning, colorize_commit_type, dim

from commitgen.cli.args import parse_args
from commitgen.cli.commands import display_config, run_install_hook


def _resolve_config(args) -> Config:
    """Precedence: CLI args > environment variables > config file."""
    config = apply_env_overrides(dataclasses.replace(load_config()))
    if args.provider:
        config.provider = args.provider
    if args.model:
        config.model = args.model
    return config


def _print_usage_error() -> None:
    print_error("Commit message file path not provided.")
    print(dim("  This command should be run as a Git hook (commitgen --install-hook)."), file=sys.stderr)
    print(dim("  Typical arguments: <commit-msg-file> [commit-source] [commit-sha]"), file=sys.stderr)


def _read_staged_diff() -> str | None:
    """Return the staged diff, '' when nothing is staged, None on git failure."""
    try:
        return GitAnalyzer().get_staged_diff()
    except GitError as e:
        print_error(f"Error fetching Git diff: {e}")
        return None


def _write_or_keep(path: Path, message: str | None) -> None:
    """Write the generated message, or leave whatever git put in the file."""
    if message:
        path.write_text(message, encoding='utf-8')
        print_success(f"Commit message generated successfully: {colorize_commit_type(message)}")
        return

    existing = path.read_text(encoding='utf-8').strip() if path.exists() else ""
    if existing:
        print_warning("Generating commit message failed. Using existing message.")
    else:
        print_warning("Generating commit message failed. Please write the commit message manually.")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the hook."""
    # .env lives in the repository the hook runs in
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)

    if args.install_hook:
        return run_install_hook()

    config = _resolve_config(args)
    if args.display_config:
        return display_config(config)

    try:
        client = get_client(provider=config.provider, model=config.model, params=config.generation_params())
    except LLMError as e:
        print_error(str(e))
        return 1

    if not args.commit_msg_file:
        _print_usage_error()
        return 1

    diff = _read_staged_diff()
    if diff is None:
        return 1
    if not diff:
        print("No staged changes detected.")
        return 0

    # Never block the commit once there is something to commit
    try:
        message = MessageGenerator(client, verbose=args.verbose).generate(diff, MAX_ATTEMPTS)
        _write_or_keep(Path(args.commit_msg_file), message)
    except Exception as e:
        print_error(f"Failed to generate commit message: {e}")
    return 0
