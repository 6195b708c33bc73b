"""Common CLI utilities, decorators, and helpers."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

import click

from brizo.core.config import Config, Profile, get_api_key
from brizo.core.exceptions import (
    FORBIDDEN_CODE,
    BrizoError,
    ConfigurationError,
    ErrorKind,
)
from brizo.core.logging import setup_logging
from brizo.core.output import OutputFormat, print_error
from brizo.sdk import Brizo

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")


# =============================================================================
# Exit Codes
# =============================================================================


class ExitCode:
    """Standard exit codes."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 2
    NETWORK_ERROR = 3
    PERMISSION_ERROR = 4
    USER_CANCELLED = 5


def exit_code_for(error: BrizoError) -> int:
    """Pick the process exit code for an SDK error."""
    if error.kind is ErrorKind.AUTHENTICATION:
        return ExitCode.AUTH_ERROR
    if error.kind in (ErrorKind.NETWORK, ErrorKind.TIMEOUT):
        return ExitCode.NETWORK_ERROR
    if error.kind is ErrorKind.LIMIT_EXCEEDED or error.code == FORBIDDEN_CODE:
        return ExitCode.PERMISSION_ERROR
    return ExitCode.GENERAL_ERROR


# =============================================================================
# Context Object
# =============================================================================


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[Config] = None
        self.sdk: Optional[Brizo] = None
        self.profile_name: Optional[str] = None
        self.output_format: OutputFormat = OutputFormat.TABLE
        self.quiet: bool = False
        self.verbose: bool = False

    @property
    def profile(self) -> Profile:
        """Active profile settings.

        Raises:
            ConfigurationError: If the selected profile does not exist.
        """
        if self.config is None:
            self.config = Config.load()
        try:
            return self.config.get_profile(self.profile_name)
        except ConfigurationError as e:
            raise ConfigurationError(
                f"{e.message}. Run 'brizo config init' to create it.",
                field="profile",
                value=self.profile_name,
            ) from e

    def get_sdk(self) -> Brizo:
        """Get or create the API client for the active profile.

        Raises:
            ConfigurationError: If no API key is set.
        """
        if self.sdk is not None:
            return self.sdk

        api_key = get_api_key()
        if not api_key:
            raise ConfigurationError("No API key. Set the BRIZO_API_KEY environment variable.")

        profile = self.profile
        self.sdk = Brizo(api_key, base_url=profile.base_url, timeout=profile.timeout)
        return self.sdk

    def run(self, operation: Callable[[Brizo], Awaitable[T]]) -> T:
        """Run an async SDK operation to completion.

        Args:
            operation: Coroutine function taking the client.

        Returns:
            The operation's result.
        """
        sdk = self.get_sdk()

        async def runner() -> T:
            try:
                return await operation(sdk)
            finally:
                await sdk.aclose()

        return asyncio.run(runner())


pass_context = click.make_pass_decorator(Context, ensure=True)


# =============================================================================
# Global Options
# =============================================================================


def global_options(f: F) -> F:
    """Add global options to a command."""

    @click.option(
        "--profile",
        "-p",
        envvar="BRIZO_PROFILE",
        help="Config profile to use",
    )
    @click.option(
        "--output",
        "-o",
        "output_format",
        type=click.Choice(["json", "table"]),
        default=None,
        help="Output format",
    )
    @click.option(
        "--quiet",
        "-q",
        is_flag=True,
        help="Minimal output (IDs only)",
    )
    @click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output",
    )
    @pass_context
    @wraps(f)
    def wrapper(
        ctx: Context,
        profile: Optional[str],
        output_format: Optional[str],
        quiet: bool,
        verbose: bool,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        ctx.profile_name = profile
        ctx.quiet = quiet
        ctx.verbose = verbose
        setup_logging(quiet=quiet, verbose=verbose)

        try:
            ctx.config = Config.load()
        except ConfigurationError as e:
            print_error(str(e))
            sys.exit(ExitCode.GENERAL_ERROR)

        ctx.output_format = OutputFormat.from_string(output_format or ctx.config.output_format)
        return f(ctx, *args, **kwargs)

    return wrapper  # type: ignore


# =============================================================================
# Error Handling
# =============================================================================


def handle_errors(f: F) -> F:
    """Print SDK and config errors and exit with a matching code."""

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except BrizoError as e:
            print_error(str(e))
            if e.retry_after is not None:
                print_error(f"Retry after {e.retry_after}s")
            sys.exit(exit_code_for(e))
        except ConfigurationError as e:
            print_error(str(e))
            sys.exit(ExitCode.GENERAL_ERROR)
        except KeyboardInterrupt:
            print_error("Cancelled")
            sys.exit(ExitCode.USER_CANCELLED)

    return wrapper  # type: ignore


def confirm_option(message: str) -> Callable[[F], F]:
    """Require confirmation for destructive operations unless --yes is given."""

    def decorator(f: F) -> F:
        @click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
        @wraps(f)
        def wrapper(*args: Any, yes: bool, **kwargs: Any) -> Any:
            if not yes:
                click.confirm(message, abort=True)
            return f(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
