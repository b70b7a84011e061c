"""Entry point: ``python -m todoist_mcp`` or the ``todoist-mcp`` script.

Exit codes: 0 after a graceful shutdown (SIGINT/SIGTERM or client disconnect),
1 when the API key is missing, the startup health check fails, or an uncaught
fault reaches the event loop.
"""

import asyncio
import contextlib
import logging
import signal
import sys
from typing import Any

from .client.todoist_api import TodoistApiClient
from .core.config import Settings, load_settings, validate_api_key
from .core.logging_config import setup_logging
from .server.server import create_mcp_server
from .tools import ToolDispatcher
from .utils.errors import ConfigurationError

logger = logging.getLogger("todoist_mcp")


async def serve(settings: Settings) -> int:
    """Check connectivity, then serve MCP on stdio until shut down.

    Returns:
        Process exit code
    """
    loop = asyncio.get_running_loop()
    main_task = asyncio.current_task()
    faults: list[dict[str, Any]] = []

    def _on_loop_exception(_loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        logger.error(
            f"Unhandled exception in event loop: {context.get('message')}",
            exc_info=context.get("exception"),
        )
        faults.append(context)
        if main_task is not None:
            main_task.cancel()

    loop.set_exception_handler(_on_loop_exception)

    async with TodoistApiClient(settings, logger=logging.getLogger("todoist_mcp.client")) as client:
        logger.info("Testing Todoist API connection...")
        if not await client.health_check():
            logger.error("Failed to connect to Todoist API. Please check your API key.")
            return 1
        logger.info("Successfully connected to Todoist API")

        server = create_mcp_server(ToolDispatcher(client))
        logger.info(f"Available tools: {len(server.tools)}")
        logger.debug(f"Registered tools: {', '.join(server.dispatcher.tool_names)}")

        shutdown_requested = False

        def _request_shutdown(sig: signal.Signals) -> None:
            nonlocal shutdown_requested
            logger.info(f"Received {sig.name}, shutting down Todoist MCP Server...")
            shutdown_requested = True
            if main_task is not None:
                main_task.cancel()

        for sig in (signal.SIGINT, signal.SIGTERM):
            # add_signal_handler is unavailable on Windows event loops
            with contextlib.suppress(NotImplementedError):
                loop.add_signal_handler(sig, _request_shutdown, sig)

        try:
            await server.run()
        except asyncio.CancelledError:
            if not shutdown_requested and not faults:
                raise
        finally:
            for sig in (signal.SIGINT, signal.SIGTERM):
                with contextlib.suppress(NotImplementedError):
                    loop.remove_signal_handler(sig)

    return 1 if faults else 0


def main() -> None:
    """Load configuration, set up logging, and run the server."""
    setup_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    setup_logging(level=settings.effective_log_level)
    logger.info("Starting Todoist MCP Server...")

    if not validate_api_key(settings.todoist_api_key or ""):
        logger.warning("API key format appears invalid (expected 40-character hex string)")

    try:
        exit_code = asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Shutting down Todoist MCP Server...")
        exit_code = 0
    except Exception:
        logger.exception("Fatal error in Todoist MCP Server")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
