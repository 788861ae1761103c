# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-agnostic logic for the Interzoid MCP server: the tool catalog,
# credential resolution, argument validation and dispatch, and the HTTP
# request executor.
#
# Nothing in this package imports FastMCP.  The tools/ layer wraps it; tests
# can drive the Dispatcher directly with a mocked HTTP transport.
# =============================================================================
