# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP translation layer between MCP clients and core/.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments or talk HTTP (core/dispatcher.py and
#     core/client.py do)
#   - They do NOT decide which API key wins (core/credentials.py does)
#
# They only pick up the caller's Authorization header, log the call, and
# hand back the dispatcher's text as the tool result.
# =============================================================================
