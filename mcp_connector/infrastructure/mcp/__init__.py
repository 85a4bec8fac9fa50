# MCP (Model Context Protocol) Infrastructure
#
# This module provides:
# - ServerProxy, a long-lived per-server proxy that speaks MCP upstream
# - ServerProxyLocator, which maps a server ID to its one proxy instance
#
# The connection use cases only ever talk to a proxy through its
# HTTP-like request/response surface.
