"""Antideriv — Integral Expert MCP Server.

Run:   uv run python -m antideriv.server
Test:  uv run mcp dev antideriv/server.py
"""

from mcp.server.fastmcp import FastMCP
from antideriv.tools.integral import integral_tool

mcp = FastMCP(
    name="Antideriv-Integral",
    instructions=(
        "You integrate single-variable polynomials with the power rule. "
        "ALWAYS use integral_tool for antiderivatives — never integrate in your head. "
        "Check the 'verified' flag; results for non-monomial terms are best-effort. Be concise."
    ),
)

mcp.tool()(integral_tool)

if __name__ == "__main__":
    mcp.run()
