#!/usr/bin/env python3
"""
MCP Server wrapper for the guide pipeline.

Exposes VS Code guide generation and project classification tools
to an MCP client over stdio.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv
from fastmcp import FastMCP

from guide_pipeline.mcp_server import (
    classify_project_tool,
    generate_vscode_instructions_tool,
)
from guide_pipeline.utils.logging import setup_logging

load_dotenv()
logger = setup_logging()

# Create MCP server
mcp = FastMCP("memory-bank-guides")


@mcp.tool()
async def generate_vscode_instructions(purpose: str) -> dict:
    """
    Generate a VS Code development guide tailored to the project's purpose.
    Returns the Markdown document and the detected project type.
    """
    return await generate_vscode_instructions_tool(purpose)


@mcp.tool()
def classify_project(purpose: str) -> dict:
    """Classify a project purpose as frontend, backend, mobile, fullstack, data, devops or general."""
    return classify_project_tool(purpose)


if __name__ == "__main__":
    logger.info("Starting memory-bank-guides MCP server")
    mcp.run()
