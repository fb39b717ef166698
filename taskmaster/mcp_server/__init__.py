"""MCP server package: tool registry, dispatcher and Streamable HTTP app."""
