"""Entry point for the prompt-catalogue MCP server."""

from prompt_catalogue.server import create_server


def main() -> None:
    """Run the prompt-catalogue MCP server."""
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
