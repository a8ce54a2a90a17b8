"""Documents generated for a new project."""

from __future__ import annotations

from pathlib import Path

from .template import TemplateRenderer

__all__ = ["build_readme", "build_usage", "write_readme"]


README_TEMPLATE = """# {{ name }}

![License: MIT](https://img.shields.io/badge/License-MIT-blue.svg)
![TypeScript](https://img.shields.io/badge/TypeScript-5.0+-3178C6)

A custom MCP (Model Context Protocol) server built using FastMCP.

## 📖 Connecting to the Server

### Connecting from Cursor

To connect to your MCP server from Cursor:

1. Open Cursor Settings
2. Select "MCP" section
3. Click "Add new global MCP server"
4. Use the following JSON:

```json
{
  "mcpServers": {
    "{{ name }}": {
      "command": "npx",
      "args": [
        "{{ invocation_path }}"
      ],
      "env": {
        "ENVIRONMENT_VARIABLE": "value"
      }
    },
    "{{ name }}-http": {
      "url": "http://localhost:3001/sse"
    }
  }
}
```

### Connecting from Claude Code

To connect to your MCP server from Claude Code:

run `claude mcp add-json {{ name }} '{ "command": "npx", "args": [ "{{ invocation_path }}" ], "env": { "ENVIRONMENT_VARIABLE": "value" } }'`

### Using mcp.json with Cursor

For a more portable configuration, create an `.cursor/mcp.json` file in your project's root directory.

## 🔧 Environment Variables

| Variable | Description | Default |
|----------|-------------|---------|
| PORT     | HTTP server port | 3001 |
| HOST     | HTTP server host | 0.0.0.0 |

## 🛠️ Adding Custom Tools and Resources

When adding custom tools, resources, or prompts to your FastMCP server:

### Tools

```typescript
server.addTool({
  name: "hello_world",
  description: "A simple hello world tool",
  parameters: z.object({
    name: z.string().describe("Name to greet")
  }),
  execute: async (params) => {
    return `Hello, ${params.name}!`;
  }
});
```

### Resources

```typescript
server.addResourceTemplate({
  uriTemplate: "example://{id}",
  name: "Example Resource",
  mimeType: "text/plain",
  arguments: [
    {
      name: "id",
      description: "Resource ID",
      required: true,
    },
  ],
  async load({ id }) {
    return {
      text: `This is an example resource with ID: ${id}`
    };
  }
});
```

## 📚 Documentation

For more information about FastMCP, visit [FastMCP GitHub Repository](https://github.com/punkpeye/fastmcp).

For more information about the Model Context Protocol, visit the [MCP Documentation](https://modelcontextprotocol.io/introduction).

## 📄 License

This project is licensed under the MIT License.
"""

USAGE_TEMPLATE = """You can now use the server in an MCP client with JSON like this:
  {
    "{{ name }}": {
      "command": "npx",
      "args": [
        "{{ invocation_path }}"
      ]
    }
  }

Or with claude code you can add it with:
  claude mcp add {{ name }} -- npx {{ invocation_path }}
"""


def _context(project_name: str, invocation_path: str | Path) -> dict[str, str]:
    return {"name": project_name, "invocation_path": str(invocation_path)}


def build_readme(
    project_name: str,
    invocation_path: str | Path,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the README of a new project.

    ``invocation_path`` is embedded verbatim into the client configuration
    examples so they can be pasted as they are.
    """

    renderer = renderer or TemplateRenderer()
    return renderer.render_string(README_TEMPLATE, _context(project_name, invocation_path))


def build_usage(
    project_name: str,
    invocation_path: str | Path,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the client configuration hint shown once the project is ready."""

    renderer = renderer or TemplateRenderer()
    return renderer.render_string(USAGE_TEMPLATE, _context(project_name, invocation_path))


def write_readme(text: str, directory: str | Path, filename: str = "README.md") -> Path:
    path = Path(directory) / filename
    path.write_text(text, encoding="utf-8")
    return path
