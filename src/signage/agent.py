"""
Sig - The Xibo Signage Assistant Agent

Main agent implementation using the Claude Agent SDK.
Provides natural language access to the Xibo CMS REST API.
"""

import logging

from claude_agent_sdk import (
    ClaudeSDKClient,
    ClaudeAgentOptions,
    create_sdk_mcp_server,
    AssistantMessage,
    TextBlock,
    ResultMessage,
)

from .client import init_client
from .config import CmsConfig
from .tools import ALL_TOOLS

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"
MCP_SERVER_NAME = "xibo"


# System prompt for Sig
SYSTEM_PROMPT = """You are Sig, an expert Xibo digital signage assistant. You help users run their Xibo CMS: displays, layouts, campaigns, schedules and the media library, through natural language.

## Your Capabilities

### Displays & Display Groups
- Find displays by name, tag, status or folder
- Authorise displays, set their default layout, request screenshots, wake them over LAN
- Create static or dynamic display groups and manage their members
- Copy display groups
- Tell a display group to collect from the CMS now
- Manage display profiles and sync groups (video walls)

### Layouts, Templates & Campaigns
- Search, create, copy and edit layouts
- Check out, publish, discard drafts, retire and unretire layouts
- Save layouts as templates
- Add, move and delete regions on a draft layout
- Build playlists, add library media or module widgets to them, and edit widget options
- Build campaigns and order the layouts inside them

### Scheduling
- List events in a date range
- Schedule campaigns, layouts or commands on display groups, with recurrence and day parts
- Manage day parts and player commands

### Library
- Search media, upload files from the upload directory, delete media
- Manage data sets: columns and rows that feed data widgets

### Administration
- Users, user groups and group membership
- Tags, folders (with a tree view), resolutions, notifications
- Proof of play statistics and display disconnection history
- CMS version and clock

## Guidelines

1. **Always confirm before destructive operations** - Ask before deleting, retiring or discarding anything
2. **Look things up first** - Resolve names to IDs with a get_* tool before editing
3. **Dates** - The CMS expects "Y-m-d H:i:s"; check get_cms_time when "now" matters
4. **Read the result** - Every tool answers with {success, data, message}; on failure explain the message and, if there is one, the HTTP status
5. **Format responses clearly** - Present lists as short tables or bullet points

## Examples

**Finding a display:**
"Is the lobby screen online?"
→ Use get_displays with display: "lobby" and report loggedIn / lastAccessed

**Publishing:**
"Publish my Welcome layout"
→ Find it with get_layouts (layout: "Welcome"), then publish_layout with publishNow: true

**Scheduling:**
"Show the Summer campaign on all lobby screens next week"
→ get_campaigns, get_display_groups, then add_schedule with eventTypeId 5 (campaign)
"""


def get_tool_names() -> list[str]:
    """Get the list of allowed tool names for the MCP server."""
    return [f"mcp__{MCP_SERVER_NAME}__{tool.name}" for tool in ALL_TOOLS]


def create_sig_options(
    config: CmsConfig,
    model: str = DEFAULT_MODEL,
) -> ClaudeAgentOptions:
    """
    Create ClaudeAgentOptions configured for Sig.

    Args:
        config: CMS connection settings
        model: Claude model to use

    Returns:
        Configured ClaudeAgentOptions
    """
    # Initialize the Xibo client used by every tool
    init_client(config)

    xibo_server = create_sdk_mcp_server(
        name=MCP_SERVER_NAME,
        version="1.0.0",
        tools=ALL_TOOLS,
    )

    logger.info(f"Registered {len(ALL_TOOLS)} Xibo tools for {config.cms_url}")

    return ClaudeAgentOptions(
        system_prompt=SYSTEM_PROMPT,
        mcp_servers={MCP_SERVER_NAME: xibo_server},
        allowed_tools=get_tool_names(),
        model=model,
    )


async def run_sig_interactive(config: CmsConfig, model: str = DEFAULT_MODEL) -> None:
    """
    Run Sig in interactive mode with continuous conversation.

    Args:
        config: CMS connection settings
        model: Claude model to use
    """
    options = create_sig_options(config, model)

    print("=" * 60)
    print("  Sig - The Xibo Signage Assistant")
    print("=" * 60)
    print(f"\nConnected to {config.cms_url}")
    print("Type 'exit' or 'quit' to end the session.")
    print("Type 'help' for a list of capabilities.\n")

    async with ClaudeSDKClient(options=options) as client:
        while True:
            try:
                user_input = input("\nYou: ").strip()

                if not user_input:
                    continue

                if user_input.lower() in ("exit", "quit"):
                    print("\nGoodbye!")
                    break

                if user_input.lower() == "help":
                    print(_get_help_text())
                    continue

                await client.query(user_input)

                print("\nSig: ", end="", flush=True)
                async for message in client.receive_response():
                    if isinstance(message, AssistantMessage):
                        for block in message.content:
                            if isinstance(block, TextBlock):
                                print(block.text, end="", flush=True)
                    elif isinstance(message, ResultMessage):
                        if message.is_error:
                            print(f"\n[Error: {message.result}]")
                print()

            except (KeyboardInterrupt, EOFError):
                print("\n\nSession interrupted. Goodbye!")
                break
            except Exception as e:
                logger.exception("Query failed")
                print(f"\n[Error: {e}]")


async def query_sig(prompt: str, config: CmsConfig, model: str = DEFAULT_MODEL) -> str:
    """
    Send a single query to Sig and return the response.

    Args:
        prompt: The user's question or command
        config: CMS connection settings
        model: Claude model to use

    Returns:
        Sig's response as a string
    """
    options = create_sig_options(config, model)

    response_parts: list[str] = []

    async with ClaudeSDKClient(options=options) as client:
        await client.query(prompt)

        async for message in client.receive_response():
            if isinstance(message, AssistantMessage):
                for block in message.content:
                    if isinstance(block, TextBlock):
                        response_parts.append(block.text)

    return "".join(response_parts)


def _get_help_text() -> str:
    """Return help text for interactive mode."""
    return """
Sig can help you with:

DISPLAYS
  "Which displays are offline?"
  "Authorise the display called Reception"
  "Take a screenshot of display 12"

LAYOUTS & CAMPAIGNS
  "List draft layouts"
  "Copy the Welcome layout as Welcome Winter"
  "Add layout 40 to the Summer campaign"

SCHEDULING
  "What is scheduled on the Lobby group tomorrow?"
  "Schedule campaign 7 on display group 3 every weekday 9am-5pm"

LIBRARY
  "Upload promo.mp4 and tag it promo"
  "Find images larger than 5MB"

ADMIN
  "Show the folder tree"
  "Create the tag seasonal"
  "How long was display 12 disconnected last week?"

Type your question in natural language and I'll help!
"""
