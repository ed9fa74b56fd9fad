"""
Example GitHub agent.
Interactive chat interface for trying the GitHub tools with a Strands agent.

Usage:
    toolsette-github-agent                 # Interactive mode
    toolsette-github-agent 'query'         # Single query
    toolsette-github-agent --help          # Show help

Environment Variables:
    ANTHROPIC_API_KEY: Anthropic API key (required)
    ANTHROPIC_MODEL_ID: Model to use (default: claude-sonnet-4-20250514)
    GITHUB_TOKEN: GitHub token bound to every tool. Without it only
        anonymous read actions succeed.
"""

import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from strands import Agent

from toolsette_github.client import get_token
from toolsette_github.github import ALL_TOOLS
from toolsette_github.registry import BearerAuth, format_tools, with_auth

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "claude-sonnet-4-20250514"

SYSTEM_PROMPT = """You are a GitHub assistant.

You can read and manage gists, issues, issue comments, labels, pull requests
and repositories through the GitHub REST API.

Rules:
- Confirm with the user before deleting a gist, comment, label or repository
- Quote the URL of anything you create
- When a tool fails, explain the error and the hint it returned
"""


def build_tools(token: Optional[str] = None) -> list:
    """Strands tools for every GitHub endpoint, bound to ``token`` when given."""
    tools = ALL_TOOLS
    if token:
        tools = with_auth(tools, BearerAuth(api_key=token))
    return list(format_tools(tools, "strands").values())


def create_agent() -> Agent:
    """Create and configure the agent."""
    from strands.models.anthropic import AnthropicModel

    api_key = os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        print("❌ Error: ANTHROPIC_API_KEY not found")
        print("   Create a .env file with your API key")
        sys.exit(1)

    token = get_token()
    if not token:
        logger.warning("GITHUB_TOKEN not set; only anonymous read actions will work")

    model = AnthropicModel(
        client_args={"api_key": api_key},
        max_tokens=4000,
        model_id=os.getenv("ANTHROPIC_MODEL_ID", DEFAULT_MODEL_ID),
        params={"temperature": 0.2},
    )

    return Agent(model=model, system_prompt=SYSTEM_PROMPT, tools=build_tools(token))


def print_usage(agent: Agent) -> None:
    """Print the token usage accumulated by the agent so far."""
    usage = agent.event_loop_metrics.get_summary()["accumulated_usage"]
    print("\n📊 Token Usage:")
    print(f"  Input:  {usage['inputTokens']:,}")
    print(f"  Output: {usage['outputTokens']:,}")
    print(f"  Total:  {usage['totalTokens']:,}\n")


def interactive_mode(agent: Agent) -> None:
    """Run agent in interactive chat mode."""
    print("🤖 GitHub Agent (type 'quit' to exit, 'metrics' to see usage)\n")

    while True:
        try:
            user_input = input("You: ").strip()

            if not user_input:
                continue

            if user_input.lower() in ["quit", "exit", "q"]:
                print("\n👋 Goodbye!")
                break

            if user_input.lower() == "metrics":
                print_usage(agent)
                continue

            response = agent(user_input)
            print(f"\nAgent: {response}\n")

        except (KeyboardInterrupt, EOFError):
            print("\n\n👋 Goodbye!")
            break
        except Exception as e:
            logger.exception("Agent call failed")
            print(f"\n❌ Error: {e}\n")


def single_query_mode(agent: Agent, query: str) -> None:
    """Run agent with a single query."""
    print(f"Query: {query}\n")

    try:
        response = agent(query)
        print(f"Response: {response}\n")
        metrics = agent.event_loop_metrics.get_summary()
        print("📊 Metrics:")
        print(f"  Tokens: {metrics['accumulated_usage']['totalTokens']}")
    except Exception as e:
        logger.exception("Agent call failed")
        print(f"❌ Error: {e}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ["-h", "--help"]:
        print("GitHub Agent\n")
        print("Usage:")
        print("  toolsette-github-agent              # Interactive mode")
        print("  toolsette-github-agent 'query'      # Single query")
        print("  toolsette-github-agent --help       # Show this help")
        return

    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    agent = create_agent()

    if args:
        single_query_mode(agent, " ".join(args))
    else:
        interactive_mode(agent)


if __name__ == "__main__":
    main()
