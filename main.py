#!/usr/bin/env python3
"""
Sig - The Xibo Signage Assistant

Entry point for running Sig interactively or as a single query.

Usage:
    # Interactive mode
    python main.py

    # Single query mode
    python main.py --query "Which displays are offline?"

Environment variables (or .env file):
    CMS_URL: Base URL of your Xibo CMS, e.g. https://signage.example.com
    XIBO_CLIENT_ID: API application client id
    XIBO_CLIENT_SECRET: API application client secret
    XIBO_AUTH_MODE: (optional) "oauth" (default) or "basic"
    XIBO_TIMEOUT: (optional) Request timeout in seconds, defaults to 30
    XIBO_CACHE_TOKENS: (optional) Reuse access tokens until they expire, defaults to true
    XIBO_UPLOAD_DIR: (optional) Directory relative upload paths resolve against
    ANTHROPIC_API_KEY: Your Anthropic API key
    CLAUDE_MODEL: (optional) Model to use, defaults to claude-haiku-4-5-20251001
"""

import argparse
import asyncio
import dataclasses
import logging
import os
import sys

from dotenv import load_dotenv


def main() -> None:
    """Main entry point."""
    # Load environment variables from .env file
    load_dotenv()

    from src.signage.config import AUTH_MODES, CmsConfig
    from src.signage.errors import ConfigurationError

    parser = argparse.ArgumentParser(
        description="Sig - The Xibo Signage Assistant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--query", "-q",
        type=str,
        help="Single query mode: send a query and print the response"
    )
    parser.add_argument(
        "--cms-url",
        type=str,
        default=None,
        help="Xibo CMS base URL (or set CMS_URL env var)"
    )
    parser.add_argument(
        "--client-id",
        type=str,
        default=None,
        help="Xibo API client id (or set XIBO_CLIENT_ID env var)"
    )
    parser.add_argument(
        "--client-secret",
        type=str,
        default=None,
        help="Xibo API client secret (or set XIBO_CLIENT_SECRET env var)"
    )
    parser.add_argument(
        "--auth-mode",
        type=str,
        choices=AUTH_MODES,
        default=None,
        help="Authentication mode (or set XIBO_AUTH_MODE env var, default: oauth)"
    )
    parser.add_argument(
        "--model",
        type=str,
        default=os.getenv("CLAUDE_MODEL", "claude-haiku-4-5-20251001"),
        help="Claude model to use (default: claude-haiku-4-5-20251001)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.getenv("LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = CmsConfig.from_env()
        overrides = {
            "cms_url": args.cms_url,
            "client_id": args.client_id,
            "client_secret": args.client_secret,
            "auth_mode": args.auth_mode,
        }
        config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})
    except ConfigurationError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    # Validate required configuration
    if not config.cms_url:
        print("Error: Xibo CMS URL is required.")
        print("Set CMS_URL environment variable or use --cms-url flag.")
        sys.exit(1)

    if not config.client_id or not config.client_secret:
        print("Error: Xibo API client credentials are required.")
        print("Set XIBO_CLIENT_ID and XIBO_CLIENT_SECRET environment variables "
              "or use --client-id and --client-secret flags.")
        sys.exit(1)

    if not os.getenv("ANTHROPIC_API_KEY"):
        print("Error: ANTHROPIC_API_KEY environment variable is required.")
        print("Get your API key from https://console.anthropic.com/")
        sys.exit(1)

    # Import agent functions (after validation to avoid import errors)
    from src.signage.agent import run_sig_interactive, query_sig

    if args.query:
        result = asyncio.run(query_sig(
            prompt=args.query,
            config=config,
            model=args.model
        ))
        print(result)
    else:
        asyncio.run(run_sig_interactive(
            config=config,
            model=args.model
        ))


if __name__ == "__main__":
    main()
