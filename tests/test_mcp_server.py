"""Tests for the MCP server over a review store."""

import asyncio
from pathlib import Path

import pytest

pytest.importorskip("mcp")

from reviewpack.review import Reviewer  # noqa: E402
from reviewpack.server import create_mcp_server  # noqa: E402
from reviewpack.storage import ReviewStore  # noqa: E402


def test_server_exposes_review_tools(tmp_path: Path, console_file: Path, small_config):
    db = tmp_path / "out.reviewpack"
    store = ReviewStore(db)
    store.initialize()
    store.store_review(Reviewer(small_config).review_path(console_file))

    mcp = create_mcp_server(db)
    tools = asyncio.run(mcp.list_tools())

    assert {tool.name for tool in tools} == {"ls", "findings", "chunks", "locate"}
