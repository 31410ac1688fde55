"""Lexical analysis of Rust-like source text, with an aiohttp WebSocket server."""

__version__ = "0.1.0"