[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustlexer"
version = "0.1.0"
description = "A lexical analyzer for Rust-like source text, with a WebSocket server that returns categorized tokens"
requires-python = ">=3.10"
keywords = ["lexer", "tokenizer", "rust", "websocket", "finite automata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Framework :: aiohttp",
]
dependencies = [
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
rustlexer = "rustlexer.server:main"

[tool.hatch.build.targets.wheel]
packages = ["rustlexer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
