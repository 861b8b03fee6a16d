[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matchbook"
version = "0.1.0"
description = "Limit order books with price and price-time matching, a multi-symbol exchange, a thread-safe order queue and demonstration commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "matching engine", "exchange", "trading", "limit orders", "queue", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matchbook = "matchbook.cli:main"
matchbook-exchange-demo = "matchbook.exchange_demo:main"
matchbook-management-demo = "matchbook.management_demo:main"
matchbook-streaming-demo = "matchbook.streaming_demo:main"
matchbook-queue-demo = "matchbook.queue_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["matchbook"]

[tool.hatch.build.targets.sdist]
include = ["matchbook", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
