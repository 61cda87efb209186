[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tapenet"
version = "0.1.0"
description = "HTTP/1.x, WebSocket and length-prefixed message framing with event-driven server dispatch"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "websocket", "framing", "parser", "server", "chunked"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tapenet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
