[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kuborpc"
version = "0.1.0"
description = "Async client for the Kubo RPC API: CIDs, raw blocks, IPNS publishing and resolving, and key generation"
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["ipfs", "ipns", "kubo", "rpc", "cid", "multibase", "async"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[tool.hatch.build.targets.wheel]
packages = ["kuborpc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
