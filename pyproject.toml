[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hmnguard"
version = "0.1.0"
description = "Ethical guardrails for human-centred agents: decision traces, block policies, misuse detection, trust circles and introspective journaling."
requires-python = ">=3.10"
dependencies = []
keywords = ["ethics", "agents", "guardrails", "introspection", "journaling", "trust"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hmnguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
