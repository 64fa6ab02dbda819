[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatmessages"
version = "0.1.0"
description = "Message packages for chat between users and agents: text, image, file and crypto transfer messages."
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["chat", "messaging", "agent", "messages"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chatmessages"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
