[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wargproof"
version = "0.1.0"
description = "Verifiable Merkle log and sparse Merkle map with inclusion and consistency proofs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "merkle",
    "transparency",
    "verifiable-log",
    "sparse-merkle-tree",
    "inclusion-proof",
    "consistency-proof",
    "protobuf",
]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wargproof-grep = "wargproof.grep:main"

[tool.hatch.build.targets.wheel]
packages = ["wargproof"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
