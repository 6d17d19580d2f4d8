[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "organic-guard"
version = "0.1.0a0"
description = "Biophysical risk envelopes, neurorights invariants, sovereign identity and guarded device access for organic compute hosts"
requires-python = ">=3.10"
dependencies = []
keywords = ["neurorights", "biophysical", "sovereignty", "DID", "guard", "audit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "hypothesis>=6.90",
]

[tool.hatch.build.targets.wheel]
packages = ["organic_guard"]

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
