[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spellfix"
version = "0.1.0"
description = "Dictionary-based spelling checker that suggests corrections for misspelt words"
requires-python = ">=3.10"
dependencies = []
keywords = ["spelling", "spell-check", "autocorrect", "dictionary", "suggestions", "anagram"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spellfix = "spellfix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["spellfix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
