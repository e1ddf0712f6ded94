[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "factionbayes"
version = "0.1.0"
description = "Naive Bayes classifiers that predict a robot's faction from its eye colour, mode and skill"
requires-python = ">=3.10"
dependencies = []
keywords = ["naive bayes", "classifier", "machine learning", "laplace smoothing", "categorical data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
factionbayes-fixed-vocab = "factionbayes.fixed_vocab:main"
factionbayes-combined = "factionbayes.combined:main"
factionbayes-subsets = "factionbayes.subsets:main"
factionbayes-smoothed-prior = "factionbayes.smoothed_prior:main"

[tool.hatch.build.targets.wheel]
packages = ["factionbayes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
