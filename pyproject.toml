[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "payroll-seed"
version = "0.1.0"
description = "Fill a payroll database with fake workers, crews, payrolls and daily earnings."
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "sqlite", "seed", "fake data", "fixtures", "database"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
payroll-seed = "payroll_seed.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["payroll_seed"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
