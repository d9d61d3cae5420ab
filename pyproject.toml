[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unisym"
version = "0.1.0"
description = "Themed Unicode symbols for terminal tools, with ASCII fallbacks and Unicode security checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "symbols", "terminal", "cli", "editor", "themes", "security"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unisym-demo-basic = "unisym.demo_basic:main"
unisym-demo-git-status = "unisym.demo_git_status:main"
unisym-demo-file-browser = "unisym.demo_file_browser:main"
unisym-demo-security = "unisym.demo_security:main"

[tool.hatch.build.targets.wheel]
packages = ["unisym"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
