[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "admincommon"
version = "0.1.0"
description = "Shared building blocks for admin back-end services: configuration, request context, data permissions, i18n, tokens, password hashing and captcha storage."
requires-python = ">=3.10"
keywords = [
    "admin",
    "backend",
    "configuration",
    "jwt",
    "bcrypt",
    "i18n",
    "captcha",
    "redis",
    "mongodb",
    "data-permission",
    "multi-tenant",
]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "bcrypt>=4.0",
    "pyjwt>=2.6",
    "redis>=4.5",
    "pymongo>=4.3",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["admincommon"]

[tool.hatch.build.targets.sdist]
include = [
    "admincommon",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
