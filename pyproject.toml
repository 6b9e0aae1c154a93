[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "vimbcore"
version = "2.10.0"
description = "Core logic of a vim-like web browser: ex command parsing, autocommands, bookmarks, URI queue, hint prompts, URI handlers and auto response headers."
requires-python = ">=3.10"
dependencies = []
keywords = ["browser", "vim", "ex-commands", "bookmarks", "autocmd", "hints"]
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
    "Topic :: Internet :: WWW/HTTP :: Browsers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["vimbcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
