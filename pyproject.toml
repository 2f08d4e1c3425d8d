[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfepub"
version = "0.5.0"
description = "Building blocks for turning PDF documents into e-books: tokens, document model, fonts, XML writing and ZIP packaging."
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "epub", "ebook", "xml", "zip", "deflate"]
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
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdfepub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
