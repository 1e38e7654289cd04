[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jvmtools"
version = "0.1.0"
description = "Helpers for JVM build tooling: Maven JAR listings, .sdkmanrc parsing and Java version checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["jvm", "java", "maven", "sdkman", "jar", "sha256"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jvmtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
