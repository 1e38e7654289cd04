"""Helpers for JVM build tooling: Maven JAR listings, .sdkmanrc parsing and Java version checks."""

__version__ = "0.1.0"
__all__ = ["maven_jar_listing", "sdkman", "versions"]