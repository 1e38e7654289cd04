# jvmtools

Small helpers for tooling that builds or packages JVM applications. The package has
no third-party dependencies.

## Installation

```
pip install jvmtools
```

## Java version checks

`jvmtools.versions` tells whether a version string is older than Java 9, 17 or 18.

```python
from jvmtools.versions import is_before_java9, is_before_java17, is_before_java18

is_before_java9("8.0.0")    # True
is_before_java9("9.0.0")    # False
is_before_java17("16.0.0")  # True
is_before_java17("17.0.0")  # False
is_before_java18("")        # False
```

Versions are read as loose semantic versions: an optional leading `v`, a major number,
optional minor and patch numbers, and optional `-prerelease` and `+metadata` parts.
A pre-release sorts before its release, so `9.0.0-ea` is before Java 9. A string that
cannot be read as a version is never "before" anything: the functions return `False`.

## Reading `.sdkmanrc` files

`jvmtools.sdkman.read_sdkmanrc(path)` returns the SDKs listed in the file, in file
order, as `SDKInfo` objects (frozen dataclasses with `type`, `version` and `vendor`).

```python
from jvmtools.sdkman import read_sdkmanrc

for sdk in read_sdkmanrc(".sdkmanrc"):
    print(sdk.type, sdk.version, sdk.vendor)
```

- A line such as `java=17.0.2-tem` yields `SDKInfo(type="java", version="17.0.2", vendor="tem")`.
- The value is split at its first `-` into version and vendor; without a `-` the vendor is `""`.
- An empty value gives an empty version and vendor; an empty key gives an empty type.
- Type and vendor are lower-cased; all three fields are stripped of surrounding whitespace.
- Everything after `#` is a comment; blank and comment-only lines are skipped.
- Repeated entries are all returned.

A missing or unreadable file raises `OSError` (for instance `FileNotFoundError`); a
line with content but no `=` raises `ValueError`.

## Listing Maven JARs

`jvmtools.maven_jar_listing.new_maven_jar_listing(*roots)` describes every `.jar`
file under the given directories as a `MavenJAR` (a frozen, ordered dataclass with
`name`, `version` and `sha256`).

```python
from jvmtools.maven_jar_listing import new_maven_jar_listing

for jar in new_maven_jar_listing("app/lib", "app/BOOT-INF/lib"):
    print(jar.name, jar.version, jar.sha256)
```

- Each root is resolved through symbolic links and walked recursively; a root that is
  itself a `.jar` file is included too.
- Roots that do not exist are skipped.
- Files named after the Maven convention, `<name>-<version>.jar` where the version starts
  with a digit, are split at the last such hyphen into name and version; any other file
  keeps its file name as `name` and gets the version `unknown`.
- `sha256` is the lower-case hex SHA-256 digest of the file's contents. Files are hashed
  in parallel on a thread pool.
- The result is sorted by name, then version, then hash.

A root that cannot be resolved, a walk that fails, or a file that cannot be read raises
`OSError`.

## What this package does not do

It is a library only: there is no command-line program. It reads version strings,
`.sdkmanrc` files and JAR files on disk; it does not download, install or configure
JDKs or JREs, and it does not edit keystores or certificates.

## Running the tests

```
pip install -e ".[test]"
pytest
```