"""Read and write the line-oriented ``.properties`` files Gradle consumes."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import javaproperties

# java.util.Properties#load(InputStream) decodes ISO-8859-1; dump escapes the rest.
ENCODING = "iso-8859-1"


def read_properties(path: Path) -> javaproperties.PropertiesFile:
    """Load ``path`` keeping comments, ordering and separators of untouched lines."""
    with path.open("r", encoding=ENCODING) as fp:
        return javaproperties.PropertiesFile.load(fp)


def write_properties(path: Path, properties: javaproperties.PropertiesFile | Mapping[str, str]) -> None:
    with path.open("w", encoding=ENCODING) as fp:
        if isinstance(properties, javaproperties.PropertiesFile):
            properties.dump(fp)
        else:
            javaproperties.dump(properties, fp, timestamp=False)
