"""Version string helpers shared by the runtime resolvers."""


def extract_major_minor(version: str) -> str:
    """Reduce a semantic version to major.minor ("8.0.100" -> "8.0").

    Versions with fewer than two components are returned unchanged.
    """
    parts = version.split(".")
    if len(parts) >= 2:
        return f"{parts[0]}.{parts[1]}"
    return version
