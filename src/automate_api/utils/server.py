import re

SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


def normalize_server(server: str | None) -> str:
    """Reduce a server address to its bare host, e.g. ``https://host/foo`` -> ``host``."""
    if not server:
        return ""

    server = SCHEME.sub("", server.strip())

    return server.split("/", 1)[0].strip()


def base_uri(server: str, api_path: str = "/cwa/api") -> str:
    return f"https://{server}/{api_path.strip('/')}"
