import importlib.metadata


def user_agent_value() -> str:
    product = "jsonrequest-python"

    try:
        version = importlib.metadata.version("jsonrequest")
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"

    return f"{product}/{version}"
